# src/config_yaml/core/config/__init__.py

"""
Camada de configuração do config-yaml.

Este pacote contém os utilitários responsáveis por ler, combinar e gravar
arquivos de configuração YAML em nome da `ConfigStore`.

Responsabilidades do pacote:
    - Leitura de arquivos YAML com descarte de separadores, comentários
      e linhas vazias (`loader`)
    - Combinação last-write-wins no nível raiz (`merge`)
    - Serialização e escrita do estado (`writer`, `options`)
    - Exceções tipadas de configuração e I/O (`errors`)

Princípios fundamentais:
    - Nenhuma heurística implícita durante o fold
    - Falhas de I/O são fatais para a operação e nunca silenciadas
    - A mesma entrada sempre produz o mesmo mapa

Limites explícitos:
    - Não valida schema
    - Não navega em caminhos aninhados
    - Não suporta múltiplos documentos YAML
"""
