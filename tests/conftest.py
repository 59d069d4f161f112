# tests/conftest.py
"""
Fixtures compartilhados para testes do config-yaml.

Este módulo define fixtures reutilizáveis que fornecem:
- conteúdos YAML determinísticos (como string)
- arquivos de configuração já gravados em `tmp_path`

Decisões arquiteturais:
    - Conteúdos YAML são fornecidos como string e gravados apenas
      pelos fixtures de arquivo, mantendo o I/O explícito
    - Cada teste recebe um diretório temporário isolado

Invariantes:
    - Todo YAML fornecido é sintaticamente válido
    - Nenhuma fixture cria a store: a construção é sempre feita no teste

Este módulo existe como infraestrutura de teste e não
como validação funcional da biblioteca.
"""

from pathlib import Path

import pytest


# =====================================================
# Conteúdos YAML
# =====================================================

@pytest.fixture
def seed_yaml() -> str:
    """
    YAML mínimo com um escalar e uma sequência.

    Usado por:
        - Testes de construção e acesso por chave
        - Testes de round-trip de persistência

    Returns:
        str: Conteúdo YAML com `clobber` e `media`.
    """
    return """\
clobber: 1
media: [mp3, ogg, wav]
"""


@pytest.fixture
def annotated_yaml() -> str:
    """
    YAML com separador de documento, comentários e linhas vazias.

    Representa um arquivo editado à mão, com cabeçalho `---` e seções
    comentadas, que o loader deve aceitar como um único documento.

    Returns:
        str: Conteúdo YAML com ruído tolerado pelo loader.
    """
    return """\
---
# gallery settings
title: Sunflowers

# rendering
render:
  width: 800
  height: 600
tags:
  - oil
  - canvas
"""


# =====================================================
# Arquivos em disco
# =====================================================

@pytest.fixture
def seed_config(tmp_path: Path, seed_yaml: str) -> Path:
    """Arquivo `config.yaml` gravado em `tmp_path` com o conteúdo de `seed_yaml`."""
    path = tmp_path / "config.yaml"
    path.write_text(seed_yaml, encoding="utf-8")
    return path


@pytest.fixture
def annotated_config(tmp_path: Path, annotated_yaml: str) -> Path:
    path = tmp_path / "gallery.yaml"
    path.write_text(annotated_yaml, encoding="utf-8")
    return path
