"""
Utilitário canônico de fold de configuração.

Este módulo implementa a política oficial de combinação utilizada pelo
config-yaml para integrar dados de qualquer origem (arquivo YAML, defaults
do construtor, argumentos de linha de comando) ao estado da store.

Política de fold (v1):
    - Apenas o nível raiz é considerado
    - Cada chave do mapa recebido sobrescreve integralmente a chave da store
    - dict e list não são combinados elemento a elemento (sem deep-merge)
    - Chaves ausentes no mapa recebido são preservadas

Invariantes:
    - A ordem de inserção do mapa recebido é respeitada
    - Nenhuma chave é removida do destino
    - Valores são ligados por referência, sem cópia

Limites explícitos:
    - Não carrega arquivos
    - Não valida schema nem tipos de valores
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any, List, Optional

from .errors import InvalidConfigRootTypeError


def fold_into(
    target: MutableMapping,
    data: Any,
    *,
    source: Optional[str] = None,
) -> List[str]:
    """
    Combina `data` sobre `target` com política last-write-wins no nível raiz.

    Args:
        target (MutableMapping): Mapa de destino (mutado in-place).
        data (Mapping): Mapa cujas chaves sobrescrevem o destino.
        source (Optional[str]): Origem dos dados, usada apenas em mensagens de erro.

    Returns:
        List[str]: Chaves escritas no destino, na ordem de `data`.

    Raises:
        InvalidConfigRootTypeError: Se `data` não for um mapa.
    """
    if not isinstance(data, Mapping):
        raise InvalidConfigRootTypeError(type(data).__name__, source=source)

    folded: List[str] = []
    for key, value in data.items():
        target[key] = value
        folded.append(key)
    return folded
