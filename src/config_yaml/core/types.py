# src/config_yaml/core/types.py
"""
Tipos canônicos da store de configuração do config-yaml.

Componentes principais:
    - StoreState → enum do ciclo de vida da store (UNINITIALIZED, LOADED)

Limites explícitos:
    - Não contém lógica de carregamento ou persistência
"""

from __future__ import annotations

from enum import Enum


class StoreState(str, Enum):
    """
    Estados do ciclo de vida de uma `ConfigStore`.

    Estados definidos:
        - UNINITIALIZED: nenhum arquivo foi carregado ainda
        - LOADED: ao menos um `load()` foi concluído com sucesso

    Decisões arquiteturais:
        - A transição é única e irreversível (UNINITIALIZED → LOADED)
        - `fold()` e `set()` não alteram o estado
        - `persist()` é permitido em qualquer estado

    Os valores são strings para facilitar serialização em eventos.
    """
    UNINITIALIZED = "uninitialized"
    LOADED = "loaded"
