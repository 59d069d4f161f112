"""
config-yaml — configuração em YAML com get/set/fold e persistência explícita.

API pública:
    - ConfigStore  → store de configuração (load, fold, get, set, persist)
    - DumpOptions  → estilo de serialização YAML usado por `persist`
    - StoreState   → ciclo de vida da store
    - ConfigError e subclasses → falhas tipadas de configuração e I/O
"""

import logging

from config_yaml.core.config.errors import (
    ConfigError,
    ConfigIOError,
    ConfigReadError,
    ConfigWriteError,
    InvalidConfigRootTypeError,
    MissingConfigPathError,
)
from config_yaml.core.config.options import DumpOptions
from config_yaml.core.store import ConfigStore
from config_yaml.core.types import StoreState

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    "ConfigStore",
    "DumpOptions",
    "StoreState",
    "ConfigError",
    "ConfigIOError",
    "ConfigReadError",
    "ConfigWriteError",
    "InvalidConfigRootTypeError",
    "MissingConfigPathError",
]
