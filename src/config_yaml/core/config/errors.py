# src/config_yaml/core/config/errors.py
"""
Exceções canônicas da camada de configuração do config-yaml.

Este módulo define a hierarquia oficial de exceções utilizadas durante
a construção da store, o carregamento de arquivos YAML e a persistência
do estado de configuração.

Existem apenas dois tipos de falha previstos:
    - Erro de configuração: a store foi criada sem caminho de entrada
    - Erro de I/O: o arquivo de entrada não pode ser lido ou o arquivo
      de saída não pode ser escrito

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Toda falha é fatal para a operação em curso (sem retry, sem fallback)
    - O processo nunca é encerrado pela biblioteca; o programa hospedeiro
      decide o que fazer com a exceção

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Toda exceção carrega um `ConfigErrorPayload` serializável
    - Erros de I/O preservam o texto do erro do sistema operacional

Limites explícitos:
    - Erros de sintaxe YAML não são encapsulados (propagam `yaml.YAMLError`)
    - Não realiza validação de schema
"""

from __future__ import annotations

import os
from typing import Optional, Union

from config_yaml.core.errors import (
    ConfigErrorPayload,
    config_invalid_root,
    config_path_missing,
    config_read_failed,
    config_write_failed,
)


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do config-yaml.

    Todas as exceções levantadas durante construção, carregamento e
    persistência da store herdam desta classe, permitindo captura
    genérica pelo programa hospedeiro.

    Attributes:
        message (str): Mensagem curta e humana.
        payload (Optional[ConfigErrorPayload]): Representação estruturada do erro.
    """

    def __init__(self, message: str, *, payload: Optional[ConfigErrorPayload] = None):
        super().__init__(message)
        self.message = message
        self.payload = payload

    def to_dict(self) -> dict:
        if self.payload is None:
            return {"type": type(self).__name__, "message": self.message, "details": {}, "hint": None}
        return self.payload.to_dict()


class MissingConfigPathError(ConfigError):
    """
    Exceção levantada quando a store é construída sem caminho de entrada.

    Decisões arquiteturais:
        - O caminho de entrada é obrigatório e deve ser o primeiro argumento
        - A falha ocorre antes de qualquer tentativa de I/O
    """

    def __init__(self) -> None:
        payload = config_path_missing()
        super().__init__(f"{payload.message}.", payload=payload)


class ConfigIOError(ConfigError):
    """
    Base para falhas de abertura de arquivo durante leitura ou escrita.

    A exceção original do sistema (`OSError`) é encadeada via `raise ... from`
    pelo chamador; aqui ficam apenas o caminho e o texto do erro.

    Attributes:
        path (str): Caminho que não pôde ser aberto.
        reason (str): Texto do erro do sistema operacional.
    """

    def __init__(self, path: Union[str, os.PathLike], reason: str, *, payload: ConfigErrorPayload):
        self.path = os.fspath(path)
        self.reason = reason
        super().__init__(f"{payload.message}: {reason}", payload=payload)


class ConfigReadError(ConfigIOError):
    """O arquivo de entrada não pôde ser aberto para leitura."""

    def __init__(self, path: Union[str, os.PathLike], reason: str):
        payload = config_read_failed(path=os.fspath(path), reason=reason)
        super().__init__(path, reason, payload=payload)


class ConfigWriteError(ConfigIOError):
    """O arquivo de saída não pôde ser aberto para escrita."""

    def __init__(self, path: Union[str, os.PathLike], reason: str):
        payload = config_write_failed(path=os.fspath(path), reason=reason)
        super().__init__(path, reason, payload=payload)


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz de um documento ou de um
    `fold` não é um mapa chave-valor.

    Decisões arquiteturais:
        - A store só opera sobre mapas no nível raiz
        - Listas ou escalares no root são inválidos

    Limites explícitos:
        - Não tenta normalizar ou encapsular estruturas inválidas
    """

    def __init__(self, received_type: str, *, source: Optional[str] = None):
        payload = config_invalid_root(received_type=received_type, source=source)
        self.received_type = received_type
        self.source = source
        super().__init__(payload.message, payload=payload)
