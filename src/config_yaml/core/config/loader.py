# src/config_yaml/core/config/loader.py
"""
Loader canônico de arquivos de configuração YAML do config-yaml.

Este módulo é responsável por ler um arquivo de configuração do disco,
descartar as linhas que não fazem parte do documento e interpretar o
restante como um único documento YAML cuja raiz é um mapa.

Política de leitura (v1):
    - Linhas iniciadas por três ou mais hífens (separador de documento)
      são descartadas
    - Linhas iniciadas por `#` na coluna zero (comentários) são descartadas
    - Linhas vazias são descartadas
    - As linhas restantes são concatenadas sem alteração e interpretadas
      como um documento único

Decisões arquiteturais:
    - Arquivos com múltiplos documentos não são suportados: como os
      separadores são removidos, todas as seções viram um único mapa
    - Um documento vazio equivale a um mapa vazio
    - Falha ao abrir o arquivo é fatal para a operação (`ConfigReadError`)
    - Erros de sintaxe YAML propagam a exceção do PyYAML sem encapsulamento

Invariantes:
    - O retorno é sempre um dicionário
    - O arquivo é sempre fechado, inclusive em caso de erro

Limites explícitos:
    - Não valida schema
    - Não combina o resultado com nenhum estado (ver `merge.fold_into`)
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Dict, Iterable, Union

import yaml  # PyYAML

from .errors import ConfigReadError, InvalidConfigRootTypeError


_DOCUMENT_SEPARATOR = re.compile(r"^-{3,}")


def _is_document_line(line: str) -> bool:
    if _DOCUMENT_SEPARATOR.match(line):
        return False
    if line.startswith("#"):
        return False
    if line.rstrip("\r\n") == "":
        return False
    return True


def filter_document_lines(lines: Iterable[str]) -> str:
    """
    Remove separadores, comentários e linhas vazias, devolvendo o texto restante.

    As linhas mantidas são concatenadas exatamente como foram lidas,
    incluindo seus terminadores de linha.

    Args:
        lines (Iterable[str]): Linhas do arquivo, com terminadores.

    Returns:
        str: Texto do documento a ser interpretado.
    """
    return "".join(line for line in lines if _is_document_line(line))


def read_document_text(path: Union[str, os.PathLike]) -> str:
    """
    Lê o arquivo em `path` linha a linha e aplica `filter_document_lines`.

    Raises:
        ConfigReadError: Se o arquivo não puder ser aberto para leitura.
    """
    file = Path(path)
    try:
        fh = file.open("r", encoding="utf-8")
    except OSError as exc:
        raise ConfigReadError(file, exc.strerror or str(exc)) from exc

    with fh:
        return filter_document_lines(fh)


def parse_document(text: str, *, source: str = "<string>") -> Dict[str, Any]:
    """
    Interpreta `text` como um único documento YAML cuja raiz é um mapa.

    Args:
        text (str): Documento YAML já filtrado.
        source (str): Origem do texto, usada em mensagens de erro.

    Returns:
        Dict[str, Any]: Conteúdo do documento; `{}` para documento vazio.

    Raises:
        InvalidConfigRootTypeError: Se a raiz não for um mapa.
        yaml.YAMLError: Se o texto não for YAML válido.
    """
    data = yaml.safe_load(text)

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(type(data).__name__, source=source)

    return data


def load_file(path: Union[str, os.PathLike]) -> Dict[str, Any]:
    """
    Lê e interpreta um arquivo de configuração YAML.

    Esta é a composição de `read_document_text` e `parse_document`,
    utilizada pela store a cada `load()`.

    Args:
        path (Union[str, os.PathLike]): Caminho do arquivo.

    Returns:
        Dict[str, Any]: Mapa raiz do documento.

    Raises:
        ConfigReadError: Se o arquivo não puder ser aberto.
        InvalidConfigRootTypeError: Se a raiz do documento não for um mapa.
        yaml.YAMLError: Se o conteúdo não for YAML válido.
    """
    text = read_document_text(path)
    return parse_document(text, source=os.fspath(path))
