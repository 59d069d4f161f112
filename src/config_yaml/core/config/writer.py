# src/config_yaml/core/config/writer.py
"""
Escrita canônica do estado de configuração em YAML.

Decisões (v1):
- Formato: YAML, documento único, via `yaml.safe_dump`
- O arquivo de destino é sobrescrito integralmente
- O documento é serializado antes da abertura do arquivo, de modo que um
  valor não representável não deixa o destino truncado

Limites explícitos:
- Não cria diretórios intermediários
- Não oferece escrita atômica nem locking
- Não filtra chaves: quem chama decide o que é persistido
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml  # PyYAML

from .errors import ConfigWriteError
from .options import DumpOptions


def dump_document(data: Mapping[str, Any], options: Optional[DumpOptions] = None) -> str:
    """Serializa `data` como um documento YAML e retorna o texto."""
    opts = options or DumpOptions()
    return yaml.safe_dump(dict(data), **opts.to_dict())


def write_file(
    path: Union[str, os.PathLike],
    data: Mapping[str, Any],
    options: Optional[DumpOptions] = None,
) -> Path:
    """
    Grava `data` em `path` como YAML, sobrescrevendo o arquivo existente.

    Args:
        path: Caminho do arquivo de saída.
        data: Mapa a ser persistido.
        options: Estilo de serialização (default: `DumpOptions()`).

    Returns:
        Path: Caminho efetivamente escrito.

    Raises:
        ConfigWriteError: Se o arquivo não puder ser aberto para escrita.
        yaml.representer.RepresenterError: Se algum valor não for representável.
    """
    document = dump_document(data, options)

    file = Path(path)
    try:
        fh = file.open("w", encoding="utf-8")
    except OSError as exc:
        raise ConfigWriteError(file, exc.strerror or str(exc)) from exc

    with fh:
        fh.write(document)

    return file
