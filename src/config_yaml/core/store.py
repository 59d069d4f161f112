# src/config_yaml/core/store.py
"""
Store de configuração do config-yaml.

Este módulo define a `ConfigStore`, um mapa mutável de chaves de
configuração (nível raiz) para valores YAML, que lembra de onde foi
carregado e para onde deve ser persistido.

Fluxo típico:
    1. A store é criada com o caminho do arquivo principal, opcionalmente
       um caminho de saída e defaults
    2. Outros arquivos podem ser integrados com `load(path)`
    3. Overrides de outras fontes (ex.: argparse) entram via `fold`
    4. O estado é gravado explicitamente com `persist()`

Decisões arquiteturais:
    - Caminhos de entrada e saída são atributos da store, fora do mapa
      de chaves; nenhuma chave de usuário é filtrada na persistência
    - Acesso por chave (`store["media"][1]`) é o único acesso direto;
      não existe acesso por atributo às chaves
    - Toda combinação é last-write-wins no nível raiz (sem deep-merge)
    - Falhas são exceções tipadas (`ConfigError`); o processo nunca é
      encerrado pela store

Invariantes:
    - `output_path` é igual a `input_path` quando não informado
    - `load` e `fold` apenas adicionam ou sobrescrevem chaves
    - `persist` não altera o estado em memória

Limites explícitos:
    - Não há get/set em caminhos aninhados
    - Não há suporte a múltiplos documentos YAML
    - Não é thread-safe
"""

from __future__ import annotations

import copy
import logging
import os
from collections.abc import Mapping, MutableMapping
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union

from config_yaml.core.config.errors import MissingConfigPathError
from config_yaml.core.config.loader import load_file
from config_yaml.core.config.merge import fold_into
from config_yaml.core.config.options import DumpOptions
from config_yaml.core.config.writer import write_file
from config_yaml.core.traceability.events import build_event, emit
from config_yaml.core.types import StoreState


logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


class ConfigStore(MutableMapping):
    """
    Mapa de configuração carregado de um arquivo YAML.

    Args:
        config: Caminho do arquivo de entrada (obrigatório, primeiro posicional).
        output: Caminho do arquivo de saída (opcional, apenas como segundo
            posicional). Quando omitido, a saída é o próprio arquivo de entrada.
        **defaults: Valores iniciais, sobrescritos pelo que estiver no arquivo.
            Como `config` e `output` são apenas posicionais, `config=...` e
            `output=...` passados por nome viram chaves comuns.

    Raises:
        MissingConfigPathError: Se `config` não for informado.
        ConfigReadError: Se o arquivo de entrada não puder ser lido.

    Exemplo:
        >>> c = ConfigStore("app.yaml", "~/.apprc", verbose=False)
        >>> c.load("user.yaml")
        >>> c.set("verbose", True)
        >>> c.persist()
    """

    dump_options: DumpOptions = DumpOptions()

    def __init__(self, config: Optional[PathLike] = None, output: Optional[PathLike] = None, /, **defaults: Any):
        if config is None or os.fspath(config) == "":
            raise MissingConfigPathError()

        self.input_path = Path(config)
        self.output_path = Path(output) if output else self.input_path
        self.state = StoreState.UNINITIALIZED
        self.events: List[Dict[str, Any]] = []
        self._data: Dict[str, Any] = {}

        if defaults:
            keys = fold_into(self._data, defaults, source="defaults")
            self.log("DEBUG", "defaults aplicados", event_type="defaults_applied", keys=keys)

        self.load()

    # ------------------------------------------------------------------
    # Mapping protocol
    # ------------------------------------------------------------------
    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(input_path={str(self.input_path)!r}, "
            f"output_path={str(self.output_path)!r}, keys={list(self._data)!r})"
        )

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    def get(self, key: str, default: Any = None) -> Any:
        """Retorna o valor de `key` no nível raiz, ou `default` se ausente."""
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Liga `key` a `value`, substituindo integralmente o valor anterior."""
        self._data[key] = value

    def fold(self, data: Mapping) -> "ConfigStore":
        """
        Integra um mapa de qualquer origem ao estado da store.

        Cada chave de `data` sobrescreve a chave correspondente; chaves
        ausentes em `data` são preservadas.

        Raises:
            InvalidConfigRootTypeError: Se `data` não for um mapa.
        """
        keys = fold_into(self._data, data, source="fold")
        self.log("DEBUG", "dados integrados via fold", event_type="config_folded", keys=keys)
        return self

    def fold_namespace(self, namespace: Any, *, skip_none: bool = True) -> "ConfigStore":
        """
        Integra o resultado de `argparse.ArgumentParser.parse_args()`.

        Com `skip_none=True`, opções não informadas na linha de comando
        (valor `None`) não sobrescrevem o que veio dos arquivos.
        """
        data = {
            key: value
            for key, value in vars(namespace).items()
            if not (skip_none and value is None)
        }
        return self.fold(data)

    def to_dict(self) -> Dict[str, Any]:
        """Retorna uma cópia profunda das chaves de usuário (o que `persist` grava)."""
        return copy.deepcopy(self._data)

    # ------------------------------------------------------------------
    # Load / Persist
    # ------------------------------------------------------------------
    def load(self, path: Optional[PathLike] = None) -> "ConfigStore":
        """
        Lê um arquivo YAML e integra seu conteúdo à store.

        Chamado automaticamente na construção; só precisa ser chamado
        manualmente quando há mais de um arquivo de configuração.

        Args:
            path: Novo caminho de entrada. Quando informado, substitui
                `input_path` de forma permanente.

        Raises:
            ConfigReadError: Se o arquivo não puder ser aberto.
            InvalidConfigRootTypeError: Se a raiz do documento não for um mapa.
            yaml.YAMLError: Se o conteúdo não for YAML válido.
        """
        if path:
            self.input_path = Path(path)

        data = load_file(self.input_path)
        keys = fold_into(self._data, data, source=str(self.input_path))
        self.state = StoreState.LOADED

        self.log("INFO", "configuração carregada", event_type="config_loaded", path=str(self.input_path), keys=keys)
        return self

    def persist(self) -> Path:
        """
        Grava as chaves de usuário em `output_path`, sobrescrevendo o arquivo.

        Returns:
            Path: Caminho escrito.

        Raises:
            ConfigWriteError: Se o arquivo não puder ser aberto para escrita.
        """
        written = write_file(self.output_path, dict(self._data), self.dump_options)
        self.log("INFO", "configuração persistida", event_type="config_persisted", path=str(written), keys=list(self._data))
        return written

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    def log(self, level: str, message: str, **extra: Any) -> None:
        event = build_event(level=level, message=message, source=str(self.input_path), **extra)
        self.events.append(event)
        emit(logger, event)


__all__ = ["ConfigStore"]
