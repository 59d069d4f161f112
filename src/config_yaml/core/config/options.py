"""Opções de serialização YAML usadas na persistência da store."""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass(frozen=True)
class DumpOptions:
    """
    Estilo de saída aplicado por `yaml.safe_dump` (v1).

    Os valores padrão produzem um documento em bloco, com chaves ordenadas,
    adequado para edição humana e para diffs estáveis entre gravações.
    """

    default_flow_style: bool = False
    sort_keys: bool = True
    allow_unicode: bool = True
    indent: int = 2
    explicit_start: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
