"""
config-yaml — Canonical Error Structures (v1)

Este módulo define o padrão canônico de payloads de erro do config-yaml.
Falhas de configuração são reportadas ao programa hospedeiro como dados
estruturados, e não como término do processo, devendo ser:

- explícitas
- serializáveis
- acionáveis

Nenhuma recuperação local é feita: quem decide abortar, repetir ou
reportar é o programa que usa a store.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ConfigErrorPayload:
    """
    Payload canônico de erro do config-yaml.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

CONFIG_PATH_MISSING = "CONFIG_PATH_MISSING"
CONFIG_READ_FAILED = "CONFIG_READ_FAILED"
CONFIG_WRITE_FAILED = "CONFIG_WRITE_FAILED"
CONFIG_INVALID_ROOT = "CONFIG_INVALID_ROOT"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def config_path_missing(
    *,
    hint: str = "Informe o caminho do arquivo de configuração como primeiro argumento posicional.",
) -> ConfigErrorPayload:
    return ConfigErrorPayload(
        type=CONFIG_PATH_MISSING,
        message="Não é possível criar a store sem arquivo de configuração",
        details={},
        hint=hint,
    )


def config_read_failed(
    *,
    path: str,
    reason: str,
    hint: str = "Verifique se o arquivo existe e se o processo tem permissão de leitura.",
) -> ConfigErrorPayload:
    return ConfigErrorPayload(
        type=CONFIG_READ_FAILED,
        message=f"Não foi possível abrir {path} para leitura",
        details={"path": path, "reason": reason},
        hint=hint,
    )


def config_write_failed(
    *,
    path: str,
    reason: str,
    hint: str = "Verifique se o diretório de destino existe e se o processo tem permissão de escrita.",
) -> ConfigErrorPayload:
    return ConfigErrorPayload(
        type=CONFIG_WRITE_FAILED,
        message=f"Não foi possível abrir {path} para escrita",
        details={"path": path, "reason": reason},
        hint=hint,
    )


def config_invalid_root(
    *,
    received_type: str,
    source: Optional[str] = None,
    hint: str = "O documento YAML deve ter um mapa chave-valor na raiz.",
) -> ConfigErrorPayload:
    return ConfigErrorPayload(
        type=CONFIG_INVALID_ROOT,
        message=f"Config root deve ser dict, recebido: {received_type}",
        details={"received_type": received_type, "source": source},
        hint=hint,
    )
