# src/config_yaml/core/traceability/events.py
"""
Event Log estruturado da store de configuração.

Cada operação relevante da store (defaults aplicados, arquivo carregado,
fold, persistência) gera um evento estruturado, no mesmo formato usado
para logging de execução: um dicionário com nível, mensagem, timestamp
UTC e campos adicionais livres.

Além de ser acumulado na store, cada evento é repassado ao `logging`
da biblioteca padrão, para que o programa hospedeiro possa observá-lo
com a configuração de logging que já utiliza.

Invariantes:
    - Cada evento contém `level`, `message`, `timestamp` e `source`
    - O timestamp é sempre UTC timezone-aware em formato ISO
    - Campos adicionais são preservados sem filtragem

Limites explícitos:
    - Não persiste eventos
    - Não configura handlers de logging
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional


_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def build_event(
    *,
    level: str,
    message: str,
    source: Optional[str],
    ts: Optional[datetime] = None,
    **extra: Any,
) -> Dict[str, Any]:
    """
    Constrói um evento estruturado.

    Args:
        level (str): Nível textual (DEBUG, INFO, WARNING, ERROR).
        message (str): Mensagem curta.
        source (Optional[str]): Caminho de entrada da store que emitiu o evento.
        ts (Optional[datetime]): Timestamp; default é o instante atual em UTC.
        **extra: Campos adicionais (ex.: event_type, path, keys).

    Returns:
        Dict[str, Any]: Evento pronto para ser acumulado.
    """
    when = ts or datetime.now(timezone.utc)
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)

    event = {
        "level": level.upper(),
        "message": message,
        "timestamp": when.astimezone(timezone.utc).isoformat(),
        "source": source,
    }
    event.update(extra)
    return event


def emit(logger: logging.Logger, event: Dict[str, Any]) -> None:
    """Repassa `event` para `logger` no nível correspondente."""
    levelno = _LEVELS.get(event["level"], logging.INFO)
    if not logger.isEnabledFor(levelno):
        return
    extras = {k: v for k, v in event.items() if k not in ("level", "message", "timestamp")}
    logger.log(levelno, "%s %s", event["message"], extras)
