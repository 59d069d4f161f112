"""
Rastreabilidade da store de configuração.

API pública exposta:
    - build_event → construção de eventos estruturados
    - emit        → repasse de eventos ao `logging` da biblioteca padrão
"""

from .events import build_event, emit

__all__ = ["build_event", "emit"]
