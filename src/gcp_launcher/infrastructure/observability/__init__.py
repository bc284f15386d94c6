"""
Observability - structured logging and correlation IDs.
"""

from .logging import (
    LoggingConfiguration,
    JSONLogFormatter,
    HumanReadableFormatter,
    configure_logging,
    correlation_context,
    get_correlation_id,
)

__all__ = [
    "LoggingConfiguration",
    "JSONLogFormatter",
    "HumanReadableFormatter",
    "configure_logging",
    "correlation_context",
    "get_correlation_id",
]
