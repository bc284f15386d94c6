"""
Structured Logging Support

Formatters for the standard library logging system, correlation ID tracking
and a one-call configuration entry point for applications embedding the launcher.
The library itself only ever calls logging.getLogger(__name__).
"""

import json
import logging
import sys
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, Optional, TextIO

from pydantic import BaseModel, Field

# Context variable for correlation tracking
correlation_id_var: ContextVar[Optional[str]] = ContextVar('correlation_id', default=None)

# Attributes present on every LogRecord; anything else came in through `extra=`.
_RESERVED_ATTRS = frozenset(vars(logging.LogRecord('', 0, '', 0, '', (), None))) | {'message', 'asctime'}


class LoggingConfiguration(BaseModel):
    """Logging system configuration with validation."""
    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = Field(default="text", pattern="^(json|text)$")


def get_correlation_id() -> Optional[str]:
    return correlation_id_var.get()


@contextmanager
def correlation_context(correlation_id: Optional[str] = None) -> Iterator[str]:
    """Bind a correlation ID for the duration of the block."""
    correlation_id = correlation_id or str(uuid.uuid4())
    token = correlation_id_var.set(correlation_id)
    try:
        yield correlation_id
    finally:
        correlation_id_var.reset(token)


def _extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return {k: v for k, v in vars(record).items() if k not in _RESERVED_ATTRS and not k.startswith('_')}


class JSONLogFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            'timestamp': datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'correlation_id': get_correlation_id(),
        }

        extra = _extra_fields(record)
        if extra:
            payload['extra'] = extra
        if record.exc_info:
            payload['exception'] = self.formatException(record.exc_info)

        # Remove None values to keep logs clean
        payload = {k: v for k, v in payload.items() if v is not None}
        return json.dumps(payload, default=str, ensure_ascii=False)


class HumanReadableFormatter(logging.Formatter):
    """Human-readable formatter for development/debugging"""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, timezone.utc).isoformat()
        base_msg = f"[{timestamp}] {record.levelname} {record.name}: {record.getMessage()}"

        correlation_id = get_correlation_id()
        if correlation_id:
            base_msg += f" [correlation_id={correlation_id}]"

        extra = _extra_fields(record)
        if extra:
            extra_str = ', '.join(f"{k}={v}" for k, v in extra.items())
            base_msg += f" [{extra_str}]"

        if record.exc_info:
            base_msg += "\n" + self.formatException(record.exc_info)
        return base_msg


def configure_logging(
    config: Optional[LoggingConfiguration] = None,
    stream: TextIO = sys.stderr,
    logger_name: str = "gcp_launcher"
) -> logging.Logger:
    """
    Attach a single formatted stream handler to the package logger.

    Calling it again replaces the handler installed by the previous call.
    """
    config = config or LoggingConfiguration()
    logger = logging.getLogger(logger_name)

    for handler in list(logger.handlers):
        if getattr(handler, '_gcp_launcher_handler', False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(JSONLogFormatter() if config.format == "json" else HumanReadableFormatter())
    handler._gcp_launcher_handler = True
    logger.addHandler(handler)
    logger.setLevel(config.level)
    return logger
