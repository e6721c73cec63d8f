"""Structured logging framework using structlog.

This module provides centralized logging configuration with:
- ISO-8601 timestamps
- JSON rendering for structured logs
- Automatic sanitization of sensitive fields (database URLs, passwords)
- Context binding support
- Output on stderr (stdout carries generated SQL) plus optional file logging

Configuration:
- SQLGEN_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: INFO
- LOG_TO_FILE: Enable file logging (1, true, yes). Default: disabled
- LOG_FILE_DIR: Directory for log files. Default: logs/

Usage:
    >>> from crud_sqlgen.utils.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("statement_generated", table="users", statement="insert")
"""

import logging
import os
import re
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict, List, MutableMapping, Optional

import structlog
from pydantic import ValidationError
from structlog.types import EventDict, Processor

from crud_sqlgen.config import get_settings

# Sensitive key patterns for sanitization
SENSITIVE_PATTERNS = [
    re.compile(r".*password.*", re.IGNORECASE),
    re.compile(r".*token.*", re.IGNORECASE),
    re.compile(r".*secret.*", re.IGNORECASE),
    re.compile(r"^database_url$", re.IGNORECASE),
]

REDACTED_VALUE = "[REDACTED]"

_installed_handlers: List[logging.Handler] = []


def sanitize_for_logging(data: Dict[str, Any]) -> Dict[str, Any]:
    """Redact sensitive values from a dictionary before logging.

    Example:
        >>> sanitize_for_logging({"database_url": "postgresql://u:p@h/db", "table": "users"})
        {'database_url': '[REDACTED]', 'table': 'users'}
    """
    sanitized: Dict[str, Any] = {}
    for key, value in data.items():
        if any(pattern.match(key) for pattern in SENSITIVE_PATTERNS):
            sanitized[key] = REDACTED_VALUE
        elif isinstance(value, dict):
            sanitized[key] = sanitize_for_logging(value)
        else:
            sanitized[key] = value
    return sanitized


def sanitization_processor(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> MutableMapping[str, Any]:
    """Structlog processor that redacts sensitive fields in event_dict."""
    return sanitize_for_logging(dict(event_dict))


def _get_log_level(level_name: Optional[str] = None) -> int:
    if level_name is None:
        try:
            level_name = get_settings().log_level
        except ValidationError:
            # Keep logging usable when the environment holds bad settings
            level_name = os.getenv("SQLGEN_LOG_LEVEL", "INFO")
    return getattr(logging, level_name.upper(), logging.INFO)


def _should_log_to_file() -> bool:
    log_to_file = os.getenv("LOG_TO_FILE", "").lower()
    return log_to_file in ("1", "true", "yes")


def _get_log_file_path() -> Path:
    log_dir = Path(os.getenv("LOG_FILE_DIR", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)

    # Format: crud-sqlgen-YYYYMMDD.log
    date_str = datetime.now().strftime("%Y%m%d")
    return log_dir / f"crud-sqlgen-{date_str}.log"


def configure_logging(level_name: Optional[str] = None) -> None:
    """Configure stdlib logging handlers and the structlog processor chain.

    Safe to call again (e.g. from the CLI with an explicit level); handlers
    installed by a previous call are replaced.
    """
    level = _get_log_level(level_name)
    root = logging.getLogger()

    for handler in _installed_handlers:
        root.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    stderr_handler = logging.StreamHandler()
    stderr_handler.setFormatter(logging.Formatter("%(message)s"))
    _installed_handlers.append(stderr_handler)

    if _should_log_to_file():
        file_handler = TimedRotatingFileHandler(
            filename=str(_get_log_file_path()),
            when="midnight",
            interval=1,
            backupCount=30,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        _installed_handlers.append(file_handler)

    for handler in _installed_handlers:
        handler.setLevel(level)
        root.addHandler(handler)
    root.setLevel(level)

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        sanitization_processor,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


# Configure structlog on module import
configure_logging()


def get_logger(name: str) -> Any:
    """Get a structlog BoundLogger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> Any:
    """Create a logger with bound context fields.

    Example:
        >>> logger = bind_context(table="users", statement="insert")
        >>> logger.debug("statement_generated")
    """
    return structlog.get_logger().bind(**kwargs)
