"""
selective_disclosure/observability.py
Structured logging configuration using structlog.

JSON output for production, console output for development. Events are
passed through a redactor so that personal-data payloads cannot reach
the log stream even if a caller binds one by mistake.
"""
import sys
from collections.abc import MutableMapping
from typing import Any, FrozenSet, Iterable, List, cast

import structlog
from structlog.types import EventDict, FilteringBoundLogger, WrappedLogger

from .fields import PERSONAL_DATA_REGISTRY

REDACTED = "[REDACTED]"

SENSITIVE_KEYS: FrozenSet[str] = frozenset({
    "value",
    "values",
    "payload",
    "password",
    "secret",
    "token",
    "api_key",
    "private_key",
    "authorization",
})

LEVELS = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
    "CRITICAL": 50,
}


class PIIRedactor:
    """Processor that redacts event keys naming secrets or personal-data fields.

    Field names are matched case-insensitively, so both ``healthRecords``
    and ``healthrecords`` are caught.
    """

    def __init__(self, extra_keys: Iterable[str] = ()):
        keys = set(SENSITIVE_KEYS)
        keys.update(PERSONAL_DATA_REGISTRY.names())
        keys.update(extra_keys)
        self._keys = frozenset(k.lower() for k in keys)

    def __call__(
        self,
        _logger: WrappedLogger,
        _method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        return cast(EventDict, self._redact_dict(event_dict))

    def _redact_dict(self, data: MutableMapping) -> dict:
        result = {}
        for key, value in data.items():
            if isinstance(key, str) and key.lower() in self._keys:
                result[key] = REDACTED
            elif isinstance(value, dict):
                result[key] = self._redact_dict(value)
            elif isinstance(value, list):
                result[key] = self._redact_list(value)
            else:
                result[key] = value
        return result

    def _redact_list(self, items: List[Any]) -> List[Any]:
        return [
            self._redact_dict(item) if isinstance(item, dict)
            else self._redact_list(item) if isinstance(item, list)
            else item
            for item in items
        ]


def setup_logging(
    level: str = "INFO",
    format: str = "json",
    redact_pii: bool = True,
    extra_sensitive_keys: Iterable[str] = (),
) -> None:
    """Configure structured logging.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: "json" for production, "console" for development
        redact_pii: Whether to run the PIIRedactor processor
        extra_sensitive_keys: Additional event keys to redact, e.g. the
            field names of a custom schema
    """
    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if redact_pii:
        processors.append(PIIRedactor(extra_sensitive_keys))

    if format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(LEVELS.get(level.upper(), 20)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """Get a structlog logger bound to ``name``."""
    return cast(FilteringBoundLogger, structlog.get_logger(name))
