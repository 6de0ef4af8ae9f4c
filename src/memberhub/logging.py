"""
structlog setup for the API, the CLI and migrations

Every record carries the id of the HTTP request it was emitted under (and the
GraphQL operation name once the middleware has read it), so one request's
resolver logs can be grepped out of interleaved output.
"""

import logging
import secrets
import sys
from contextvars import ContextVar
from typing import Any

import structlog

_request_fields: ContextVar[dict[str, str] | None] = ContextVar(
    "memberhub_request_fields", default=None
)

# Libraries that log every statement or connection at INFO
_CHATTY_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "asyncio")


def _add_request_fields(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    _ = logger, method_name
    fields = _request_fields.get()
    if fields:
        for key, value in fields.items():
            event_dict.setdefault(key, value)
    return event_dict


def _resolve_level(level: str | int | None, debug: bool) -> int:
    if debug:
        return logging.DEBUG
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    return logging.getLevelNamesMapping().get(level.upper(), logging.INFO)


def configure_logging(debug: bool = False, level: str | int | None = None) -> None:
    """Route stdlib logging through structlog.

    ``debug`` switches to colored console output at DEBUG; otherwise records are
    rendered as JSON at ``level`` (default INFO).
    """
    log_level = _resolve_level(level, debug)

    logging.basicConfig(level=log_level, stream=sys.stdout, format="%(message)s", force=True)
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))

    renderer: Any = (
        structlog.dev.ConsoleRenderer(colors=True) if debug else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            _add_request_fields,
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """14 url-safe characters of randomness."""
    return secrets.token_urlsafe(10)


def set_request_context(request_id: str | None = None, **fields: str) -> str:
    """Start the logging context of one request and return its id."""
    request_id = request_id or generate_request_id()
    _request_fields.set({"request_id": request_id, **fields})
    return request_id


def bind_request_fields(**fields: str) -> None:
    """Add fields to the current request's logging context."""
    current = _request_fields.get() or {}
    _request_fields.set({**current, **fields})


def clear_request_context() -> None:
    _request_fields.set(None)


def get_request_id() -> str | None:
    fields = _request_fields.get()
    return fields.get("request_id") if fields else None
