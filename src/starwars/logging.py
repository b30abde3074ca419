"""
Structured logging for the Star Wars server.

Events are rendered by structlog on top of stdlib ``logging``. Anything logged
while a request is served carries the request id, the caller name and, for
GraphQL requests, the operation name.
"""

import logging
import secrets
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

import structlog

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
caller_ctx: ContextVar[str | None] = ContextVar("caller", default=None)
operation_ctx: ContextVar[str | None] = ContextVar("graphql_operation", default=None)

_CONTEXT_FIELDS = (
    ("request_id", request_id_ctx),
    ("caller", caller_ctx),
    ("graphql_operation", operation_ctx),
)

_configured = False


def add_request_context(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """structlog processor merging the current request context into an event.

    Keys passed explicitly to the log call win over the context.
    """
    _ = logger, method_name
    for key, var in _CONTEXT_FIELDS:
        value = var.get()
        if value and key not in event_dict:
            event_dict[key] = value
    return event_dict


def configure_logging(debug: bool = False, level: str | None = None) -> None:
    """Route structlog through stdlib logging.

    Entry points call this before the app module is imported; the app only
    falls back to its own settings when nothing has configured logging yet.

    Args:
        debug: Colored console output when True, one JSON object per line otherwise.
        level: Level name such as ``"WARNING"``. Defaults to DEBUG in debug mode
            and INFO otherwise; unknown names fall back to INFO.
    """
    if level:
        log_level = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)
    else:
        log_level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(level=log_level, stream=sys.stdout, format="%(message)s", force=True)

    renderer = (
        structlog.dev.ConsoleRenderer(colors=True)
        if debug
        else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            add_request_context,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    global _configured
    _configured = True


def logging_configured() -> bool:
    return _configured


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def new_request_id() -> str:
    """A 12 character url-safe id correlating the log lines of one request."""
    return secrets.token_urlsafe(9)


@contextmanager
def request_context(request_id: str | None = None) -> Iterator[str]:
    """Scope the log context to one request.

    Caller and operation start out empty; the previous context is restored on
    exit.
    """
    request_id = request_id or new_request_id()
    tokens = [
        (request_id_ctx, request_id_ctx.set(request_id)),
        (caller_ctx, caller_ctx.set(None)),
        (operation_ctx, operation_ctx.set(None)),
    ]
    try:
        yield request_id
    finally:
        for var, token in reversed(tokens):
            var.reset(token)


def bind_caller(name: str | None) -> None:
    caller_ctx.set(name)


def bind_operation(name: str | None) -> None:
    operation_ctx.set(name)


def current_request_id() -> str | None:
    return request_id_ctx.get()
