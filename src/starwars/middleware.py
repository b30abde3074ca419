"""
Request logging middleware
"""

import json
import re
import time
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from .config import GRAPHQL_ENDPOINT
from .logging import bind_operation, get_logger, request_context

logger = get_logger(__name__)

REDACTED = "[REDACTED]"

# Parameter names that may carry credentials
_SENSITIVE_PARAM = re.compile(r"pass|token|secret|key|auth|jwt|session|cookie|credential", re.I)

# GraphQL documents sent over GET are never logged verbatim
_GRAPHQL_DOCUMENT_PARAMS = frozenset({"query", "variables", "extensions"})

_OPERATION_RE = re.compile(r"\b(query|mutation|subscription)\s+(\w+)")


def sanitize_query_params(
    params: dict[str, Any], redact: frozenset[str] = frozenset()
) -> dict[str, Any]:
    """Copy ``params`` with credential-like and explicitly listed keys redacted."""
    return {
        key: REDACTED if key in redact or _SENSITIVE_PARAM.search(key) else value
        for key, value in params.items()
    }


def operation_name_from_payload(data: dict[str, Any]) -> str | None:
    """Derive a loggable operation name from a GraphQL request payload.

    Mutations and subscriptions are prefixed with their kind; documents
    without a name are ``unnamed_operation``.
    """
    op = data.get("operationName")
    if isinstance(op, str) and op:
        return op

    q = data.get("query", "")
    if not isinstance(q, str) or not q:
        return None
    if "__schema" in q or "IntrospectionQuery" in q:
        return "__introspection"

    match = _OPERATION_RE.search(q)
    if match:
        kind, name = match.groups()
        return name if kind == "query" else f"{kind}:{name}"
    return "unnamed_operation"


async def extract_graphql_operation_name(request: Request, graphql_path: str) -> str | None:
    if request.url.path != graphql_path:
        return None

    if request.method == "GET":
        return operation_name_from_payload(dict(request.query_params))

    if request.method != "POST":
        return None
    body = await request.body()
    if not body:
        return None
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    return operation_name_from_payload(data) if isinstance(data, dict) else None


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Log each HTTP request with its own request id and GraphQL operation."""

    def __init__(self, app: ASGIApp, graphql_path: str = GRAPHQL_ENDPOINT):
        super().__init__(app)
        self.graphql_path = graphql_path

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        is_graphql = request.url.path == self.graphql_path

        with request_context():
            bind_operation(await extract_graphql_operation_name(request, self.graphql_path))
            params = sanitize_query_params(
                dict(request.query_params),
                _GRAPHQL_DOCUMENT_PARAMS if is_graphql else frozenset(),
            )
            logger.info(
                "Request started",
                method=request.method,
                path=request.url.path,
                query_params=params or None,
                user_agent=request.headers.get("user-agent"),
                remote_addr=request.client.host if request.client else None,
            )

            started = time.perf_counter()
            try:
                response = await call_next(request)
            except Exception as e:
                logger.error(
                    "Request failed",
                    method=request.method,
                    path=request.url.path,
                    error=str(e),
                    duration_ms=_elapsed_ms(started),
                )
                raise

            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=_elapsed_ms(started),
            )
            return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
