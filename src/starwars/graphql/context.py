"""
Helpers for reading the GraphQL execution context
"""

from typing import Any

import strawberry

from ..auth.claims import ClaimsPrincipal


def get_service(info: strawberry.Info, key: Any) -> Any:
    """Resolve a registered singleton from the request's service collection."""
    return info.context["services"].get(key)


def get_user(info: strawberry.Info) -> ClaimsPrincipal:
    return info.context.get("user") or ClaimsPrincipal.anonymous()
