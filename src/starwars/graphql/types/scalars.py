"""
Custom scalar definitions
"""

import base64
from typing import Any, NewType

import strawberry

MAX_PAGINATION_AMOUNT = 50


def _parse_pagination_amount(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError("PaginationAmount must be an integer")
    if value < 0 or value > MAX_PAGINATION_AMOUNT:
        raise ValueError(f"PaginationAmount must be between 0 and {MAX_PAGINATION_AMOUNT}")
    return value


PaginationAmount = strawberry.scalar(
    NewType("PaginationAmount", int),
    serialize=int,
    parse_value=_parse_pagination_amount,
    description=f"Number of items to return from a paged field (0 to {MAX_PAGINATION_AMOUNT}).",
)

# Extended scalars are bound to Python types through schema scalar overrides,
# so that plain ``dict`` and ``bytes`` annotations become usable in fields.
JSONScalar = strawberry.scalar(
    dict,
    name="JSON",
    description="Arbitrary JSON object.",
    serialize=lambda value: value,
    parse_value=lambda value: value,
)

Base64Scalar = strawberry.scalar(
    bytes,
    name="Base64",
    description="Binary data encoded as base64.",
    serialize=lambda value: base64.b64encode(value).decode("ascii"),
    parse_value=lambda value: base64.b64decode(value),
)

EXTENDED_SCALARS: dict[type, Any] = {
    dict: JSONScalar,
    bytes: Base64Scalar,
}
