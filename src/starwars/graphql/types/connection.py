"""
Cursor-based pagination types for character lists
"""

import base64
from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .character import Character

CURSOR_PREFIX = "cursor:"


def encode_cursor(offset: int) -> str:
    return base64.b64encode(f"{CURSOR_PREFIX}{offset}".encode()).decode("ascii")


def decode_cursor(cursor: str) -> int:
    """Decode an opaque cursor back into a list offset.

    Raises:
        ValueError: If the cursor was not produced by ``encode_cursor``
    """
    try:
        decoded = base64.b64decode(cursor.encode("ascii"), validate=True).decode()
    except (ValueError, UnicodeError) as e:
        raise ValueError(f"Invalid cursor: {cursor}") from e
    if not decoded.startswith(CURSOR_PREFIX):
        raise ValueError(f"Invalid cursor: {cursor}")
    try:
        offset = int(decoded[len(CURSOR_PREFIX) :])
    except ValueError as e:
        raise ValueError(f"Invalid cursor: {cursor}") from e
    if offset < 0:
        raise ValueError(f"Invalid cursor: {cursor}")
    return offset


@strawberry.type
class PageInfo:
    has_next_page: bool
    has_previous_page: bool
    start_cursor: str | None
    end_cursor: str | None


@strawberry.type
class CharacterEdge:
    cursor: str
    node: Annotated["Character", strawberry.lazy(".character")]


@strawberry.type
class CharacterConnection:
    edges: list[CharacterEdge]
    page_info: PageInfo
    total_count: int

    @strawberry.field
    def nodes(self) -> list[Annotated["Character", strawberry.lazy(".character")]]:
        return [edge.node for edge in self.edges]

    @classmethod
    def paginate(
        cls,
        items: list["Character"],
        first: int | None = None,
        after: str | None = None,
    ) -> "CharacterConnection":
        """Slice ``items`` after the ``after`` cursor, taking at most ``first``."""
        start = decode_cursor(after) + 1 if after is not None else 0
        end = len(items) if first is None else min(start + first, len(items))
        edges = [
            CharacterEdge(cursor=encode_cursor(offset), node=items[offset])
            for offset in range(start, end)
        ]
        return cls(
            edges=edges,
            page_info=PageInfo(
                has_next_page=end < len(items),
                has_previous_page=start > 0,
                start_cursor=edges[0].cursor if edges else None,
                end_cursor=edges[-1].cursor if edges else None,
            ),
            total_count=len(items),
        )
