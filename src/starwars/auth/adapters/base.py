"""Token verification interface shared by the auth adapters."""

from __future__ import annotations

from typing import Literal, NotRequired, Protocol, TypedDict

Provider = Literal["jwt", "none"]


class Principal(TypedDict):
    """A caller as described by a verified token.

    ``auth.context.claims_principal_from`` turns it into a ClaimsPrincipal.
    """

    provider: Provider
    subject: str
    email: NotRequired[str]
    display_name: NotRequired[str]
    claims: NotRequired[dict]


class AuthAdapter(Protocol):
    async def verify_token(self, token: str) -> Principal:
        """
        Check a bearer token and describe its holder.

        Raises:
            AuthenticationError: If the token cannot be trusted
        """
        ...

    async def issue_token(self, subject: str | None = None, claims: dict | None = None) -> str: ...


class AuthenticationError(Exception):
    """The caller presented credentials that could not be verified."""


class AuthorizationError(Exception):
    """The caller is not allowed to perform the operation."""
