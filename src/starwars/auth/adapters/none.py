"""Development adapter that accepts any bearer token."""

from __future__ import annotations

from ...logging import get_logger
from .base import AuthenticationError, Principal

logger = get_logger(__name__)

DEV_EMAIL = "dev@example.com"
DEV_DISPLAY_NAME = "Development User"


class NoAuthAdapter:
    """
    Treats every non-empty bearer token as ``default_user_id``.

    ``default_claims`` are added to the principal, e.g. ``{"country": "us"}``
    to satisfy the HasCountry policy locally. Requests without a token stay
    anonymous. Refuses to run in production.
    """

    def __init__(
        self,
        default_user_id: str = "dev-user",
        default_claims: dict | None = None,
        environment: str = "development",
    ):
        if environment.lower() in ("production", "prod"):
            logger.error("No-auth adapter requested in production", environment=environment)
            raise RuntimeError(
                "NoAuthAdapter cannot be used in production environments. "
                "Set STARWARS_AUTH_PROVIDER=jwt."
            )

        self.default_user_id = default_user_id
        self.default_claims = dict(default_claims or {})

    async def verify_token(self, token: str) -> Principal:
        if not token:
            raise AuthenticationError("Token required (even in no-auth mode)")

        return Principal(
            provider="none",
            subject=self.default_user_id,
            email=DEV_EMAIL,
            display_name=DEV_DISPLAY_NAME,
            claims={"mode": "development", **self.default_claims},
        )

    async def issue_token(self, subject: str | None = None, claims: dict | None = None) -> str:
        """A readable fake token; ``verify_token`` ignores its content."""
        parts = ["dev-token", subject or self.default_user_id, "no-auth-mode"]
        parts.extend(f"{key}={value}" for key, value in (claims or {}).items())
        return "|".join(parts)
