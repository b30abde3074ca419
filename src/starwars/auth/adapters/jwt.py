"""Self-issued JSON Web Tokens."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from jwt.exceptions import InvalidTokenError

from ...logging import get_logger
from .base import AuthenticationError, Principal

logger = get_logger(__name__)

_TIME_CLAIMS = ("exp", "nbf", "iat")


class JWTAuthAdapter:
    """
    Issues and verifies tokens signed with ``secret_key``.

    Tokens must name this server as issuer and audience. Every payload claim
    is kept on the principal so policies can read ``country``, ``roles`` and
    the like.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        issuer: str = "starwars",
        audience: str = "starwars-api",
        token_expiry_hours: int = 24,
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.issuer = issuer
        self.audience = audience
        self.token_lifetime = timedelta(hours=token_expiry_hours)

    def _decode(self, token: str) -> dict[str, Any]:
        try:
            return jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                audience=self.audience,
                options={f"verify_{claim}": True for claim in _TIME_CLAIMS},
            )
        except InvalidTokenError as e:
            logger.warning("Rejected JWT", error=str(e))
            raise AuthenticationError("Invalid token") from e

    async def verify_token(self, token: str) -> Principal:
        payload = self._decode(token)

        subject = payload.get("sub")
        if not subject:
            raise AuthenticationError("Missing 'sub' claim in token")

        principal = Principal(provider="jwt", subject=str(subject), claims=payload)
        if email := payload.get("email"):
            principal["email"] = email
        if name := payload.get("name"):
            principal["display_name"] = name
        return principal

    async def issue_token(self, subject: str | None = None, claims: dict | None = None) -> str:
        """Sign a token valid from now for ``token_expiry_hours``.

        Extra ``claims`` override the registered ones.
        """
        issued_at = datetime.now(UTC)
        payload: dict[str, Any] = {
            "iss": self.issuer,
            "aud": self.audience,
            "iat": issued_at,
            "nbf": issued_at,
            "exp": issued_at + self.token_lifetime,
        }
        if subject:
            payload["sub"] = subject
        payload.update(claims or {})

        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)
