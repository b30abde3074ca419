"""Request identity resolution and per-request identity hooks."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from fastapi import HTTPException, Request

from ..config import Settings
from ..logging import get_logger
from .adapters.base import AuthAdapter, AuthenticationError, Principal
from .claims import Claim, ClaimsIdentity, ClaimsPrincipal, ClaimTypes

logger = get_logger(__name__)

# Hook run on every GraphQL request; may replace the principal it is given.
RequestHook = Callable[[Request, ClaimsPrincipal], Awaitable[ClaimsPrincipal]]

_CLAIM_TYPE_MAP = {
    "sub": ClaimTypes.NAME_IDENTIFIER,
    "email": ClaimTypes.EMAIL,
    "name": ClaimTypes.NAME,
    "country": ClaimTypes.COUNTRY,
    "role": ClaimTypes.ROLE,
    "roles": ClaimTypes.ROLE,
}


def claims_principal_from(principal: Principal) -> ClaimsPrincipal:
    """Convert a verified token principal into a ClaimsPrincipal.

    Well-known token claims map onto standard claim types; the rest keep
    their token claim name. List-valued claims yield one claim per item.
    """
    identity = ClaimsIdentity(authentication_type=principal["provider"])
    identity.add_claim(Claim(ClaimTypes.NAME_IDENTIFIER, principal["subject"]))
    if email := principal.get("email"):
        identity.add_claim(Claim(ClaimTypes.EMAIL, email))
    if display_name := principal.get("display_name"):
        identity.add_claim(Claim(ClaimTypes.NAME, display_name))

    for key, value in principal.get("claims", {}).items():
        if key in ("sub", "email", "name"):
            continue
        claim_type = _CLAIM_TYPE_MAP.get(key, key)
        values = value if isinstance(value, list | tuple) else [value]
        for item in values:
            identity.add_claim(Claim(claim_type, str(item)))

    return ClaimsPrincipal.from_identity(identity)


async def resolve_principal(request: Request, adapter: AuthAdapter) -> ClaimsPrincipal:
    """
    Resolve the caller identity from the Authorization header.

    Missing header yields the anonymous principal. A malformed header or a
    token the adapter rejects yields HTTP 401.
    """
    authorization = request.headers.get("authorization")
    if not authorization:
        return ClaimsPrincipal.anonymous()

    if not authorization.startswith("Bearer "):
        logger.warning("Invalid authorization format received")
        raise HTTPException(
            status_code=401,
            detail="Invalid authorization format. Expected: Bearer <token>",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = authorization[7:]
    try:
        principal = await adapter.verify_token(token)
    except AuthenticationError as e:
        logger.warning("Authentication failed", error=str(e))
        raise HTTPException(
            status_code=401,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        ) from e

    logger.debug(
        "Principal resolved",
        provider=principal.get("provider"),
        subject=principal.get("subject"),
    )
    return claims_principal_from(principal)


def build_test_identity(authentication_type: str, country: str) -> ClaimsPrincipal:
    identity = ClaimsIdentity(authentication_type=authentication_type)
    identity.add_claim(Claim(ClaimTypes.COUNTRY, country))
    return ClaimsPrincipal.from_identity(identity)


def create_test_identity_hook(settings: Settings) -> RequestHook:
    """
    Build the hook that swaps every caller for a fixed test identity.

    Used to exercise authorization policies without a token issuer.

    Raises:
        RuntimeError: In production environments
    """
    if settings.is_production:
        raise RuntimeError("The test identity hook cannot be enabled in production environments.")

    logger.warning(
        "Test identity injection is active - every request runs as the test identity",
        authentication_type=settings.test_identity_authentication_type,
        country=settings.test_identity_country,
    )

    async def inject_test_identity(request: Request, principal: ClaimsPrincipal) -> ClaimsPrincipal:
        _ = principal
        return build_test_identity(
            settings.test_identity_authentication_type, settings.test_identity_country
        )

    return inject_test_identity
