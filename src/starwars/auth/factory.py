"""Factory for creating auth adapters based on configuration."""

from __future__ import annotations

from ..config import Settings
from ..config import settings as default_settings
from .adapters.base import AuthAdapter
from .adapters.jwt import JWTAuthAdapter
from .adapters.none import NoAuthAdapter


def get_auth_adapter(settings: Settings | None = None) -> AuthAdapter:
    """Create and return the configured auth adapter."""
    settings = settings or default_settings
    provider = settings.auth_provider.lower()
    config = settings.auth_config

    if provider == "none":
        return NoAuthAdapter(
            default_user_id=config.get("default_user_id", "dev-user"),
            default_claims=config.get("default_claims"),
            environment=settings.environment,
        )

    elif provider == "jwt":
        secret_key = config.get("secret_key") or settings.jwt_secret
        if not secret_key:
            raise ValueError(
                "JWT secret key is required. Set STARWARS_JWT_SECRET or provide in config."
            )

        return JWTAuthAdapter(
            secret_key=secret_key,
            algorithm=config.get("algorithm", settings.jwt_algorithm),
            issuer=config.get("issuer", "starwars"),
            audience=config.get("audience", "starwars-api"),
        )

    else:
        raise ValueError(f"Unsupported auth provider: {provider}")
