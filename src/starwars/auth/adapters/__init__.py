"""Authentication adapters."""

from .base import AuthAdapter, AuthenticationError, AuthorizationError, Principal
from .jwt import JWTAuthAdapter
from .none import NoAuthAdapter

__all__ = [
    "AuthAdapter",
    "AuthenticationError",
    "AuthorizationError",
    "JWTAuthAdapter",
    "NoAuthAdapter",
    "Principal",
]
