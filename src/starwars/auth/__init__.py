"""Authentication and authorization for the Star Wars server."""

from .adapters.base import AuthAdapter, AuthenticationError, AuthorizationError, Principal
from .claims import Claim, ClaimsIdentity, ClaimsPrincipal, ClaimTypes
from .context import RequestHook, create_test_identity_hook, resolve_principal
from .factory import get_auth_adapter
from .policies import (
    HAS_COUNTRY_POLICY,
    AuthorizationOptions,
    AuthorizationResult,
    AuthorizationService,
    PolicyNotFoundError,
    add_default_policies,
)

__all__ = [
    "AuthAdapter",
    "AuthenticationError",
    "AuthorizationError",
    "AuthorizationOptions",
    "AuthorizationResult",
    "AuthorizationService",
    "Claim",
    "ClaimTypes",
    "ClaimsIdentity",
    "ClaimsPrincipal",
    "HAS_COUNTRY_POLICY",
    "PolicyNotFoundError",
    "Principal",
    "RequestHook",
    "add_default_policies",
    "create_test_identity_hook",
    "get_auth_adapter",
    "resolve_principal",
]
