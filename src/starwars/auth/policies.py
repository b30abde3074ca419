"""
Named authorization policies evaluated against a ClaimsPrincipal.

Policies are registered once at startup through ``AuthorizationOptions`` and
evaluated per field by the ``AuthorizationService``. A policy succeeds only
when every one of its requirements succeeds.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from ..logging import get_logger
from .adapters.base import AuthorizationError
from .claims import ClaimsPrincipal, ClaimTypes

logger = get_logger(__name__)

HAS_COUNTRY_POLICY = "HasCountry"


class PolicyNotFoundError(AuthorizationError):
    """Raised when a field references a policy that was never registered."""

    pass


@dataclass
class AuthorizationHandlerContext:
    """What a requirement gets to look at."""

    user: ClaimsPrincipal
    resource: object | None = None


@dataclass
class Requirement:
    description: str
    check: Callable[[AuthorizationHandlerContext], bool]

    def is_satisfied(self, context: AuthorizationHandlerContext) -> bool:
        return bool(self.check(context))


@dataclass
class AuthorizationPolicy:
    name: str
    requirements: list[Requirement] = field(default_factory=list)

    def first_failure(self, context: AuthorizationHandlerContext) -> Requirement | None:
        for requirement in self.requirements:
            if not requirement.is_satisfied(context):
                return requirement
        return None


class AuthorizationPolicyBuilder:
    def __init__(self, name: str):
        self._name = name
        self._requirements: list[Requirement] = []

    def require_assertion(
        self,
        assertion: Callable[[AuthorizationHandlerContext], bool],
        description: str = "assertion",
    ) -> AuthorizationPolicyBuilder:
        self._requirements.append(Requirement(description, assertion))
        return self

    def require_authenticated_user(self) -> AuthorizationPolicyBuilder:
        return self.require_assertion(
            lambda context: context.user.is_authenticated, "authenticated user"
        )

    def require_claim(self, claim_type: str, *allowed_values: str) -> AuthorizationPolicyBuilder:
        def check(context: AuthorizationHandlerContext) -> bool:
            if not allowed_values:
                return context.user.has_claim(claim_type)
            return any(context.user.has_claim(claim_type, value) for value in allowed_values)

        return self.require_assertion(check, f"claim {claim_type}")

    def require_role(self, *roles: str) -> AuthorizationPolicyBuilder:
        return self.require_assertion(
            lambda context: any(context.user.is_in_role(role) for role in roles),
            f"role in {sorted(roles)}",
        )

    def build(self) -> AuthorizationPolicy:
        if not self._requirements:
            raise ValueError(f"Policy '{self._name}' has no requirements")
        return AuthorizationPolicy(self._name, list(self._requirements))


class AuthorizationOptions:
    """Registry of named policies."""

    def __init__(self):
        self._policies: dict[str, AuthorizationPolicy] = {}

    def add_policy(
        self, name: str, configure: Callable[[AuthorizationPolicyBuilder], object]
    ) -> None:
        builder = AuthorizationPolicyBuilder(name)
        configure(builder)
        self._policies[name] = builder.build()
        logger.info("Registered authorization policy", policy=name)

    def get_policy(self, name: str) -> AuthorizationPolicy | None:
        return self._policies.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._policies

    def policy_names(self) -> list[str]:
        return list(self._policies)


@dataclass(frozen=True)
class AuthorizationResult:
    succeeded: bool
    failure_reason: str | None = None

    @classmethod
    def success(cls) -> AuthorizationResult:
        return cls(True)

    @classmethod
    def failed(cls, reason: str) -> AuthorizationResult:
        return cls(False, reason)


class AuthorizationService:
    def __init__(self, options: AuthorizationOptions):
        self.options = options

    def authorize(
        self,
        user: ClaimsPrincipal | None,
        policy: str | None = None,
        roles: list[str] | None = None,
        resource: object | None = None,
    ) -> AuthorizationResult:
        """
        Evaluate a policy and/or role list for ``user``.

        With neither a policy nor roles, only an authenticated user is required.

        Raises:
            PolicyNotFoundError: If ``policy`` was never registered
        """
        user = user or ClaimsPrincipal.anonymous()
        context = AuthorizationHandlerContext(user=user, resource=resource)

        if policy is None and not roles:
            if user.is_authenticated:
                return AuthorizationResult.success()
            return AuthorizationResult.failed("The current user is not authenticated.")

        if roles and not any(user.is_in_role(role) for role in roles):
            return AuthorizationResult.failed(
                f"The current user is not in any of the roles: {', '.join(roles)}."
            )

        if policy is not None:
            resolved = self.options.get_policy(policy)
            if resolved is None:
                raise PolicyNotFoundError(f"The authorization policy '{policy}' is not registered.")
            failure = resolved.first_failure(context)
            if failure is not None:
                logger.debug(
                    "Authorization policy denied", policy=policy, requirement=failure.description
                )
                return AuthorizationResult.failed(
                    f"The current user does not satisfy the policy '{policy}'."
                )

        return AuthorizationResult.success()


def user_has_country(context: AuthorizationHandlerContext) -> bool:
    return context.user.has_claim(lambda claim: claim.type == ClaimTypes.COUNTRY)


def add_default_policies(options: AuthorizationOptions) -> AuthorizationOptions:
    """Register the server's policies."""
    options.add_policy(
        HAS_COUNTRY_POLICY,
        lambda policy: policy.require_assertion(user_has_country, "country claim"),
    )
    return options
