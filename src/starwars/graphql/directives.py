"""
The ``@authorize`` directive and the permission classes that enforce it
"""

from typing import Any

import strawberry
from strawberry.permission import BasePermission
from strawberry.schema_directive import Location

from ..auth.adapters.base import AuthorizationError
from ..auth.policies import HAS_COUNTRY_POLICY, AuthorizationService
from ..logging import get_logger
from .context import get_user

logger = get_logger(__name__)


@strawberry.schema_directive(
    name="authorize",
    locations=[Location.OBJECT, Location.FIELD_DEFINITION],
    description="Restricts a field to callers satisfying a policy or holding a role.",
)
class AuthorizeDirective:
    policy: str | None = None
    roles: list[str] | None = None


class Authorize(BasePermission):
    """
    Permission evaluating a named policy and/or role list for the caller.

    Subclasses pin ``policy`` and ``roles``. The authorization service is
    read from the execution context; it is only present when the schema
    registered the authorize directive.
    """

    policy: str | None = None
    roles: list[str] | None = None
    message = "The current user is not authorized to access this resource."

    def has_permission(self, source: Any, info: strawberry.Info, **kwargs: Any) -> bool:
        authorization: AuthorizationService | None = info.context.get("authorization")
        if authorization is None:
            raise AuthorizationError("Authorization is not enabled for this schema.")

        result = authorization.authorize(get_user(info), policy=self.policy, roles=self.roles)
        if not result.succeeded:
            logger.info(
                "Authorization denied",
                field=info.field_name,
                policy=self.policy,
                reason=result.failure_reason,
            )
        return result.succeeded

    @classmethod
    def directive(cls) -> AuthorizeDirective:
        """The SDL directive matching this permission."""
        return AuthorizeDirective(policy=cls.policy, roles=cls.roles)


class IsAuthenticated(Authorize):
    message = "The current user is not authenticated."


class HasCountry(Authorize):
    policy = HAS_COUNTRY_POLICY
    message = f"The current user does not satisfy the policy '{HAS_COUNTRY_POLICY}'."
