"""
Main GraphQL schema definition using Strawberry
"""

from collections.abc import Sequence
from typing import Any

from fastapi import Depends
from starlette.requests import HTTPConnection
from strawberry.fastapi import GraphQLRouter
from strawberry.subscriptions import GRAPHQL_TRANSPORT_WS_PROTOCOL, GRAPHQL_WS_PROTOCOL

from ..auth.adapters.base import AuthAdapter
from ..auth.claims import ClaimsPrincipal
from ..auth.context import RequestHook, resolve_principal
from ..auth.policies import AuthorizationService
from ..config import Settings
from ..logging import bind_caller, get_logger
from .mutations.root import Mutation
from .queries.root import Query
from .stitching import SchemaConfiguration, StitchedSchema, StitchedSchemaBuilder
from .subscriptions.root import Subscription
from .types.character import Droid, Human
from .types.episode import Episode
from .types.scalars import PaginationAmount

logger = get_logger(__name__)

STARWARS_SCHEMA = "starwars"


def build_starwars_schema(
    query: type = Query,
    mutation: type = Mutation,
    subscription: type = Subscription,
) -> StitchedSchema:
    """Stitch the local ``starwars`` schema with the shared configuration."""

    def configure_starwars(config: SchemaConfiguration) -> None:
        config.register_authorize_directive_type()

        config.register_query_type(query)
        config.register_mutation_type(mutation)
        config.register_subscription_type(subscription)

        config.register_type(Human)
        config.register_type(Droid)
        config.register_type(Episode)

    def configure_shared(config: SchemaConfiguration) -> None:
        config.register_extended_scalar_types()
        config.register_type(PaginationAmount)

    return (
        StitchedSchemaBuilder()
        .add_schema(STARWARS_SCHEMA, configure_starwars)
        .add_schema_configuration(configure_shared)
        .build()
    )


def build_context(
    connection: HTTPConnection,
    user: ClaimsPrincipal,
    services: Any,
    stitched: StitchedSchema,
) -> dict[str, Any]:
    """Assemble the execution context handed to resolvers."""
    context: dict[str, Any] = {
        "request": connection,
        "user": user,
        "services": services,
    }
    if stitched.authorization_enabled:
        context["authorization"] = services.get(AuthorizationService)
    return context


def create_graphql_router(
    stitched: StitchedSchema,
    services: Any,
    settings: Settings,
    auth_adapter: AuthAdapter,
    request_hooks: Sequence[RequestHook] = (),
) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI."""

    async def get_user(connection: HTTPConnection) -> ClaimsPrincipal:
        # Installed hooks own the caller identity, so inbound credentials are not checked
        if request_hooks:
            user = ClaimsPrincipal.anonymous()
        else:
            user = await resolve_principal(connection, auth_adapter)
        for hook in request_hooks:
            user = await hook(connection, user)
        connection.state.user = user
        if user.identity and user.identity.name:
            bind_caller(user.identity.name)
        return user

    async def get_context(
        connection: HTTPConnection,
        user: ClaimsPrincipal = Depends(get_user),
    ) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        return build_context(connection, user, services, stitched)

    subscription_protocols = (
        [GRAPHQL_TRANSPORT_WS_PROTOCOL, GRAPHQL_WS_PROTOCOL]
        if settings.subscriptions_enabled
        else []
    )

    return GraphQLRouter(
        stitched.schema,
        path=settings.graphql_path,
        graphql_ide="graphiql" if settings.graphiql_enabled else None,
        context_getter=get_context,
        subscription_protocols=subscription_protocols,
    )
