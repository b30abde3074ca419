"""
Main FastAPI application for the Star Wars GraphQL server
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..auth.context import RequestHook, create_test_identity_hook
from ..auth.factory import get_auth_adapter
from ..config import Settings
from ..config import settings as default_settings
from ..graphql.schema import create_graphql_router
from ..graphql.stitching import StitchedSchema
from ..logging import configure_logging, get_logger, logging_configured
from ..middleware import LoggingContextMiddleware
from ..services import ServiceCollection, configure_services
from .playground import create_playground_router


def configure_app_logging(settings: Settings) -> None:
    """Configure logging from settings unless an entry point already did."""
    if not logging_configured():
        configure_logging(debug=settings.debug, level=settings.log_level)


# Configure logging before creating logger
configure_app_logging(default_settings)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Star Wars GraphQL API...", graphql_path=app.state.settings.graphql_path)
    yield
    logger.info("Shutting down Star Wars GraphQL API...")


def create_app(
    settings: Settings | None = None,
    services: ServiceCollection | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or default_settings
    services = services if services is not None else configure_services()

    app = FastAPI(
        title="Star Wars GraphQL API",
        description="Sample GraphQL server over a stitched Star Wars schema",
        version=__version__,
        lifespan=lifespan,
        # Renders tracebacks for unhandled errors (developer exception page)
        debug=settings.debug,
    )
    app.state.settings = settings
    app.state.services = services

    app.add_middleware(LoggingContextMiddleware, graphql_path=settings.graphql_path)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    request_hooks: list[RequestHook] = []
    if settings.inject_test_identity:
        request_hooks.append(create_test_identity_hook(settings))

    stitched: StitchedSchema = services.get(StitchedSchema)
    graphql_router = create_graphql_router(
        stitched,
        services,
        settings,
        auth_adapter=get_auth_adapter(settings),
        request_hooks=request_hooks,
    )

    if settings.playground_enabled:
        app.include_router(
            create_playground_router(
                settings.playground_path,
                query_path=settings.graphql_path,
                subscription_path=settings.graphql_path,
            )
        )

    app.include_router(graphql_router, prefix="")
    logger.info(
        "GraphQL endpoint initialized successfully",
        endpoint=settings.graphql_path,
        graphiql=settings.graphiql_enabled,
        playground=settings.playground_path if settings.playground_enabled else None,
        subscriptions=settings.subscriptions_enabled,
    )

    return app


# Create the main application instance
app = create_app()
