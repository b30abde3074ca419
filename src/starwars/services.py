"""
Service registration for the Star Wars server
"""

from typing import Any

from .auth.policies import AuthorizationOptions, AuthorizationService, add_default_policies
from .data.repositories import CharacterRepository, ReviewRepository
from .errors import ServiceNotRegisteredError
from .events import EventRegistry, EventSender, InMemoryEventRegistry
from .graphql.mutations.root import Mutation
from .graphql.queries.root import Query
from .graphql.schema import build_starwars_schema
from .graphql.stitching import StitchedSchema
from .graphql.subscriptions.root import Subscription
from .logging import get_logger

logger = get_logger(__name__)

_UNSET = object()


class ServiceCollection:
    """
    Registry of process-wide singletons.

    A service registered without an instance is created from its key on
    first lookup and reused afterwards.
    """

    def __init__(self):
        self._instances: dict[Any, Any] = {}
        self._factories: dict[Any, Any] = {}

    def add_singleton(self, key: Any, instance: Any = _UNSET) -> None:
        """
        Register a singleton under ``key``.

        Raises:
            ValueError: If ``key`` is already registered
        """
        if key in self:
            raise ValueError(f"Service '{_key_name(key)}' is already registered")
        if instance is _UNSET:
            if not callable(key):
                raise ValueError(f"Service '{_key_name(key)}' needs an instance")
            self._factories[key] = key
        else:
            self._instances[key] = instance
        logger.debug("Registered service", service=_key_name(key))

    def get(self, key: Any) -> Any:
        """
        Get the singleton registered under ``key``.

        Raises:
            ServiceNotRegisteredError: If nothing was registered under ``key``
        """
        if key in self._instances:
            return self._instances[key]
        factory = self._factories.get(key)
        if factory is None:
            raise ServiceNotRegisteredError(f"Service '{_key_name(key)}' is not registered")
        # A failing factory stays registered so the next lookup retries it
        instance = factory()
        self._instances[key] = instance
        del self._factories[key]
        return instance

    def keys(self) -> list[Any]:
        return [*self._instances, *self._factories]

    def __contains__(self, key: Any) -> bool:
        return key in self._instances or key in self._factories

    def __len__(self) -> int:
        return len(self._instances) + len(self._factories)


def _key_name(key: Any) -> str:
    return getattr(key, "__name__", str(key))


def configure_services(services: ServiceCollection | None = None) -> ServiceCollection:
    """Register repositories, root types, events, the schema and authorization."""
    services = services if services is not None else ServiceCollection()

    services.add_singleton(CharacterRepository)
    services.add_singleton(ReviewRepository)

    services.add_singleton("Query", Query)
    services.add_singleton("Mutation", Mutation)
    services.add_singleton("Subscription", Subscription)

    # One registry serves both the publishing and the subscribing side
    event_registry = InMemoryEventRegistry()
    services.add_singleton(EventRegistry, event_registry)
    services.add_singleton(EventSender, event_registry)

    services.add_singleton(
        StitchedSchema,
        build_starwars_schema(
            query=services.get("Query"),
            mutation=services.get("Mutation"),
            subscription=services.get("Subscription"),
        ),
    )

    options = add_default_policies(AuthorizationOptions())
    services.add_singleton(AuthorizationOptions, options)
    services.add_singleton(AuthorizationService, AuthorizationService(options))

    logger.info("Services configured", count=len(services))
    return services
