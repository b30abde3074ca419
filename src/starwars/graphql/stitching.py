"""
Composition of several local GraphQL schemas into one stitched schema.

Each local schema is described by a ``SchemaConfiguration``: its root
operation types, extra types, scalar overrides and whether it uses the
``@authorize`` directive. ``StitchedSchemaBuilder.build`` merges the root
types of every local schema (in registration order) with
``strawberry.tools.merge_types``, applies the stitched-level configurations,
and validates the result before handing it out.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import strawberry
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.tools import merge_types

from ..errors import SchemaStitchingError
from ..logging import get_logger
from .types.scalars import EXTENDED_SCALARS

logger = get_logger(__name__)

ConfigureSchema = Callable[["SchemaConfiguration"], Any]


class SchemaConfiguration:
    """Registrations making up one local schema (or stitched-level extras)."""

    def __init__(self, name: str | None = None):
        self.name = name
        self.query_types: list[type] = []
        self.mutation_types: list[type] = []
        self.subscription_types: list[type] = []
        self.types: list[type] = []
        self.named_types: list[Any] = []
        self.scalar_overrides: dict[object, Any] = {}
        self.authorize_directive = False

    def register_query_type(self, type_: type) -> SchemaConfiguration:
        self.query_types.append(type_)
        return self

    def register_mutation_type(self, type_: type) -> SchemaConfiguration:
        self.mutation_types.append(type_)
        return self

    def register_subscription_type(self, type_: type) -> SchemaConfiguration:
        self.subscription_types.append(type_)
        return self

    def register_type(self, type_: Any) -> SchemaConfiguration:
        """Register an additional type.

        Object types are added to the schema even when only reachable through
        an interface. Enums and scalars must be reachable from a root field;
        the build fails otherwise.
        """
        if dataclasses.is_dataclass(type_):
            self.types.append(type_)
        else:
            self.named_types.append(type_)
        return self

    def register_scalar(self, python_type: object, scalar: Any) -> SchemaConfiguration:
        self.scalar_overrides[python_type] = scalar
        return self

    def register_extended_scalar_types(self) -> SchemaConfiguration:
        for python_type, scalar in EXTENDED_SCALARS.items():
            self.register_scalar(python_type, scalar)
        return self

    def register_authorize_directive_type(self) -> SchemaConfiguration:
        self.authorize_directive = True
        return self


@dataclass
class StitchedSchema:
    schema: strawberry.Schema
    schema_names: list[str] = field(default_factory=list)
    authorization_enabled: bool = False

    def as_str(self) -> str:
        return self.schema.as_str()


class StitchedSchemaBuilder:
    def __init__(self):
        self._schemas: dict[str, SchemaConfiguration] = {}
        self._configurations: list[ConfigureSchema] = []

    def add_schema(self, name: str, configure: ConfigureSchema) -> StitchedSchemaBuilder:
        """Describe a local schema. ``configure`` runs immediately."""
        if name in self._schemas:
            raise SchemaStitchingError(f"A schema named '{name}' was already added")
        config = SchemaConfiguration(name)
        configure(config)
        self._schemas[name] = config
        logger.debug("Schema added to stitching", schema=name)
        return self

    def add_schema_configuration(self, configure: ConfigureSchema) -> StitchedSchemaBuilder:
        """Add registrations applied to the stitched schema as a whole."""
        self._configurations.append(configure)
        return self

    def build(self) -> StitchedSchema:
        """
        Compose every added schema into one validated schema.

        Raises:
            SchemaStitchingError: On conflicting root fields, a missing query
                type, or registered types that are not reachable
        """
        stitched = SchemaConfiguration()
        for configure in self._configurations:
            configure(stitched)
        parts = [*self._schemas.values(), stitched]

        query = _merge_root("Query", [t for p in parts for t in p.query_types])
        if query is None:
            raise SchemaStitchingError("At least one schema must register a query type")
        mutation = _merge_root("Mutation", [t for p in parts for t in p.mutation_types])
        subscription = _merge_root(
            "Subscription", [t for p in parts for t in p.subscription_types]
        )

        scalar_overrides: dict[object, Any] = {}
        for part in parts:
            scalar_overrides.update(part.scalar_overrides)

        schema = strawberry.Schema(
            query=query,
            mutation=mutation,
            subscription=subscription,
            types=_unique(t for p in parts for t in p.types),
            scalar_overrides=scalar_overrides or None,
        )

        for named_type in _unique(t for p in parts for t in p.named_types):
            type_name = _graphql_name(named_type)
            if schema._schema.get_type(type_name) is None:
                raise SchemaStitchingError(
                    f"Registered type '{type_name}' is not reachable from any root field"
                )

        validate_schema(schema)

        result = StitchedSchema(
            schema=schema,
            schema_names=list(self._schemas),
            authorization_enabled=any(p.authorize_directive for p in parts),
        )
        logger.info(
            "Stitched schema built",
            schemas=result.schema_names,
            authorization_enabled=result.authorization_enabled,
        )
        return result


def _graphql_name(type_: Any) -> str:
    definition = getattr(type_, "_scalar_definition", None) or getattr(
        type_, "_enum_definition", None
    )
    if definition is not None:
        return definition.name
    return getattr(type_, "__name__", str(type_))


def _unique(items) -> list:
    seen: list = []
    for item in items:
        if item not in seen:
            seen.append(item)
    return seen


def _merge_root(name: str, types: list[type]) -> type | None:
    types = _unique(types)
    if not types:
        return None

    owners: dict[str, str] = {}
    for type_ in types:
        for strawberry_field in type_.__strawberry_definition__.fields:
            field_name = strawberry_field.python_name
            if field_name in owners:
                raise SchemaStitchingError(
                    f"{name} field '{field_name}' is defined by both "
                    f"{owners[field_name]} and {type_.__name__}"
                )
            owners[field_name] = type_.__name__

    if len(types) == 1:
        return types[0]
    return merge_types(name, tuple(types))


def validate_schema(schema: strawberry.Schema) -> None:
    """Validate a GraphQL schema at startup.

    Ensures that all type references can be resolved so that the server
    fails fast instead of erroring at request time.

    Raises:
        SchemaStitchingError: If the schema is invalid or has unresolved types
    """
    graphql_schema = schema._schema

    errors = gql_validate_schema(graphql_schema)
    if errors:
        error_messages = "; ".join(str(e) for e in errors)
        logger.error("GraphQL schema validation failed", error=error_messages)
        raise SchemaStitchingError(f"GraphQL schema validation failed: {error_messages}")

    result = graphql_sync(graphql_schema, get_introspection_query())
    if result.errors:
        error_messages = "; ".join(str(e) for e in result.errors)
        logger.error("GraphQL introspection failed", error=error_messages)
        raise SchemaStitchingError(f"GraphQL introspection failed: {error_messages}")

    logger.debug("GraphQL schema validation successful")
