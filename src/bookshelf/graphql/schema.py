"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import GraphQLObjectType, get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..errors import SchemaValidationError
from ..logging import get_logger
from ..store import BookStore
from .mutations.root import Mutation
from .queries.root import Query
from .resolvers import RESOLVERS

logger = get_logger(__name__)

# Create the GraphQL schema
schema = strawberry.Schema(query=Query, mutation=Mutation)


def _unbound_resolvers(graphql_schema: Any) -> list[str]:
    """List registry keys that name no field in the schema."""
    missing = []
    for type_name, field_name in RESOLVERS:
        gql_type = graphql_schema.get_type(type_name)
        if not isinstance(gql_type, GraphQLObjectType) or field_name not in gql_type.fields:
            missing.append(f"{type_name}.{field_name}")
    return missing


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Checks the schema structure, runs an introspection query and verifies
    that every registered resolver maps onto a schema field, so a broken
    schema stops the server from starting.

    Raises:
        SchemaValidationError: If any check fails
    """
    graphql_schema = schema._schema

    try:
        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise SchemaValidationError(
                f"GraphQL schema validation failed: {'; '.join(error_messages)}"
            )

        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise SchemaValidationError(
                f"GraphQL introspection failed: {'; '.join(error_messages)}"
            )

        missing = _unbound_resolvers(graphql_schema)
        if missing:
            raise SchemaValidationError(
                f"Resolvers registered for unknown fields: {', '.join(missing)}"
            )

        logger.info("GraphQL schema validation successful", resolvers=len(RESOLVERS))

    except SchemaValidationError as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def create_graphql_router(
    store: BookStore, graphiql: bool = True
) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI serving ``store``."""

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        return {
            "request": request,
            "store": store,
        }

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphiql=graphiql,
        context_getter=get_context,
    )
