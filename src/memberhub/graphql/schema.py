"""
Main GraphQL schema definition using Strawberry
"""

import strawberry
from fastapi import APIRouter, Request
from graphql import validate_schema as gql_validate_schema
from strawberry.schema.config import StrawberryConfig
from strawberry.types import ExecutionResult

from ..config import settings
from ..logging import get_logger
from .context import GraphQLContext
from .mutations.root import Mutation
from .payloads import GraphQLErrorPayload, GraphQLRequest, GraphQLResponse
from .queries.root import Query
from .scalars import SCALAR_MAP

logger = get_logger(__name__)

# Built once at import; per-request state travels in GraphQLContext
schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
    config=StrawberryConfig(scalar_map=SCALAR_MAP),
)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Ensures all type references resolve (including the self-referencing
    ``User`` lists) so the server fails fast instead of at first request.

    Raises:
        Exception: If the schema is invalid or has unresolved types
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        from graphql import get_introspection_query, graphql_sync

        result = graphql_sync(graphql_schema, get_introspection_query())

        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def build_response(result: ExecutionResult) -> GraphQLResponse:
    """Convert an execution result into the HTTP response body."""
    response = GraphQLResponse()
    if result.data is not None:
        response.data = result.data
    if result.errors:
        response.errors = [GraphQLErrorPayload(**error.formatted) for error in result.errors]
    return response


async def execute_request(
    payload: GraphQLRequest, context: GraphQLContext | None = None
) -> GraphQLResponse:
    """Execute one GraphQL request against the schema."""
    result = await schema.execute(
        payload.query,
        variable_values=payload.variables,
        context_value=context or GraphQLContext(),
        operation_name=payload.operation_name,
    )
    return build_response(result)


def create_graphql_router() -> APIRouter:
    """Create the router exposing the schema at ``settings.graphql_path``."""
    router = APIRouter(tags=["GraphQL"])

    @router.post(
        settings.graphql_path,
        response_model=GraphQLResponse,
        response_model_exclude_unset=True,
    )
    async def graphql_endpoint(  # pyright: ignore [reportUnusedFunction]
        payload: GraphQLRequest, request: Request
    ) -> GraphQLResponse:
        """Execute a GraphQL query; errors are reported in the body, never the status."""
        return await execute_request(payload, GraphQLContext(request=request))

    return router
