"""
Request and response body models for the GraphQL HTTP route
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class GraphQLRequest(BaseModel):
    """POST body: a query string plus optional variables."""

    model_config = ConfigDict(populate_by_name=True)

    query: str
    variables: dict[str, Any] | None = None
    operation_name: str | None = Field(default=None, alias="operationName")


class GraphQLErrorLocation(BaseModel):
    line: int
    column: int


class GraphQLErrorPayload(BaseModel):
    message: str
    locations: list[GraphQLErrorLocation] | None = None
    path: list[str | int] | None = None
    extensions: dict[str, Any] | None = None


class GraphQLResponse(BaseModel):
    """Standard GraphQL execution result shape."""

    data: dict[str, Any] | None = None
    errors: list[GraphQLErrorPayload] | None = None
