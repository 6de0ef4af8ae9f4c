"""
Member type GraphQL type definitions
"""

from enum import Enum

import strawberry

from ...dbmodels import MemberTypes
from ..scalars import format_number


@strawberry.enum
class MemberTypeId(Enum):
    """Identifiers of the fixed member types."""

    BASIC = "BASIC"
    BUSINESS = "BUSINESS"


@strawberry.type
class MemberType:
    """Member type for GraphQL API."""

    id: MemberTypeId
    discount: str | None
    posts_limit_per_month: str | None

    @classmethod
    def from_model(cls, row: MemberTypes) -> "MemberType":
        return cls(
            id=MemberTypeId(row.id),
            discount=format_number(row.discount),
            posts_limit_per_month=format_number(row.posts_limit_per_month),
        )
