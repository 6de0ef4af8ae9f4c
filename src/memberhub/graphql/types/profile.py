"""
Profile GraphQL type definitions
"""

import strawberry

from ...dbmodels import Profiles
from ..scalars import UUID, format_flag, format_number
from .member_type import MemberType


@strawberry.type
class Profile:
    """Profile type for GraphQL API."""

    id: UUID
    is_male: str
    year_of_birth: str | None
    user_id: UUID
    member_type_id: strawberry.Private[str]

    @strawberry.field
    async def member_type(self, info: strawberry.Info) -> MemberType | None:
        """Get the member type referenced by this profile."""
        from ..resolvers.profile import resolve_profile_member_type

        return await resolve_profile_member_type(self, info)

    @classmethod
    def from_model(cls, row: Profiles) -> "Profile":
        return cls(
            id=row.id,
            is_male=format_flag(row.is_male),
            year_of_birth=format_number(row.year_of_birth),
            user_id=row.user_id,
            member_type_id=row.member_type_id,
        )
