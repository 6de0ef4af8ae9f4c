"""
User GraphQL type definitions
"""

import strawberry

from ...dbmodels import Users
from ..scalars import UUID, format_number
from .post import Post
from .profile import Profile


@strawberry.type
class User:
    """User type for GraphQL API."""

    id: UUID
    name: str | None
    balance: str | None

    @strawberry.field
    async def profile(self, info: strawberry.Info) -> Profile | None:
        """Get the profile owned by this user."""
        from ..resolvers.user import resolve_user_profile

        return await resolve_user_profile(self, info)

    @strawberry.field
    async def posts(self, info: strawberry.Info) -> list[Post | None] | None:
        """Get posts written by this user."""
        from ..resolvers.user import resolve_user_posts

        return await resolve_user_posts(self, info)

    @strawberry.field
    async def user_subscribed_to(self, info: strawberry.Info) -> list["User | None"] | None:
        """Get the authors this user is subscribed to."""
        from ..resolvers.user import resolve_user_subscribed_to

        return await resolve_user_subscribed_to(self, info)

    @strawberry.field
    async def subscribed_to_user(self, info: strawberry.Info) -> list["User | None"] | None:
        """Get the users subscribed to this user."""
        from ..resolvers.user import resolve_subscribed_to_user

        return await resolve_subscribed_to_user(self, info)

    @classmethod
    def from_model(cls, row: Users) -> "User":
        return cls(id=row.id, name=row.name, balance=format_number(row.balance))
