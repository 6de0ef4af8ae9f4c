"""
Root GraphQL mutation definitions
"""

import strawberry

from ..scalars import UUID
from ..types.member_type import MemberTypeId
from ..types.post import Post
from ..types.profile import Profile
from ..types.user import User


# Input types for mutations
@strawberry.input
class CreateUserInput:
    """Input for creating a new user."""

    name: str
    balance: str


@strawberry.input
class CreateProfileInput:
    """Input for creating a profile for an existing user."""

    is_male: str
    user_id: UUID
    member_type_id: MemberTypeId
    year_of_birth: str | None = None


@strawberry.input
class CreatePostInput:
    """Input for creating a new post."""

    title: str
    content: str
    author_id: UUID


@strawberry.type(name="Mutations")
class Mutation:
    """Root GraphQL mutation type."""

    # User mutations
    @strawberry.mutation(name="createUser")
    async def create_user(self, info: strawberry.Info, dto: CreateUserInput) -> User | None:
        """Create a new user."""
        from ..resolvers.user import create_user

        return await create_user(info, dto)

    @strawberry.mutation(name="deleteUser")
    async def delete_user(self, info: strawberry.Info, id: UUID) -> str | None:
        """Delete a user."""
        from ..resolvers.user import delete_user

        return await delete_user(info, id)

    @strawberry.mutation(name="subscribeTo")
    async def subscribe_to(
        self, info: strawberry.Info, user_id: UUID, author_id: UUID
    ) -> str | None:
        """Subscribe a user to an author (not persisted)."""
        from ..resolvers.user import subscribe_to

        return await subscribe_to(info, user_id, author_id)

    @strawberry.mutation(name="unsubscribeFrom")
    async def unsubscribe_from(
        self, info: strawberry.Info, user_id: UUID, author_id: UUID
    ) -> str | None:
        """Unsubscribe a user from an author (not persisted)."""
        from ..resolvers.user import unsubscribe_from

        return await unsubscribe_from(info, user_id, author_id)

    # Profile mutations
    @strawberry.mutation(name="createProfile")
    async def create_profile(
        self, info: strawberry.Info, dto: CreateProfileInput
    ) -> Profile | None:
        """Create a profile."""
        from ..resolvers.profile import create_profile

        return await create_profile(info, dto)

    @strawberry.mutation(name="deleteProfile")
    async def delete_profile(self, info: strawberry.Info, id: UUID) -> str | None:
        """Delete a profile."""
        from ..resolvers.profile import delete_profile

        return await delete_profile(info, id)

    # Post mutations
    @strawberry.mutation(name="createPost")
    async def create_post(self, info: strawberry.Info, dto: CreatePostInput) -> Post | None:
        """Create a post."""
        from ..resolvers.post import create_post

        return await create_post(info, dto)

    @strawberry.mutation(name="deletePost")
    async def delete_post(self, info: strawberry.Info, id: UUID) -> str | None:
        """Delete a post."""
        from ..resolvers.post import delete_post

        return await delete_post(info, id)
