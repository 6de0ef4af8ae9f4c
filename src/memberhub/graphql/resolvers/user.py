from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..context import get_store
from ..scalars import UUID, parse_number
from ..types.post import Post
from ..types.profile import Profile
from ..types.user import User

if TYPE_CHECKING:
    from ..mutations.root import CreateUserInput

logger = get_logger(__name__)


# Query resolvers
async def resolve_users(info: strawberry.Info) -> list[User]:
    async with get_store(info) as store:
        rows = await store.users.find_many()
        return [User.from_model(row) for row in rows]


async def resolve_user_by_id(info: strawberry.Info, id: UUID) -> User | None:
    async with get_store(info) as store:
        row = await store.users.find_unique(id)
        return User.from_model(row) if row else None


# Field resolvers
async def resolve_user_profile(user: User, info: strawberry.Info) -> Profile | None:
    async with get_store(info) as store:
        row = await store.profiles.find_first(user_id=user.id)
        return Profile.from_model(row) if row else None


async def resolve_user_posts(user: User, info: strawberry.Info) -> list[Post]:
    async with get_store(info) as store:
        rows = await store.posts.find_many(author_id=user.id)
        return [Post.from_model(row) for row in rows]


async def resolve_user_subscribed_to(user: User, info: strawberry.Info) -> list[User]:
    async with get_store(info) as store:
        rows = await store.users.find_subscribed_to(user.id)
        return [User.from_model(row) for row in rows]


async def resolve_subscribed_to_user(user: User, info: strawberry.Info) -> list[User]:
    async with get_store(info) as store:
        rows = await store.users.find_subscribers(user.id)
        return [User.from_model(row) for row in rows]


# Mutation resolvers
async def create_user(info: strawberry.Info, dto: CreateUserInput) -> User:
    balance = parse_number(dto.balance)
    async with get_store(info) as store:
        row = await store.users.create(name=dto.name, balance=balance)
        logger.info("User created", user_id=str(row.id))
        return User.from_model(row)


async def delete_user(info: strawberry.Info, id: UUID) -> str:
    # No existence check: a missing id surfaces as RecordNotFoundError
    async with get_store(info) as store:
        await store.users.delete(id)
    logger.info("User deleted", user_id=str(id))
    return f"User with id {id} deleted successfully."


# TODO: write/remove the subscribers_on_authors row once the subscription write
# path (who may subscribe whom, duplicate handling) is agreed on.
async def subscribe_to(info: strawberry.Info, user_id: UUID, author_id: UUID) -> str:
    _ = info
    logger.warning(
        "subscribeTo is not persisted", user_id=str(user_id), author_id=str(author_id)
    )
    return f"Subscribed to user {author_id}"


async def unsubscribe_from(info: strawberry.Info, user_id: UUID, author_id: UUID) -> str:
    _ = info
    logger.warning(
        "unsubscribeFrom is not persisted", user_id=str(user_id), author_id=str(author_id)
    )
    return f"Unsubscribed from user {author_id}"
