from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..context import get_store
from ..scalars import UUID
from ..types.post import Post

if TYPE_CHECKING:
    from ..mutations.root import CreatePostInput

logger = get_logger(__name__)


async def resolve_posts(info: strawberry.Info) -> list[Post]:
    async with get_store(info) as store:
        rows = await store.posts.find_many()
        return [Post.from_model(row) for row in rows]


async def resolve_post_by_id(info: strawberry.Info, id: UUID) -> Post | None:
    async with get_store(info) as store:
        row = await store.posts.find_unique(id)
        return Post.from_model(row) if row else None


async def create_post(info: strawberry.Info, dto: CreatePostInput) -> Post:
    async with get_store(info) as store:
        row = await store.posts.create(
            title=dto.title,
            content=dto.content,
            author_id=dto.author_id,
        )
        logger.info("Post created", post_id=str(row.id), author_id=str(row.author_id))
        return Post.from_model(row)


async def delete_post(info: strawberry.Info, id: UUID) -> str:
    async with get_store(info) as store:
        await store.posts.delete(id)
    logger.info("Post deleted", post_id=str(id))
    return f"Post with id {id} deleted successfully."
