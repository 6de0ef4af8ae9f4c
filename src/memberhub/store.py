"""Repository helpers wrapping an AsyncSession.

Each call issues exactly one statement; there is no caching or batching.
Id text coming from GraphQL is converted to ``uuid.UUID`` here, on the way
into SQL.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import Uuid, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from .dbmodels import Base, MemberTypes, Posts, Profiles, SubscribersOnAuthors, Users
from .errors import RecordNotFoundError
from .graphql.scalars import to_uuid

ModelT = TypeVar("ModelT", bound=Base)


class EntityRepository(Generic[ModelT]):
    """findMany / findUnique / create / delete for a single model."""

    def __init__(self, session: AsyncSession, model: type[ModelT], entity_name: str):
        self.session = session
        self.model = model
        self.entity_name = entity_name

    def _coerce(self, values: dict[str, Any]) -> dict[str, Any]:
        columns = self.model.__table__.c  # type: ignore[attr-defined]
        coerced = {}
        for key, value in values.items():
            if key in columns and isinstance(columns[key].type, Uuid) and value is not None:
                value = to_uuid(value)
            coerced[key] = value
        return coerced

    def _key(self, id: UUID | str) -> UUID | str:
        return self._coerce({"id": id})["id"]

    async def find_many(self, **where: Any) -> list[ModelT]:
        stmt = select(self.model).filter_by(**self._coerce(where))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def find_first(self, **where: Any) -> ModelT | None:
        stmt = select(self.model).filter_by(**self._coerce(where)).limit(1)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_unique(self, id: UUID | str) -> ModelT | None:
        key = self._key(id)
        stmt = select(self.model).where(self.model.id == key)  # type: ignore[attr-defined]
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, **data: Any) -> ModelT:
        row = self.model(**self._coerce(data))
        self.session.add(row)
        # Flush so generated ids and constraint violations surface here
        await self.session.flush()
        return row

    async def delete(self, id: UUID | str) -> None:
        key = self._key(id)
        stmt = delete(self.model).where(self.model.id == key)  # type: ignore[attr-defined]
        result = await self.session.execute(stmt)
        if result.rowcount == 0:
            raise RecordNotFoundError(self.entity_name, id)


class UserRepository(EntityRepository[Users]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, Users, "User")

    async def find_subscribed_to(self, user_id: UUID | str) -> list[Users]:
        """Authors the given user is subscribed to."""
        stmt = (
            select(Users)
            .join(SubscribersOnAuthors, SubscribersOnAuthors.author_id == Users.id)
            .where(SubscribersOnAuthors.subscriber_id == to_uuid(user_id))
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def find_subscribers(self, author_id: UUID | str) -> list[Users]:
        """Users subscribed to the given author."""
        stmt = (
            select(Users)
            .join(SubscribersOnAuthors, SubscribersOnAuthors.subscriber_id == Users.id)
            .where(SubscribersOnAuthors.author_id == to_uuid(author_id))
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())


class Store:
    """Per-session facade exposing one repository per entity."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.member_types: EntityRepository[MemberTypes] = EntityRepository(
            session, MemberTypes, "MemberType"
        )
        self.users = UserRepository(session)
        self.profiles: EntityRepository[Profiles] = EntityRepository(session, Profiles, "Profile")
        self.posts: EntityRepository[Posts] = EntityRepository(session, Posts, "Post")
