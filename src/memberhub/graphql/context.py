"""
Per-request execution context handed to every resolver via ``info.context``
"""

from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from dataclasses import dataclass

import strawberry
from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from ..database.connection import get_async_session
from ..store import Store

SessionFactory = Callable[[], AbstractAsyncContextManager[AsyncSession]]


@dataclass
class GraphQLContext:
    """Request plus the session factory resolvers open their store from."""

    request: Request | None = None
    session_factory: SessionFactory | None = None

    @asynccontextmanager
    async def store(self) -> AsyncIterator[Store]:
        factory = self.session_factory or get_async_session
        async with factory() as session:
            yield Store(session)


def get_store(info: strawberry.Info) -> AbstractAsyncContextManager[Store]:
    """Open a store bound to a fresh session for one resolver call."""
    context: GraphQLContext = info.context
    return context.store()
