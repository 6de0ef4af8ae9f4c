"""
Shared pytest fixtures and configuration for all tests.
"""

import os
import sys
from collections.abc import AsyncGenerator, Awaitable, Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

# Add src directory to path so imports work without an editable install
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

GraphQLRunner = Callable[..., Awaitable[dict[str, Any]]]


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest_asyncio.fixture
async def database(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """Point the shared connection pool at a fresh SQLite file with seeded member types."""
    from memberhub.database.connection import (
        dispose_database,
        get_async_engine,
        get_async_session,
        init_database,
        reset_database,
    )
    from memberhub.database.seed_data import ensure_member_types
    from memberhub.dbmodels import Base

    reset_database()
    init_database(f"sqlite+aiosqlite:///{tmp_path / 'memberhub.db'}", force_reinit=True)

    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with get_async_session() as session:
        await ensure_member_types(session)

    yield engine

    await dispose_database()


@pytest_asyncio.fixture
async def db_session(database: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Provide a committed-on-exit session against the test database."""
    _ = database
    from memberhub.database.connection import get_async_session

    async with get_async_session() as session:
        yield session


@pytest_asyncio.fixture
async def client(database: AsyncEngine) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to a freshly created app."""
    _ = database
    from memberhub.api.app import create_app

    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client


@pytest.fixture
def run_graphql(client: AsyncClient) -> GraphQLRunner:
    """POST a query to the GraphQL route and return the decoded body."""

    async def _run(query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        payload: dict[str, Any] = {"query": query}
        if variables is not None:
            payload["variables"] = variables
        response = await client.post("/", json=payload)
        assert response.status_code == 200, response.text
        return response.json()

    return _run


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
