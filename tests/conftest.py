"""Pytest configuration and shared fixtures for all tests.

This module provides function-scoped fixtures for:
- A throwaway SQLite database per test (aiosqlite)
- SQLAlchemy engine, session factory and session management
- Use case factories wired to the test database
- An HTTP client for the application with every use case bound to the test database
"""

from collections.abc import AsyncGenerator, Callable
from contextlib import AbstractAsyncContextManager
from pathlib import Path

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.features.mindmap.dtos import (
    CreateEdgeRequest,
    CreateNodeRequest,
    EdgeResponse,
    NodeResponse,
)
from app.features.mindmap.routes import edges, nodes
from app.features.mindmap.usecases import (
    CreateEdgeUseCaseImpl,
    CreateNodeUseCaseImpl,
    DeleteEdgeUseCaseImpl,
    DeleteNodeUseCaseImpl,
    GetEdgeUseCaseImpl,
    GetNodeUseCaseImpl,
    ListEdgesUseCaseImpl,
    ListNodesUseCaseImpl,
    UpdateEdgeUseCaseImpl,
    UpdateNodeUseCaseImpl,
)
from app.main import create_app
from tests.utils.database import create_all_tables, create_test_engine, drop_all_tables

SessionFactory = Callable[[], AbstractAsyncContextManager[AsyncSession]]


@pytest_asyncio.fixture(scope="function")
async def async_engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """Provide SQLAlchemy async engine for tests.

    Each test gets its own database file with a fresh schema.
    """
    engine = create_test_engine(tmp_path / "mindmap_test.db")
    await create_all_tables(engine)

    yield engine

    await drop_all_tables(engine)
    await engine.dispose()


@pytest.fixture
def session_maker(async_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Provide the session factory bound to the test engine."""
    return async_sessionmaker(
        bind=async_engine, class_=AsyncSession, expire_on_commit=False
    )


@pytest.fixture
def get_db_session(session_maker: async_sessionmaker[AsyncSession]) -> SessionFactory:
    """Provide the ``get_db_session`` callable use cases are built with.

    Every call opens a new session, like the production dependency.
    """
    return session_maker


@pytest_asyncio.fixture
async def db_session(
    session_maker: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Provide a separate session for arranging and inspecting database state."""
    async with session_maker() as session:
        yield session
        await session.rollback()


@pytest.fixture
def create_node(get_db_session: SessionFactory) -> Callable:
    """Provide a coroutine that creates a node through the use case."""
    use_case = CreateNodeUseCaseImpl(get_db_session=get_db_session)

    async def _create(title: str = "Idea", **fields) -> NodeResponse:
        return await use_case.execute(CreateNodeRequest(title=title, **fields))

    return _create


@pytest.fixture
def create_edge(get_db_session: SessionFactory) -> Callable:
    """Provide a coroutine that creates an edge through the use case."""
    use_case = CreateEdgeUseCaseImpl(get_db_session=get_db_session)

    async def _create(source_node_id: str, target_node_id: str, **fields) -> EdgeResponse:
        return await use_case.execute(
            CreateEdgeRequest(
                source_node_id=source_node_id,
                target_node_id=target_node_id,
                **fields,
            )
        )

    return _create


def _bind(use_case_cls, get_db_session):
    def provider():
        return use_case_cls(get_db_session=get_db_session)

    return provider


@pytest_asyncio.fixture
async def app(get_db_session) -> AsyncGenerator[FastAPI, None]:
    """Provide the application with every use case bound to the test database."""
    app = create_app()
    overrides = {
        nodes.get_create_node_use_case: CreateNodeUseCaseImpl,
        nodes.get_get_node_use_case: GetNodeUseCaseImpl,
        nodes.get_update_node_use_case: UpdateNodeUseCaseImpl,
        nodes.get_delete_node_use_case: DeleteNodeUseCaseImpl,
        nodes.get_list_nodes_use_case: ListNodesUseCaseImpl,
        edges.get_create_edge_use_case: CreateEdgeUseCaseImpl,
        edges.get_get_edge_use_case: GetEdgeUseCaseImpl,
        edges.get_update_edge_use_case: UpdateEdgeUseCaseImpl,
        edges.get_delete_edge_use_case: DeleteEdgeUseCaseImpl,
        edges.get_list_edges_use_case: ListEdgesUseCaseImpl,
    }
    for provider, use_case_cls in overrides.items():
        app.dependency_overrides[provider] = _bind(use_case_cls, get_db_session)

    yield app

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client
