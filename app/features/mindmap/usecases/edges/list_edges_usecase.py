"""Use case for listing all edges."""

from contextlib import AbstractAsyncContextManager
from typing import Callable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.features.mindmap.dtos import EdgeResponse, ListEdgesResponse
from app.features.mindmap.models import Edge


class ListEdgesUseCaseImpl:
    """Implementation of the list edges use case."""

    def __init__(
        self,
        get_db_session: Callable[[], AbstractAsyncContextManager[AsyncSession]],
    ):
        self.get_db_session = get_db_session

    async def execute(self) -> ListEdgesResponse:
        """List every edge, newest first. There is no paging."""
        async with self.get_db_session() as session:
            result = await session.execute(
                select(Edge).order_by(Edge.created_at.desc())
            )
            edges = result.scalars().all()

            return ListEdgesResponse(
                edges=[EdgeResponse.model_validate(edge) for edge in edges]
            )
