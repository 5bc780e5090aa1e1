"""Use case for getting a single edge by ID."""

from contextlib import AbstractAsyncContextManager
from typing import Callable

from sqlalchemy.ext.asyncio import AsyncSession

from app.features.mindmap.dtos import EdgeResponse
from app.features.mindmap.errors import EdgeNotFoundError
from app.features.mindmap.models import Edge


class GetEdgeUseCaseImpl:
    """Implementation of the get edge use case."""

    def __init__(
        self,
        get_db_session: Callable[[], AbstractAsyncContextManager[AsyncSession]],
    ):
        self.get_db_session = get_db_session

    async def execute(self, edge_id: str) -> EdgeResponse:
        """Get a single edge by ID.

        The endpoints are returned as stored, whether or not the nodes
        still exist.
        """
        async with self.get_db_session() as session:
            edge = await session.get(Edge, edge_id)
            if edge is None:
                raise EdgeNotFoundError()

            return EdgeResponse.model_validate(edge)
