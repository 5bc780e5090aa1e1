"""Use case for listing nodes with pagination."""

from contextlib import AbstractAsyncContextManager
from typing import Callable

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.features.mindmap.dtos import ListNodesRequest, ListNodesResponse, NodeResponse
from app.features.mindmap.models import Node

# Largest OFFSET a 64-bit signed integer column type can bind
MAX_OFFSET = 2**63 - 1


class ListNodesUseCaseImpl:
    """Implementation of the list nodes use case."""

    def __init__(
        self,
        get_db_session: Callable[[], AbstractAsyncContextManager[AsyncSession]],
        max_limit: int = 100,
    ):
        """Initialize the use case with dependencies.

        Args:
            get_db_session: Function to get database session
            max_limit: Upper bound applied to the requested page size
        """
        self.get_db_session = get_db_session
        self.max_limit = max_limit

    async def execute(self, request: ListNodesRequest) -> ListNodesResponse:
        """List nodes, newest first.

        Negative ``limit`` or ``offset`` values are clamped to 0, ``limit``
        is capped at ``max_limit`` and ``offset`` at ``MAX_OFFSET``. ``total``
        counts every stored node.

        Args:
            request: The paging parameters

        Returns:
            One page of nodes plus the total node count
        """
        limit = min(max(request.limit, 0), self.max_limit)
        offset = min(max(request.offset, 0), MAX_OFFSET)

        async with self.get_db_session() as session:
            count_result = await session.execute(
                select(func.count()).select_from(Node)
            )
            total = count_result.scalar() or 0

            result = await session.execute(
                select(Node)
                .order_by(Node.created_at.desc())
                .limit(limit)
                .offset(offset)
            )
            nodes = result.scalars().all()

            return ListNodesResponse(
                nodes=[NodeResponse.model_validate(node) for node in nodes],
                total=total,
            )
