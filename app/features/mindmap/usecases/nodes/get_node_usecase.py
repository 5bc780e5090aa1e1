"""Use case for getting a single node by ID."""

from contextlib import AbstractAsyncContextManager
from typing import Callable

from sqlalchemy.ext.asyncio import AsyncSession

from app.features.mindmap.dtos import NodeResponse
from app.features.mindmap.errors import NodeNotFoundError
from app.features.mindmap.models import Node


class GetNodeUseCaseImpl:
    """Implementation of the get node use case."""

    def __init__(
        self,
        get_db_session: Callable[[], AbstractAsyncContextManager[AsyncSession]],
    ):
        self.get_db_session = get_db_session

    async def execute(self, node_id: str) -> NodeResponse:
        """Get a single node by ID.

        Raises:
            NodeNotFoundError: If no node has this ID
        """
        async with self.get_db_session() as session:
            node = await session.get(Node, node_id)
            if node is None:
                raise NodeNotFoundError()

            return NodeResponse.model_validate(node)
