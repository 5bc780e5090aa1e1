"""Use case for deleting a node."""

import logging
from contextlib import AbstractAsyncContextManager
from typing import Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.features.mindmap.dtos import DeleteNodeResponse
from app.features.mindmap.errors import NodeNotFoundError
from app.features.mindmap.models import Node

logger = logging.getLogger(__name__)


class DeleteNodeUseCaseImpl:
    """Implementation of the delete node use case."""

    def __init__(
        self,
        get_db_session: Callable[[], AbstractAsyncContextManager[AsyncSession]],
    ):
        """Initialize the use case with dependencies.

        Args:
            get_db_session: Function to get database session
        """
        self.get_db_session = get_db_session

    async def execute(self, node_id: str) -> DeleteNodeResponse:
        """Permanently delete a node.

        Edges that reference the node are left in place.

        Args:
            node_id: The ID of the node to delete

        Raises:
            NodeNotFoundError: If no node has this ID
        """
        async with self.get_db_session() as session:
            node = await session.get(Node, node_id)
            if node is None:
                raise NodeNotFoundError()

            try:
                await session.delete(node)
                await session.commit()
            except SQLAlchemyError:
                await session.rollback()
                logger.exception("Failed to delete node %s", node_id)
                raise

            logger.info("Deleted node %s", node_id)
            return DeleteNodeResponse(success=True)
