"""Use case for deleting an edge."""

import logging
from contextlib import AbstractAsyncContextManager
from typing import Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.features.mindmap.dtos import DeleteEdgeResponse
from app.features.mindmap.errors import EdgeNotFoundError
from app.features.mindmap.models import Edge

logger = logging.getLogger(__name__)


class DeleteEdgeUseCaseImpl:
    """Implementation of the delete edge use case."""

    def __init__(
        self,
        get_db_session: Callable[[], AbstractAsyncContextManager[AsyncSession]],
    ):
        self.get_db_session = get_db_session

    async def execute(self, edge_id: str) -> DeleteEdgeResponse:
        """Permanently delete an edge.

        Raises:
            EdgeNotFoundError: If no edge has this ID
        """
        async with self.get_db_session() as session:
            edge = await session.get(Edge, edge_id)
            if edge is None:
                raise EdgeNotFoundError()

            try:
                await session.delete(edge)
                await session.commit()
            except SQLAlchemyError:
                await session.rollback()
                logger.exception("Failed to delete edge %s", edge_id)
                raise

            logger.info("Deleted edge %s", edge_id)
            return DeleteEdgeResponse(success=True)
