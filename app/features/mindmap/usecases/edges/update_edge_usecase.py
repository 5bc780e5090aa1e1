"""Use case for partially updating an edge."""

import logging
from contextlib import AbstractAsyncContextManager
from typing import Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.features.mindmap.dtos import EdgeResponse, UpdateEdgeRequest
from app.features.mindmap.errors import EdgeNotFoundError
from app.features.mindmap.models import Edge

logger = logging.getLogger(__name__)


class UpdateEdgeUseCaseImpl:
    """Implementation of the update edge use case."""

    def __init__(
        self,
        get_db_session: Callable[[], AbstractAsyncContextManager[AsyncSession]],
    ):
        """Initialize the use case with dependencies.

        Args:
            get_db_session: Function to get database session
        """
        self.get_db_session = get_db_session

    async def execute(self, edge_id: str, request: UpdateEdgeRequest) -> EdgeResponse:
        """Merge the supplied type, weight and label into the stored edge.

        Args:
            edge_id: The ID of the edge to update
            request: The fields to overwrite; omitted or null fields are kept

        Returns:
            The merged edge, endpoints unchanged

        Raises:
            EdgeNotFoundError: If no edge has this ID
        """
        changes = request.model_dump(exclude_unset=True, exclude_none=True)

        async with self.get_db_session() as session:
            edge = await session.get(Edge, edge_id)
            if edge is None:
                raise EdgeNotFoundError()

            try:
                # Update only the provided fields
                if "type" in changes:
                    edge.type = changes["type"]
                if "weight" in changes:
                    edge.weight = changes["weight"]
                if "label" in changes:
                    edge.label = changes["label"]

                await session.commit()
                await session.refresh(edge)
            except SQLAlchemyError:
                await session.rollback()
                logger.exception("Failed to update edge %s", edge_id)
                raise

            return EdgeResponse.model_validate(edge)
