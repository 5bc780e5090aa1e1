"""Use case for creating an edge between two existing nodes."""

import logging
from contextlib import AbstractAsyncContextManager
from typing import Callable

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.features.mindmap.dtos import CreateEdgeRequest, EdgeResponse
from app.features.mindmap.errors import (
    InvalidArgumentError,
    SourceNodeNotFoundError,
    TargetNodeNotFoundError,
)
from app.features.mindmap.models import Edge, Node
from app.features.mindmap.utils import generate_id, utc_now

logger = logging.getLogger(__name__)


class CreateEdgeUseCaseImpl:
    """Implementation of the create edge use case."""

    def __init__(
        self,
        get_db_session: Callable[[], AbstractAsyncContextManager[AsyncSession]],
    ):
        """Initialize the use case with dependencies.

        Args:
            get_db_session: Function to get database session
        """
        self.get_db_session = get_db_session

    async def execute(self, request: CreateEdgeRequest) -> EdgeResponse:
        """Create an edge after checking that both endpoints exist.

        The source node is checked before the target node, so a request with
        two unknown endpoints always reports the source.

        Args:
            request: The edge creation request

        Returns:
            The edge as persisted

        Raises:
            InvalidArgumentError: If either endpoint ID is missing or empty
            SourceNodeNotFoundError: If the source node does not exist
            TargetNodeNotFoundError: If the target node does not exist
        """
        if not request.source_node_id or not request.target_node_id:
            raise InvalidArgumentError(
                "source_node_id and target_node_id are required"
            )

        async with self.get_db_session() as session:
            if not await self._node_exists(session, request.source_node_id):
                raise SourceNodeNotFoundError()
            if not await self._node_exists(session, request.target_node_id):
                raise TargetNodeNotFoundError()

            edge = Edge(
                id=generate_id(),
                type=request.type or "",
                weight=request.weight or 0.0,
                label=request.label or "",
                source_node_id=request.source_node_id,
                target_node_id=request.target_node_id,
                created_at=utc_now(),
            )

            try:
                session.add(edge)
                await session.commit()
                await session.refresh(edge)
            except SQLAlchemyError:
                await session.rollback()
                logger.exception("Failed to create edge")
                raise

            logger.info(
                "Created edge %s (%s -> %s)",
                edge.id,
                edge.source_node_id,
                edge.target_node_id,
            )
            return EdgeResponse.model_validate(edge)

    @staticmethod
    async def _node_exists(session: AsyncSession, node_id: str) -> bool:
        result = await session.execute(select(Node.id).where(Node.id == node_id))
        return result.scalar_one_or_none() is not None
