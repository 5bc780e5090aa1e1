"""Use case for creating a new node."""

import logging
from contextlib import AbstractAsyncContextManager
from typing import Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.features.mindmap.dtos import CreateNodeRequest, NodeResponse
from app.features.mindmap.errors import InvalidArgumentError
from app.features.mindmap.models import Node
from app.features.mindmap.utils import generate_id, is_blank, utc_now

logger = logging.getLogger(__name__)


class CreateNodeUseCaseImpl:
    """Implementation of the create node use case."""

    def __init__(
        self,
        get_db_session: Callable[[], AbstractAsyncContextManager[AsyncSession]],
    ):
        """Initialize the use case with dependencies.

        Args:
            get_db_session: Function to get database session
        """
        self.get_db_session = get_db_session

    async def execute(self, request: CreateNodeRequest) -> NodeResponse:
        """Create a node with a freshly generated ID.

        Args:
            request: The node creation request

        Returns:
            The node as persisted, including server-set timestamps

        Raises:
            InvalidArgumentError: If the title is missing or blank
        """
        if is_blank(request.title):
            raise InvalidArgumentError("Title is required and cannot be empty")

        now = utc_now()
        node = Node(
            id=generate_id(),
            title=request.title,
            description=request.description or "",
            color=request.color or "",
            type=request.type or "",
            position_x=request.x or 0.0,
            position_y=request.y or 0.0,
            created_at=now,
            updated_at=now,
        )

        async with self.get_db_session() as session:
            try:
                session.add(node)
                await session.commit()
                await session.refresh(node)
            except SQLAlchemyError:
                await session.rollback()
                logger.exception("Failed to create node")
                raise

            logger.info("Created node %s", node.id)
            return NodeResponse.model_validate(node)
