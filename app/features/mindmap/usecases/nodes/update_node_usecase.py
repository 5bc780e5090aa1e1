"""Use case for partially updating a node."""

import logging
from contextlib import AbstractAsyncContextManager
from typing import Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.features.mindmap.dtos import NodeResponse, UpdateNodeRequest
from app.features.mindmap.errors import InvalidArgumentError, NodeNotFoundError
from app.features.mindmap.models import Node
from app.features.mindmap.utils import is_blank, utc_now

logger = logging.getLogger(__name__)

# Request field -> model attribute
_NODE_FIELDS = {
    "title": "title",
    "description": "description",
    "color": "color",
    "type": "type",
    "x": "position_x",
    "y": "position_y",
}


class UpdateNodeUseCaseImpl:
    """Implementation of the update node use case."""

    def __init__(
        self,
        get_db_session: Callable[[], AbstractAsyncContextManager[AsyncSession]],
    ):
        """Initialize the use case with dependencies.

        Args:
            get_db_session: Function to get database session
        """
        self.get_db_session = get_db_session

    async def execute(self, node_id: str, request: UpdateNodeRequest) -> NodeResponse:
        """Merge the supplied fields into the stored node.

        Fields that are omitted or null keep their stored value. ``updated_at``
        is refreshed on every call, even when nothing else changes.

        Args:
            node_id: The ID of the node to update
            request: The fields to overwrite

        Returns:
            The merged node as persisted

        Raises:
            NodeNotFoundError: If no node has this ID
            InvalidArgumentError: If a supplied title is blank
        """
        changes = request.model_dump(exclude_unset=True, exclude_none=True)

        async with self.get_db_session() as session:
            node = await session.get(Node, node_id)
            if node is None:
                raise NodeNotFoundError()

            if "title" in changes and is_blank(changes["title"]):
                raise InvalidArgumentError("Title cannot be empty")

            try:
                for field, attribute in _NODE_FIELDS.items():
                    if field in changes:
                        setattr(node, attribute, changes[field])
                node.updated_at = utc_now()

                await session.commit()
                await session.refresh(node)
            except SQLAlchemyError:
                await session.rollback()
                logger.exception("Failed to update node %s", node_id)
                raise

            return NodeResponse.model_validate(node)
