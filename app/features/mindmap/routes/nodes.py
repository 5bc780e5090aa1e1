"""Node route handlers."""

from typing import Protocol

from fastapi import APIRouter, Depends, Query, status

from app.core.settings import get_settings
from app.db.postgres.session import get_db_session
from app.features.mindmap.dtos import (
    CreateNodeRequest,
    DeleteNodeResponse,
    ListNodesRequest,
    ListNodesResponse,
    NodeResponse,
    UpdateNodeRequest,
)
from app.features.mindmap.usecases import (
    CreateNodeUseCaseImpl,
    DeleteNodeUseCaseImpl,
    GetNodeUseCaseImpl,
    ListNodesUseCaseImpl,
    UpdateNodeUseCaseImpl,
)

router = APIRouter(prefix="/nodes", tags=["nodes"])


class CreateNodeUseCase(Protocol):
    """Protocol for the create node use case."""

    async def execute(self, request: CreateNodeRequest) -> NodeResponse:
        """Create a node."""
        ...


class GetNodeUseCase(Protocol):
    """Protocol for the get node use case."""

    async def execute(self, node_id: str) -> NodeResponse:
        """Get a single node by ID."""
        ...


class UpdateNodeUseCase(Protocol):
    """Protocol for the update node use case."""

    async def execute(self, node_id: str, request: UpdateNodeRequest) -> NodeResponse:
        """Merge the supplied fields into a node."""
        ...


class DeleteNodeUseCase(Protocol):
    """Protocol for the delete node use case."""

    async def execute(self, node_id: str) -> DeleteNodeResponse:
        """Delete a node."""
        ...


class ListNodesUseCase(Protocol):
    """Protocol for the list nodes use case."""

    async def execute(self, request: ListNodesRequest) -> ListNodesResponse:
        """List nodes with pagination."""
        ...


async def get_create_node_use_case() -> CreateNodeUseCase:
    """Dependency injection for the create node use case."""
    return CreateNodeUseCaseImpl(get_db_session=get_db_session)


async def get_get_node_use_case() -> GetNodeUseCase:
    """Dependency injection for the get node use case."""
    return GetNodeUseCaseImpl(get_db_session=get_db_session)


async def get_update_node_use_case() -> UpdateNodeUseCase:
    """Dependency injection for the update node use case."""
    return UpdateNodeUseCaseImpl(get_db_session=get_db_session)


async def get_delete_node_use_case() -> DeleteNodeUseCase:
    """Dependency injection for the delete node use case."""
    return DeleteNodeUseCaseImpl(get_db_session=get_db_session)


async def get_list_nodes_use_case() -> ListNodesUseCase:
    """Dependency injection for the list nodes use case."""
    return ListNodesUseCaseImpl(
        get_db_session=get_db_session,
        max_limit=get_settings().list_max_limit,
    )


@router.post("", response_model=NodeResponse, status_code=status.HTTP_201_CREATED)
async def create_node(
    request: CreateNodeRequest,
    use_case: CreateNodeUseCase = Depends(get_create_node_use_case),
) -> NodeResponse:
    """Create a node. ``title`` is required and must not be blank."""
    return await use_case.execute(request)


@router.get("", response_model=ListNodesResponse)
async def list_nodes(
    limit: int | None = Query(None),
    offset: int = Query(0),
    use_case: ListNodesUseCase = Depends(get_list_nodes_use_case),
) -> ListNodesResponse:
    """List nodes, newest first.

    Out-of-range paging values are clamped rather than rejected: negative
    values become 0, ``limit`` is capped at the configured maximum and
    ``offset`` at the largest value the database can bind.
    """
    if limit is None:
        limit = get_settings().list_default_limit
    return await use_case.execute(ListNodesRequest(limit=limit, offset=offset))


@router.get("/{node_id}", response_model=NodeResponse)
async def get_node(
    node_id: str,
    use_case: GetNodeUseCase = Depends(get_get_node_use_case),
) -> NodeResponse:
    """Get a single node by ID."""
    return await use_case.execute(node_id)


@router.patch("/{node_id}", response_model=NodeResponse)
async def update_node(
    node_id: str,
    request: UpdateNodeRequest,
    use_case: UpdateNodeUseCase = Depends(get_update_node_use_case),
) -> NodeResponse:
    """Update a node.

    Fields that can be updated:
    - title, description, color, type
    - x, y: canvas position

    Omitted fields keep their current value.
    """
    return await use_case.execute(node_id, request)


@router.delete("/{node_id}", response_model=DeleteNodeResponse)
async def delete_node(
    node_id: str,
    use_case: DeleteNodeUseCase = Depends(get_delete_node_use_case),
) -> DeleteNodeResponse:
    """Delete a node. Edges pointing at it are kept."""
    return await use_case.execute(node_id)
