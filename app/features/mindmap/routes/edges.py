"""Edge route handlers."""

from typing import Protocol

from fastapi import APIRouter, Depends, status

from app.db.postgres.session import get_db_session
from app.features.mindmap.dtos import (
    CreateEdgeRequest,
    DeleteEdgeResponse,
    EdgeResponse,
    ListEdgesResponse,
    UpdateEdgeRequest,
)
from app.features.mindmap.usecases import (
    CreateEdgeUseCaseImpl,
    DeleteEdgeUseCaseImpl,
    GetEdgeUseCaseImpl,
    ListEdgesUseCaseImpl,
    UpdateEdgeUseCaseImpl,
)

router = APIRouter(prefix="/edges", tags=["edges"])


class CreateEdgeUseCase(Protocol):
    """Protocol for the create edge use case."""

    async def execute(self, request: CreateEdgeRequest) -> EdgeResponse:
        """Create an edge between two existing nodes."""
        ...


class GetEdgeUseCase(Protocol):
    """Protocol for the get edge use case."""

    async def execute(self, edge_id: str) -> EdgeResponse:
        """Get a single edge by ID."""
        ...


class UpdateEdgeUseCase(Protocol):
    """Protocol for the update edge use case."""

    async def execute(self, edge_id: str, request: UpdateEdgeRequest) -> EdgeResponse:
        """Merge the supplied fields into an edge."""
        ...


class DeleteEdgeUseCase(Protocol):
    """Protocol for the delete edge use case."""

    async def execute(self, edge_id: str) -> DeleteEdgeResponse:
        """Delete an edge."""
        ...


class ListEdgesUseCase(Protocol):
    """Protocol for the list edges use case."""

    async def execute(self) -> ListEdgesResponse:
        """List all edges."""
        ...


async def get_create_edge_use_case() -> CreateEdgeUseCase:
    """Dependency injection for the create edge use case."""
    return CreateEdgeUseCaseImpl(get_db_session=get_db_session)


async def get_get_edge_use_case() -> GetEdgeUseCase:
    """Dependency injection for the get edge use case."""
    return GetEdgeUseCaseImpl(get_db_session=get_db_session)


async def get_update_edge_use_case() -> UpdateEdgeUseCase:
    """Dependency injection for the update edge use case."""
    return UpdateEdgeUseCaseImpl(get_db_session=get_db_session)


async def get_delete_edge_use_case() -> DeleteEdgeUseCase:
    """Dependency injection for the delete edge use case."""
    return DeleteEdgeUseCaseImpl(get_db_session=get_db_session)


async def get_list_edges_use_case() -> ListEdgesUseCase:
    """Dependency injection for the list edges use case."""
    return ListEdgesUseCaseImpl(get_db_session=get_db_session)


@router.post("", response_model=EdgeResponse, status_code=status.HTTP_201_CREATED)
async def create_edge(
    request: CreateEdgeRequest,
    use_case: CreateEdgeUseCase = Depends(get_create_edge_use_case),
) -> EdgeResponse:
    """Create an edge.

    Both ``source_node_id`` and ``target_node_id`` must name existing
    nodes; the source is checked first.
    """
    return await use_case.execute(request)


@router.get("", response_model=ListEdgesResponse)
async def list_edges(
    use_case: ListEdgesUseCase = Depends(get_list_edges_use_case),
) -> ListEdgesResponse:
    """List every edge, newest first."""
    return await use_case.execute()


@router.get("/{edge_id}", response_model=EdgeResponse)
async def get_edge(
    edge_id: str,
    use_case: GetEdgeUseCase = Depends(get_get_edge_use_case),
) -> EdgeResponse:
    """Get a single edge by ID."""
    return await use_case.execute(edge_id)


@router.patch("/{edge_id}", response_model=EdgeResponse)
async def update_edge(
    edge_id: str,
    request: UpdateEdgeRequest,
    use_case: UpdateEdgeUseCase = Depends(get_update_edge_use_case),
) -> EdgeResponse:
    """Update an edge's type, weight or label. Endpoints never change."""
    return await use_case.execute(edge_id, request)


@router.delete("/{edge_id}", response_model=DeleteEdgeResponse)
async def delete_edge(
    edge_id: str,
    use_case: DeleteEdgeUseCase = Depends(get_delete_edge_use_case),
) -> DeleteEdgeResponse:
    """Delete an edge."""
    return await use_case.execute(edge_id)
