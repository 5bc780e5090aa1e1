"""Mind map data transfer objects."""

from .edges_dto import (
    CreateEdgeRequest,
    DeleteEdgeResponse,
    EdgeResponse,
    ListEdgesResponse,
    UpdateEdgeRequest,
)
from .nodes_dto import (
    CreateNodeRequest,
    DeleteNodeResponse,
    ListNodesRequest,
    ListNodesResponse,
    NodeResponse,
    UpdateNodeRequest,
)

__all__ = [
    "CreateNodeRequest",
    "UpdateNodeRequest",
    "NodeResponse",
    "ListNodesRequest",
    "ListNodesResponse",
    "DeleteNodeResponse",
    "CreateEdgeRequest",
    "UpdateEdgeRequest",
    "EdgeResponse",
    "ListEdgesResponse",
    "DeleteEdgeResponse",
]
