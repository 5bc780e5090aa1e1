"""Nodes data transfer objects."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class CreateNodeRequest(BaseModel):
    """Request model for creating a node.

    ``title`` is optional at the schema level so that a missing title is
    reported by the use case as an invalid argument, like a blank one.
    """

    title: str | None = None
    description: str | None = None
    color: str | None = None
    type: str | None = None
    x: float | None = None
    y: float | None = None


class UpdateNodeRequest(BaseModel):
    """Request model for a partial node update. Omitted fields are kept."""

    title: str | None = None
    description: str | None = None
    color: str | None = None
    type: str | None = None
    x: float | None = None
    y: float | None = None


class NodeResponse(BaseModel):
    """A node as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str
    color: str
    type: str
    position_x: float
    position_y: float
    created_at: datetime
    updated_at: datetime


class ListNodesRequest(BaseModel):
    """Request model for listing nodes."""

    limit: int = 10
    offset: int = 0


class ListNodesResponse(BaseModel):
    """Response model for listing nodes."""

    nodes: list[NodeResponse]
    total: int


class DeleteNodeResponse(BaseModel):
    """Response model for successful node deletion."""

    success: bool = True
