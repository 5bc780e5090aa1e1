"""Edges data transfer objects."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class CreateEdgeRequest(BaseModel):
    """Request model for creating an edge between two existing nodes."""

    source_node_id: str | None = None
    target_node_id: str | None = None
    type: str | None = None
    weight: float | None = None
    label: str | None = None


class UpdateEdgeRequest(BaseModel):
    """Request model for a partial edge update.

    Endpoints are not part of this model; any endpoint fields sent by a
    client are ignored.
    """

    type: str | None = None
    weight: float | None = None
    label: str | None = None


class EdgeResponse(BaseModel):
    """An edge as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    type: str
    weight: float
    label: str
    source_node_id: str
    target_node_id: str
    created_at: datetime


class ListEdgesResponse(BaseModel):
    """Response model for listing edges."""

    edges: list[EdgeResponse]


class DeleteEdgeResponse(BaseModel):
    """Response model for successful edge deletion."""

    success: bool = True
