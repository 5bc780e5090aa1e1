"""Mind map API routes - main router that includes the node and edge route modules."""

from fastapi import APIRouter

from app.features.mindmap.routes.edges import router as edges_router
from app.features.mindmap.routes.nodes import router as nodes_router

router = APIRouter()

# Include all route handlers
router.include_router(nodes_router)
router.include_router(edges_router)
