"""Main API router — combines all endpoint routers."""

from fastapi import APIRouter

from codecraft.api.executor import router as executor_router
from codecraft.api.health import router as health_router
from codecraft.api.projects import router as projects_router
from codecraft.api.validation import router as validation_router
from codecraft.api.websocket import router as websocket_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# Validation
api_router.include_router(validation_router, tags=["Validation"])

# Remote execution
api_router.include_router(executor_router, tags=["Execution"])

# Projects and files CRUD
api_router.include_router(projects_router, tags=["Projects"])

# WebSocket is exported separately — mounted at app root (no /api/v1 prefix)
ws_router = websocket_router
