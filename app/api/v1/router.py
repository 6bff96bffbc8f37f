"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import health, material_line, session

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(
    material_line.router, prefix="/material-line", tags=["material-line"]
)
api_router.include_router(session.router, prefix="/session", tags=["session"])
