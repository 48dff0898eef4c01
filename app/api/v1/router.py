"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import players, schedule, training

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    players.router, prefix="/players", tags=["Players"]
)
api_router.include_router(
    training.router,
    prefix="/training-sessions",
    tags=["Training sessions"],
)
api_router.include_router(
    schedule.router, prefix="/schedule", tags=["Schedule"]
)
