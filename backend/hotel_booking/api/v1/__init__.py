"""Versioned API router."""

from fastapi import APIRouter

from . import availability, health

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(
    availability.router, prefix="/rooms/availability", tags=["availability"]
)
