"""
Health check endpoint.

The service keeps no connections or state, so liveness is the only probe.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from flashdeck.config import settings

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Liveness probe."""
    return HealthResponse(status="healthy", service=settings.app_name)
