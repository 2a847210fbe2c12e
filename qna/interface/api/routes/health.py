"""Health check routes."""

from datetime import datetime

from fastapi import APIRouter
from pydantic import BaseModel

from qna.config import API_VERSION

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Liveness status."""

    status: str
    timestamp: datetime
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness check. Does not touch the database."""
    return HealthResponse(
        status="healthy", timestamp=datetime.now(), version=API_VERSION
    )
