"""Liveness probe."""

from datetime import UTC, datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from quorum.adapter.live import LiveHub
from quorum.config import Settings
from quorum.domain.service import FEED_TOPIC

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    git_sha: str
    feed_subscribers: int


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings], live_hub: FromDishka[LiveHub]
) -> HealthResponse:
    """Report the running build and how many clients follow the feed."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(UTC),
        git_sha=settings.git_sha,
        feed_subscribers=live_hub.subscriber_count(FEED_TOPIC),
    )
