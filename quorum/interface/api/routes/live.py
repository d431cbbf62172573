"""Live update WebSocket."""

import asyncio
from uuid import UUID

import logfire
from fastapi import APIRouter, Cookie, WebSocket, WebSocketDisconnect

from quorum.adapter.live import LiveHub, Subscription
from quorum.config import AuthSettings
from quorum.domain.service import FEED_TOPIC, JWTService, user_topic
from quorum.domain.value import UserId
from quorum.interface.api.auth import optional_user_id
from quorum.util.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["live"])


def topics_for(user_id: UUID | None) -> list[str]:
    """Everyone follows the feed; signed-in users also get their own topic."""
    if user_id is None:
        return [FEED_TOPIC]
    return [FEED_TOPIC, user_topic(UserId(user_id))]


async def _forward(websocket: WebSocket, subscription: Subscription) -> None:
    while True:
        event = await subscription.receive()
        await websocket.send_json(event.model_dump(mode="json"))


async def _drain(websocket: WebSocket) -> None:
    # Clients do not send anything meaningful; reading surfaces disconnects
    while True:
        await websocket.receive_text()


@router.websocket("/live")
async def live(websocket: WebSocket, auth_token: str | None = Cookie(default=None)):
    """Stream feed events, plus the user's notifications when signed in.

    Each message is a JSON object with topic, event and payload.
    """
    container = websocket.app.state.dishka_container
    live_hub = await container.get(LiveHub)
    auth_settings = await container.get(AuthSettings)

    user_id = optional_user_id(JWTService(auth_settings), auth_token)
    topics = topics_for(user_id)

    await websocket.accept()
    subscription = live_hub.subscribe(topics)
    logfire.info("Live client connected", user_id=user_id, topics=topics)

    tasks = [
        asyncio.create_task(_forward(websocket, subscription)),
        asyncio.create_task(_drain(websocket)),
    ]
    try:
        done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
        for task in pending:
            task.cancel()
        for task in done:
            error = task.exception()
            if error is not None and not isinstance(error, WebSocketDisconnect):
                logger.warning("Live connection ended with error: %s", error)
    finally:
        for task in tasks:
            task.cancel()
        live_hub.unsubscribe(subscription)
        logfire.info("Live client disconnected", user_id=user_id)
