"""Feed broadcast domain service."""

from typing import Any

import logfire

from .base import Service
from .live_channel import FEED_TOPIC, LiveChannel


class FeedService(Service):
    """Broadcasts new content to every connected client.

    Delivery is best-effort: a failed broadcast never fails the request
    that created the content.
    """

    def __init__(self, live_channel: LiveChannel) -> None:
        """Initialize feed service.

        Args:
            live_channel: Channel publishing to connected clients
        """
        self.live_channel = live_channel

    async def broadcast(self, event: str, payload: dict[str, Any]) -> None:
        """Publish an event on the public feed topic.

        Args:
            event: Event name, e.g. "new-question"
            payload: JSON-serializable event body
        """
        try:
            await self.live_channel.publish(FEED_TOPIC, event, payload)
        except Exception as e:
            logfire.error("Feed broadcast failed", event=event, error=str(e))
