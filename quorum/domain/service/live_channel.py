"""Live channel port.

The notification dispatcher and feed broadcasts publish through this
interface. It is injected, never looked up from ambient state.
"""

from abc import ABC, abstractmethod
from typing import Any

from quorum.domain.value import UserId

FEED_TOPIC = "feed"


def user_topic(user_id: UserId) -> str:
    """Topic carrying events for a single user."""
    return f"user-{user_id}"


class LiveChannel(ABC):
    """Publish-to-topic primitive, fire-and-forget."""

    @abstractmethod
    async def publish(self, topic: str, event: str, payload: dict[str, Any]) -> None:
        """Publish an event to every subscriber of a topic.

        Args:
            topic: Topic name, e.g. "user-<id>" or "feed"
            event: Event name
            payload: JSON-serializable event body

        Raises:
            Exception: Implementations may raise on transport failure;
                callers treat delivery as best-effort
        """
        pass
