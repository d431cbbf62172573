"""In-process publish/subscribe hub for live updates.

Each WebSocket connection owns a Subscription with a bounded queue. The
hub fans published events out to the queues of every subscription on the
topic. Slow consumers lose their oldest events instead of blocking
publishers.
"""

import asyncio
from collections import defaultdict
from typing import Any, Iterable

import logfire
from pydantic import BaseModel

from quorum.adapter.error import LiveChannelError
from quorum.config import LiveSettings
from quorum.domain.service.live_channel import LiveChannel


class LiveEvent(BaseModel):
    """Event delivered to a subscriber."""

    topic: str
    event: str
    payload: dict[str, Any]


class Subscription:
    """A subscriber's view of the hub."""

    def __init__(self, topics: frozenset[str], queue_size: int) -> None:
        self.topics = topics
        self.queue: asyncio.Queue[LiveEvent] = asyncio.Queue(maxsize=queue_size)
        self.dropped = 0

    async def receive(self) -> LiveEvent:
        """Wait for the next event."""
        return await self.queue.get()

    def deliver(self, event: LiveEvent) -> None:
        """Enqueue an event, dropping the oldest one when full."""
        if self.queue.full():
            self.queue.get_nowait()
            self.dropped += 1
        self.queue.put_nowait(event)


class LiveHub(LiveChannel):
    """LiveChannel implementation backed by asyncio queues."""

    def __init__(self, live_settings: LiveSettings) -> None:
        """Initialize hub.

        Args:
            live_settings: Per-subscriber queue settings
        """
        self.live_settings = live_settings
        self._subscriptions: dict[str, set[Subscription]] = defaultdict(set)
        self._closed = False

    def subscribe(self, topics: Iterable[str]) -> Subscription:
        """Register a subscriber for the given topics.

        Args:
            topics: Topics to receive, e.g. "feed" and "user-<id>"

        Returns:
            The new subscription
        """
        subscription = Subscription(frozenset(topics), self.live_settings.queue_size)
        for topic in subscription.topics:
            self._subscriptions[topic].add(subscription)
        logfire.debug("Live subscriber added", topics=sorted(subscription.topics))
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a subscriber from all of its topics."""
        for topic in subscription.topics:
            subscribers = self._subscriptions.get(topic)
            if subscribers is None:
                continue
            subscribers.discard(subscription)
            if not subscribers:
                del self._subscriptions[topic]
        if subscription.dropped:
            logfire.warn(
                "Live subscriber dropped events",
                topics=sorted(subscription.topics),
                dropped=subscription.dropped,
            )

    def subscriber_count(self, topic: str) -> int:
        """Number of subscribers currently on a topic."""
        return len(self._subscriptions.get(topic, ()))

    def close(self) -> None:
        """Stop accepting publishes and forget all subscribers."""
        self._closed = True
        self._subscriptions.clear()

    async def publish(self, topic: str, event: str, payload: dict[str, Any]) -> None:
        """Fan an event out to every subscriber of the topic.

        Raises:
            LiveChannelError: If the hub has been closed
        """
        if self._closed:
            raise LiveChannelError("Live hub is closed")

        live_event = LiveEvent(topic=topic, event=event, payload=payload)
        subscribers = list(self._subscriptions.get(topic, ()))
        for subscription in subscribers:
            subscription.deliver(live_event)

        logfire.debug(
            "Live event published", topic=topic, event=event, receivers=len(subscribers)
        )
