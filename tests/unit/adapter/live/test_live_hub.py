"""Unit tests for the in-process live hub."""

import asyncio

import pytest

from quorum.adapter.error import LiveChannelError
from quorum.adapter.live import LiveHub
from quorum.config import LiveSettings


class TestLiveHub:
    """Tests for LiveHub."""

    @pytest.fixture
    def hub(self):
        """Create a hub with a small queue."""
        return LiveHub(live_settings=LiveSettings(queue_size=3))

    @pytest.mark.asyncio
    async def test_publish_reaches_topic_subscribers_only(self, hub):
        """Subscribers only see events for their topics."""
        feed = hub.subscribe(["feed"])
        inbox = hub.subscribe(["user-1"])

        await hub.publish("feed", "new-question", {"question": {"title": "Hi"}})

        event = await asyncio.wait_for(feed.receive(), timeout=1)
        assert event.event == "new-question"
        assert event.payload == {"question": {"title": "Hi"}}
        assert inbox.queue.empty()

    @pytest.mark.asyncio
    async def test_multi_topic_subscription(self, hub):
        """One subscription can follow the feed and a user topic."""
        subscription = hub.subscribe(["feed", "user-1"])

        await hub.publish("user-1", "notification", {"type": "new"})
        await hub.publish("feed", "new-answer", {})

        first = await subscription.receive()
        second = await subscription.receive()
        assert [first.topic, second.topic] == ["user-1", "feed"]

    @pytest.mark.asyncio
    async def test_full_queue_drops_oldest(self, hub):
        """Slow consumers lose their oldest events."""
        subscription = hub.subscribe(["feed"])

        for n in range(5):
            await hub.publish("feed", "tick", {"n": n})

        assert subscription.dropped == 2
        received = [(await subscription.receive()).payload["n"] for _ in range(3)]
        assert received == [2, 3, 4]

    @pytest.mark.asyncio
    async def test_publish_without_subscribers(self, hub):
        """Publishing to an empty topic is a no-op."""
        await hub.publish("user-nobody", "notification", {})

        assert hub.subscriber_count("user-nobody") == 0

    def test_unsubscribe_removes_from_all_topics(self, hub):
        """Unsubscribed connections stop counting."""
        subscription = hub.subscribe(["feed", "user-1"])
        other = hub.subscribe(["feed"])
        assert hub.subscriber_count("feed") == 2

        hub.unsubscribe(subscription)

        assert hub.subscriber_count("feed") == 1
        assert hub.subscriber_count("user-1") == 0
        hub.unsubscribe(other)
        assert hub.subscriber_count("feed") == 0

    @pytest.mark.asyncio
    async def test_closed_hub_rejects_publish(self, hub):
        """Publishing after shutdown raises."""
        hub.subscribe(["feed"])
        hub.close()

        assert hub.subscriber_count("feed") == 0
        with pytest.raises(LiveChannelError):
            await hub.publish("feed", "new-question", {})
