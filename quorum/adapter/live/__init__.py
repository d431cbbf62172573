"""In-process live channel."""

from quorum.adapter.live.hub import LiveEvent, LiveHub, Subscription

__all__ = ["LiveEvent", "LiveHub", "Subscription"]
