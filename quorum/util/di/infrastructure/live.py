"""Live channel infrastructure providers."""

from collections.abc import Iterator

from dishka import Scope, provide

from quorum.adapter.live import LiveHub
from quorum.config import LiveSettings
from quorum.domain.service import LiveChannel
from quorum.util.di.base import ProviderBase


class LiveProvider(ProviderBase):
    """Live channel component base."""

    __mock_component__ = "live"


class ProdLiveProvider(LiveProvider):
    """Production live provider using the in-process hub.

    One hub per process; WebSocket connections subscribe to it and domain
    services publish through it as a LiveChannel.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_live_hub(self, live_settings: LiveSettings) -> Iterator[LiveHub]:
        """Provide the hub, closed when the container closes."""
        hub = LiveHub(live_settings=live_settings)
        yield hub
        hub.close()

    @provide(scope=Scope.APP)
    def get_live_channel(self, live_hub: LiveHub) -> LiveChannel:
        """Provide the hub as the domain's LiveChannel."""
        return live_hub
