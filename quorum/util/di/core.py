"""Configuration providers.

Settings are read once per container; the sections are exposed on their
own so services depend only on the part they use.
"""

from dishka import Scope, provide

from quorum.config import AuthSettings, LiveSettings, ReactionSettings, Settings
from quorum.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    scope = Scope.APP

    @provide
    def settings(self) -> Settings:
        return Settings()

    @provide
    def auth(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def reactions(self, settings: Settings) -> ReactionSettings:
        return settings.reactions

    @provide
    def live(self, settings: Settings) -> LiveSettings:
        return settings.live
