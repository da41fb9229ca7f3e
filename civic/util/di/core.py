"""Configuration providers.

``Settings`` is read once per process; the sections that individual
components need are exposed on their own so those components do not
depend on the whole settings object.
"""

from dishka import Scope, provide

from civic.config import DatabaseSettings, Settings, VotingSettings
from civic.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings from the environment and ``.env``."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return Settings()

    @provide(scope=Scope.APP)
    def provide_database_settings(self, settings: Settings) -> DatabaseSettings:
        return settings.database

    @provide(scope=Scope.APP)
    def provide_voting_settings(self, settings: Settings) -> VotingSettings:
        """Vote weighting, consumed by the user service."""
        return settings.voting
