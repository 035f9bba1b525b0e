"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from tally.config import Settings, VotingSettings
from tally.domain.model import VoteConfigRegistry
from tally.util.di.base import ProviderBase
from tally.util.registry import build_registry


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_voting_settings(self, settings: Settings) -> VotingSettings:
        """Provide voting settings."""
        return settings.voting

    @provide(scope=Scope.APP)
    def provide_vote_registry(self, voting: VotingSettings) -> VoteConfigRegistry:
        """Provide the vote registry, built once per container."""
        return build_registry(voting)
