"""Application layer DI providers."""

from dishka import Scope, provide

from tally.application.usecase.vote import CastVoteUseCase, GetVoteSideUseCase
from tally.domain.service import VoteService
from tally.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_get_vote_side_use_case(
        self, vote_service: VoteService
    ) -> GetVoteSideUseCase:
        """Provide get vote side use case."""
        return GetVoteSideUseCase(vote_service=vote_service)
