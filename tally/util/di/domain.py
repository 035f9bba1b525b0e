"""Domain layer DI providers."""

from dishka import Scope, provide

from tally.domain.model import VoteConfigRegistry
from tally.domain.repository import VoteStore
from tally.domain.service import (
    ConditionalUpdateExecutor,
    PropagationEngine,
    VoteService,
    VoteTransitionResolver,
)
from tally.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with the store/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_transition_resolver(self) -> VoteTransitionResolver:
        """Provide the stateless transition resolver."""
        return VoteTransitionResolver()

    @provide
    def get_conditional_update_executor(
        self, vote_store: VoteStore
    ) -> ConditionalUpdateExecutor:
        """Provide conditional update executor."""
        return ConditionalUpdateExecutor(vote_store=vote_store)

    @provide
    def get_propagation_engine(
        self, registry: VoteConfigRegistry, vote_store: VoteStore
    ) -> PropagationEngine:
        """Provide ancestor propagation engine."""
        return PropagationEngine(registry=registry, vote_store=vote_store)

    @provide
    def get_vote_service(
        self,
        vote_store: VoteStore,
        registry: VoteConfigRegistry,
        resolver: VoteTransitionResolver,
        executor: ConditionalUpdateExecutor,
        propagation_engine: PropagationEngine,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_store=vote_store,
            registry=registry,
            resolver=resolver,
            executor=executor,
            propagation_engine=propagation_engine,
        )
