"""Vote domain service."""

from typing import Optional, Union
from uuid import UUID

import logfire

from tally.domain.error import (
    GuardMismatchError,
    NoOpVoteError,
    NotFoundError,
    ValidationError,
)
from tally.domain.model.registry import VoteConfigRegistry
from tally.domain.model.votable import Votable
from tally.domain.model.vote import VoteRequest
from tally.domain.repository import VoteStore
from tally.domain.value import EntityId, VotableType, VoteIntent, VoterId, VoteValue
from tally.domain.value.common import ValueObject

from .base import Service
from .executor import ConditionalUpdateExecutor
from .propagation import PropagationEngine, PropagationOutcome
from .transition import VoteTransitionResolver


class VoteResult(ValueObject):
    """A committed vote transition."""

    votable_type: VotableType
    votee_id: EntityId
    voter_id: VoterId
    value: VoteValue
    intent: VoteIntent
    propagation: tuple[PropagationOutcome, ...] = ()


def _coerce_uuid(value: Union[UUID, str], label: str) -> UUID:
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        raise ValidationError(f"Invalid {label} id: {value!r}") from None


def _coerce_value(value: Union[VoteValue, str, None]) -> Optional[VoteValue]:
    if value is None or isinstance(value, VoteValue):
        return value
    try:
        return VoteValue(value)
    except ValueError:
        raise ValidationError(f"Invalid vote value: {value!r}") from None


class VoteService(Service):
    """Domain service for vote operations.

    Resolves the voter's intent from their recorded side, then runs the
    guarded write and, once it has succeeded, propagation to ancestors.
    """

    def __init__(
        self,
        vote_store: VoteStore,
        registry: VoteConfigRegistry,
        resolver: VoteTransitionResolver,
        executor: ConditionalUpdateExecutor,
        propagation_engine: PropagationEngine,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_store: Vote store
            registry: Vote configuration registry
            resolver: Transition resolver
            executor: Conditional update executor
            propagation_engine: Ancestor propagation engine
        """
        self.vote_store = vote_store
        self.registry = registry
        self.resolver = resolver
        self.executor = executor
        self.propagation_engine = propagation_engine

    async def vote(
        self,
        votable_type: VotableType,
        votee: Union[Votable, EntityId, UUID, str],
        voter_id: Union[VoterId, UUID, str],
        value: Union[VoteValue, str, None] = None,
        *,
        unvote: bool = False,
        revote: bool = False,
    ) -> VoteResult:
        """Cast, switch or remove a vote.

        Args:
            votable_type: Type of the votee
            votee: Votee instance, or its ID
            voter_id: Voter ID
            value: Side to vote; optional when unvoting
            unvote: Remove the voter's vote
            revote: Caller already knows the voter holds the opposite side

        Returns:
            The committed transition with its propagation outcomes

        Raises:
            ValidationError: If the type is not voteable, or an ID or value
                is malformed
            NotFoundError: If the votee does not exist
            NoOpVoteError: If the vote would change nothing
            GuardMismatchError: If the voter's side changed concurrently
        """
        self._ensure_voteable(votable_type)
        voter = VoterId(_coerce_uuid(voter_id, "voter"))
        requested = _coerce_value(value)

        with logfire.span(
            "vote_service.vote",
            votable_type=votable_type.value,
            voter_id=str(voter),
            value=requested.value if requested else None,
            unvote=unvote,
        ):
            weights = self.registry.weights_for(votable_type)
            entity = await self._load_votee(votable_type, votee)

            intent, resolved = self._resolve_intent(
                entity, voter, requested, unvote=unvote, revote=revote
            )
            request = VoteRequest(
                votee_id=entity.id, voter_id=voter, value=resolved, intent=intent
            )
            transition = self.resolver.resolve(request, weights)

            applied = await self.executor.apply(votable_type, entity.id, transition)
            if not applied:
                raise GuardMismatchError(str(entity.id), str(voter), intent.value)

            outcomes = await self.propagation_engine.propagate(
                votable_type, entity, intent, resolved
            )

            logfire.info(
                "Vote committed",
                votee_id=str(entity.id),
                voter_id=str(voter),
                intent=intent.value,
                value=resolved.value,
            )
            return VoteResult(
                votable_type=votable_type,
                votee_id=entity.id,
                voter_id=voter,
                value=resolved,
                intent=intent,
                propagation=tuple(outcomes),
            )

    def current_vote_side(
        self, entity: Votable, voter_id: Union[VoterId, UUID, str]
    ) -> Optional[VoteValue]:
        """Side the voter holds on an entity, None if they have not voted."""
        return entity.vote_value(VoterId(_coerce_uuid(voter_id, "voter")))

    async def get_vote_side(
        self,
        votable_type: VotableType,
        votee_id: Union[EntityId, UUID, str],
        voter_id: Union[VoterId, UUID, str],
    ) -> Optional[VoteValue]:
        """Load an entity and return the voter's side on it.

        Raises:
            ValidationError: If the type is not voteable
            NotFoundError: If the entity does not exist
        """
        self._ensure_voteable(votable_type)
        entity = await self._load_votee(votable_type, votee_id)
        return self.current_vote_side(entity, voter_id)

    def _ensure_voteable(self, votable_type: VotableType) -> None:
        if not self.registry.is_voteable(votable_type):
            raise ValidationError(f"{votable_type.value} is not voteable")

    async def _load_votee(
        self,
        votable_type: VotableType,
        votee: Union[Votable, EntityId, UUID, str],
    ) -> Votable:
        if isinstance(votee, Votable):
            if votee.votable_type is not votable_type:
                raise ValidationError(
                    f"Votee is a {votee.votable_type.value}, not a {votable_type.value}"
                )
            return votee

        votee_id = EntityId(_coerce_uuid(votee, votable_type.value))
        entity = await self.vote_store.find_by_id(votable_type, votee_id)
        if entity is None:
            logfire.warn(
                "Vote on non-existent entity",
                votable_type=votable_type.value,
                votee_id=str(votee_id),
            )
            raise NotFoundError(votable_type.value.capitalize(), str(votee_id))
        return entity

    @staticmethod
    def _resolve_intent(
        entity: Votable,
        voter_id: VoterId,
        value: Optional[VoteValue],
        *,
        unvote: bool,
        revote: bool,
    ) -> tuple[VoteIntent, VoteValue]:
        if unvote:
            if value is None:
                value = entity.vote_value(voter_id)
                if value is None:
                    raise NoOpVoteError(
                        str(entity.id), str(voter_id), "no vote to remove"
                    )
            return VoteIntent.UNVOTE, value

        if value is None:
            raise ValidationError("A vote value is required unless unvoting")
        if revote:
            return VoteIntent.REVOTE, value

        current = entity.vote_value(voter_id)
        if current is None:
            return VoteIntent.NEW, value
        if current is value:
            raise NoOpVoteError(
                str(entity.id), str(voter_id), f"already voted {value.value}"
            )
        return VoteIntent.REVOTE, value
