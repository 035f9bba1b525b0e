"""In-memory vote store for testing."""

from typing import Optional

import logfire

from tally.domain.model import Votable, VoteTransition
from tally.domain.repository import VoteStore
from tally.domain.value import CounterDelta, EntityId, UpdateResult, VotableType


class InMemoryVoteStore(VoteStore):
    """In-memory implementation of VoteStore for testing.

    Guard evaluation and mutation never await, so each operation runs to
    completion without another task interleaving on the event loop.
    """

    def __init__(self) -> None:
        self._entities: dict[tuple[VotableType, EntityId], Votable] = {}

    async def find_by_id(
        self, votable_type: VotableType, entity_id: EntityId
    ) -> Optional[Votable]:
        """Find a votable entity by ID."""
        return self._entities.get((votable_type, entity_id))

    async def save(self, entity: Votable) -> Votable:
        """Save or replace an entity."""
        self._entities[(entity.votable_type, entity.id)] = entity
        return entity

    async def conditional_update(
        self,
        votable_type: VotableType,
        entity_id: EntityId,
        transition: VoteTransition,
    ) -> UpdateResult:
        """Apply a vote transition if its guard holds."""
        key = (votable_type, entity_id)
        entity = self._entities.get(key)
        if entity is None or not transition.guard.matches(entity.votes):
            return UpdateResult(matched=False, count=0)

        self._entities[key] = entity.model_copy(
            update={"votes": entity.votes.apply(transition)}
        )
        return UpdateResult(matched=True, count=1)

    async def increment(
        self,
        votable_type: VotableType,
        entity_id: EntityId,
        delta: CounterDelta,
    ) -> None:
        """Unconditionally increment counters."""
        key = (votable_type, entity_id)
        entity = self._entities.get(key)
        if entity is None:
            logfire.warn(
                "Increment target not found",
                votable_type=votable_type.value,
                entity_id=str(entity_id),
            )
            return

        self._entities[key] = entity.model_copy(
            update={"votes": entity.votes.increment(delta)}
        )
