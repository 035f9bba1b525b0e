"""Vote store interface."""

from abc import ABC, abstractmethod
from typing import Optional

from tally.domain.model.votable import Votable
from tally.domain.model.vote import VoteTransition
from tally.domain.value import CounterDelta, EntityId, UpdateResult, VotableType


class VoteStore(ABC):
    """Store for the vote records embedded in votable entities.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer and must apply each
    operation to a single entity atomically.
    """

    @abstractmethod
    async def find_by_id(
        self, votable_type: VotableType, entity_id: EntityId
    ) -> Optional[Votable]:
        """Find a votable entity by ID.

        Args:
            votable_type: Type of entity (post, comment, user)
            entity_id: The entity's unique identifier

        Returns:
            The entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, entity: Votable) -> Votable:
        """Save a votable entity (create or replace).

        Args:
            entity: The entity to save

        Returns:
            The saved entity
        """
        pass

    @abstractmethod
    async def conditional_update(
        self,
        votable_type: VotableType,
        entity_id: EntityId,
        transition: VoteTransition,
    ) -> UpdateResult:
        """Apply a vote transition if and only if its guard holds.

        Guard evaluation and mutation happen in one atomic step: the voter
        sets are checked and updated, and the counters incremented, in a
        single round trip against a single entity.

        Args:
            votable_type: Type of the votee
            entity_id: ID of the votee
            transition: Guard and mutation computed by the resolver

        Returns:
            Whether an entity matched, and how many were updated
        """
        pass

    @abstractmethod
    async def increment(
        self,
        votable_type: VotableType,
        entity_id: EntityId,
        delta: CounterDelta,
    ) -> None:
        """Unconditionally increment the vote counters of an entity.

        Used for ancestor propagation. A missing entity is not an error.

        Args:
            votable_type: Type of the entity
            entity_id: ID of the entity
            delta: Counter increments (negative to decrement)
        """
        pass
