"""Base class for entities that carry a vote record."""

from typing import ClassVar, Optional
from uuid import UUID

from pydantic import Field

from tally.domain.model.common import DomainModel
from tally.domain.model.vote import VoteRecord
from tally.domain.value import EntityId, VotableType, VoterId, VoteValue


class Votable(DomainModel):
    """Entity that can be voted on or receive propagated vote counters.

    Subclasses declare:
    - votable_type: the type tag used by the registry and the store
    - relations: foreign-key attribute per related votable type
    """

    votable_type: ClassVar[VotableType]
    relations: ClassVar[dict[VotableType, str]] = {}

    id: EntityId
    votes: VoteRecord = Field(default_factory=VoteRecord)

    @classmethod
    def foreign_key_for(cls, related_type: VotableType) -> Optional[str]:
        """Foreign-key attribute pointing at the related type, if declared."""
        return cls.relations.get(related_type)

    def foreign_key_value(self, field: str) -> Optional[EntityId]:
        """Read a foreign-key value, None when unset."""
        value = getattr(self, field, None)
        if value is None:
            return None
        return EntityId(UUID(str(value)))

    def vote_value(self, voter_id: VoterId) -> Optional[VoteValue]:
        """Side the voter currently holds on this entity."""
        return self.votes.side_of(voter_id)
