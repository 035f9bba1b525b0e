"""Vote record and transition models.

Every votable entity embeds a VoteRecord. It is zero-initialized when the
entity is created and only ever changes through a guarded VoteTransition
(on the votee) or an unconditional CounterDelta (on an ancestor).
"""

from typing import Optional

from pydantic import Field, model_validator

from tally.domain.model.common import DomainModel
from tally.domain.value import (
    CounterDelta,
    EntityId,
    VoteIntent,
    VoterId,
    VoteValue,
)
from tally.domain.value.common import ValueObject


class VoteRecord(DomainModel):
    """Embedded voting state of a single entity.

    Business rules:
    - A voter appears in at most one of up_voter_ids / down_voter_ids
    - up_count / down_count match the set sizes at quiescence; ancestors
      configured without counter propagation only accumulate vote_point
    - vote_count is normally up_count + down_count
    """

    up_voter_ids: frozenset[VoterId] = Field(default_factory=frozenset)
    down_voter_ids: frozenset[VoterId] = Field(default_factory=frozenset)
    up_count: int = 0
    down_count: int = 0
    vote_count: int = 0
    vote_point: int = 0

    @model_validator(mode="after")
    def validate_disjoint_voters(self) -> "VoteRecord":
        """Validate that no voter sits on both sides."""
        overlap = self.up_voter_ids & self.down_voter_ids
        if overlap:
            raise ValueError(
                f"Voters present in both up and down sets: {sorted(map(str, overlap))}"
            )
        return self

    def voter_ids(self, value: VoteValue) -> frozenset[VoterId]:
        """Voter ids on the given side."""
        return self.up_voter_ids if value is VoteValue.UP else self.down_voter_ids

    def side_of(self, voter_id: VoterId) -> Optional[VoteValue]:
        """Side the voter currently holds, None if they have not voted."""
        if voter_id in self.up_voter_ids:
            return VoteValue.UP
        if voter_id in self.down_voter_ids:
            return VoteValue.DOWN
        return None

    def increment(self, delta: CounterDelta) -> "VoteRecord":
        """Return a copy with the counter delta applied."""
        return self.model_copy(
            update={
                "vote_count": self.vote_count + delta.vote_count,
                "up_count": self.up_count + delta.up_count,
                "down_count": self.down_count + delta.down_count,
                "vote_point": self.vote_point + delta.vote_point,
            }
        )

    def apply(self, transition: "VoteTransition") -> "VoteRecord":
        """Return a copy with the transition applied.

        The caller is responsible for having checked transition.guard first.
        """
        voter_id = transition.guard.voter_id
        sides = {
            VoteValue.UP: set(self.up_voter_ids),
            VoteValue.DOWN: set(self.down_voter_ids),
        }
        if transition.remove_from is not None:
            sides[transition.remove_from].discard(voter_id)
        if transition.add_to is not None:
            sides[transition.add_to].add(voter_id)

        updated = self.increment(transition.delta)
        return updated.model_copy(
            update={
                "up_voter_ids": frozenset(sides[VoteValue.UP]),
                "down_voter_ids": frozenset(sides[VoteValue.DOWN]),
            }
        )


class VoteRequest(ValueObject):
    """A fully resolved request: intent and value are always explicit."""

    votee_id: EntityId
    voter_id: VoterId
    value: VoteValue
    intent: VoteIntent


class VoteGuard(ValueObject):
    """Set-membership precondition checked atomically by the store.

    The voter must be in the ``present_in`` set (when given) and in none of
    the ``absent_from`` sets.
    """

    voter_id: VoterId
    present_in: Optional[VoteValue] = None
    absent_from: frozenset[VoteValue] = frozenset()

    def matches(self, record: VoteRecord) -> bool:
        """Evaluate the guard against a record."""
        if self.present_in is not None:
            if self.voter_id not in record.voter_ids(self.present_in):
                return False
        return all(
            self.voter_id not in record.voter_ids(side) for side in self.absent_from
        )


class VoteTransition(ValueObject):
    """Guard plus the mutation to apply when it holds."""

    intent: VoteIntent
    guard: VoteGuard
    add_to: Optional[VoteValue] = None
    remove_from: Optional[VoteValue] = None
    delta: CounterDelta
