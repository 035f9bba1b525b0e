"""Domain value objects for Tally."""

from tally.domain.value.identifiers import EntityId, VoterId
from tally.domain.value.types import (
    CounterDelta,
    UpdateResult,
    VotableType,
    VoteIntent,
    VoteValue,
    VoteWeights,
)

__all__ = [
    # Identifiers
    "EntityId",
    "VoterId",
    # Types
    "CounterDelta",
    "UpdateResult",
    "VotableType",
    "VoteIntent",
    "VoteValue",
    "VoteWeights",
]
