"""Domain value objects for Tally.

Value objects are immutable and defined by their values, not identity.
They encapsulate the vote vocabulary shared by every component.
"""

from enum import Enum

from pydantic import Field

from tally.domain.value.common import ValueObject


class VoteValue(str, Enum):
    """Side of a vote."""

    UP = "up"
    DOWN = "down"

    @property
    def opposite(self) -> "VoteValue":
        """The other side."""
        return VoteValue.DOWN if self is VoteValue.UP else VoteValue.UP


class VoteIntent(str, Enum):
    """Kind of transition requested for a voter on a votee."""

    NEW = "new"
    REVOTE = "revote"
    UNVOTE = "unvote"


class VotableType(str, Enum):
    """Type of entity that carries a vote record."""

    POST = "post"
    COMMENT = "comment"
    USER = "user"


class VoteWeights(ValueObject):
    """Points assigned for each up (down) vote.

    ``propagate_counters`` only matters for ancestor entries: when False the
    ancestor receives point deltas but its up/down/vote counters stay put.
    """

    up: int
    down: int
    propagate_counters: bool = True

    def weight(self, value: VoteValue) -> int:
        """Points for a single vote on the given side."""
        return self.up if value is VoteValue.UP else self.down


class CounterDelta(ValueObject):
    """Signed increments applied to the counter fields of a vote record."""

    vote_count: int = 0
    up_count: int = 0
    down_count: int = 0
    vote_point: int = 0

    def is_empty(self) -> bool:
        """True when applying this delta would change nothing."""
        return not any(self.model_dump().values())

    def non_zero(self) -> dict[str, int]:
        """Field name to increment, zero entries dropped."""
        return {name: value for name, value in self.model_dump().items() if value}


class UpdateResult(ValueObject):
    """Outcome of a conditional store update."""

    matched: bool
    count: int = Field(default=0, ge=0)
