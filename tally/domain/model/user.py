"""User entity."""

from datetime import datetime
from typing import ClassVar

from pydantic import Field

from tally.domain.model.votable import Votable
from tally.domain.value import VotableType


class User(Votable):
    """User entity.

    Users are not voted on directly; their vote record accumulates karma
    propagated from the posts and comments they author.
    """

    votable_type: ClassVar[VotableType] = VotableType.USER

    handle: str = Field(min_length=1, max_length=255)
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def karma(self) -> int:
        """Karma is the accumulated vote point."""
        return self.votes.vote_point
