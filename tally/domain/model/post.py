"""Post entity."""

from datetime import datetime
from typing import ClassVar

from pydantic import Field

from tally.domain.model.votable import Votable
from tally.domain.value import EntityId, VotableType


class Post(Votable):
    """Post entity.

    Receives votes directly and aggregates the votes cast on its comments.
    """

    votable_type: ClassVar[VotableType] = VotableType.POST
    relations: ClassVar[dict[VotableType, str]] = {VotableType.USER: "author_id"}

    title: str = Field(min_length=1, max_length=300)
    author_id: EntityId
    created_at: datetime = Field(default_factory=datetime.now)
