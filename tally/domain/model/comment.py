"""Comment entity."""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field

from tally.domain.model.votable import Votable
from tally.domain.value import EntityId, VotableType


class Comment(Votable):
    """Comment entity.

    A comment may be detached from any post (post_id is None); votes on it
    then stay local.
    """

    votable_type: ClassVar[VotableType] = VotableType.COMMENT
    relations: ClassVar[dict[VotableType, str]] = {
        VotableType.POST: "post_id",
        VotableType.USER: "author_id",
    }

    text: str = Field(min_length=1, max_length=10000)
    post_id: Optional[EntityId] = None
    author_id: Optional[EntityId] = None
    created_at: datetime = Field(default_factory=datetime.now)
