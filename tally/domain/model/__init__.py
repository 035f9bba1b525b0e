"""Domain model entities for Tally."""

from tally.domain.model.comment import Comment
from tally.domain.model.post import Post
from tally.domain.model.registry import (
    VOTABLE_MODELS,
    VoteConfig,
    VoteConfigRegistry,
    VoteConfigRegistryBuilder,
    VoteRelation,
)
from tally.domain.model.user import User
from tally.domain.model.votable import Votable
from tally.domain.model.vote import (
    VoteGuard,
    VoteRecord,
    VoteRequest,
    VoteTransition,
)

__all__ = [
    "Comment",
    "Post",
    "User",
    "Votable",
    "VOTABLE_MODELS",
    "VoteConfig",
    "VoteConfigRegistry",
    "VoteConfigRegistryBuilder",
    "VoteGuard",
    "VoteRecord",
    "VoteRelation",
    "VoteRequest",
    "VoteTransition",
]
