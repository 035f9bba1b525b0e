"""Test configuration and fixtures."""

from uuid import uuid4

import logfire

from tally.domain.model import (
    Comment,
    Post,
    User,
    VoteConfigRegistry,
    VoteConfigRegistryBuilder,
)
from tally.domain.repository import VoteStore
from tally.domain.service import (
    ConditionalUpdateExecutor,
    PropagationEngine,
    VoteService,
    VoteTransitionResolver,
)
from tally.domain.value import EntityId, VotableType

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_user(handle: str = "author.bsky.social") -> User:
    """Helper to build a user with an empty vote record."""
    return User(id=EntityId(uuid4()), handle=handle)


def make_post(author_id: EntityId | None = None, title: str = "Test Post") -> Post:
    """Helper to build a post with an empty vote record."""
    return Post(
        id=EntityId(uuid4()),
        title=title,
        author_id=author_id or EntityId(uuid4()),
    )


def make_comment(
    post_id: EntityId | None = None,
    author_id: EntityId | None = None,
    text: str = "Test comment",
) -> Comment:
    """Helper to build a comment with an empty vote record."""
    return Comment(
        id=EntityId(uuid4()), text=text, post_id=post_id, author_id=author_id
    )


def make_registry(
    up: int = 1,
    down: int = -1,
    post_up: int = 1,
    post_down: int = -1,
    propagate_counters: bool = True,
) -> VoteConfigRegistry:
    """Helper for a comment -> post registry with configurable weights."""
    return (
        VoteConfigRegistryBuilder()
        .register(VotableType.POST, up=post_up, down=post_down)
        .register(VotableType.COMMENT, up=up, down=down)
        .register(
            VotableType.COMMENT,
            VotableType.POST,
            up=post_up,
            down=post_down,
            propagate_counters=propagate_counters,
        )
        .build()
    )


def build_vote_service(
    vote_store: VoteStore, registry: VoteConfigRegistry
) -> VoteService:
    """Wire a VoteService by hand for tests needing a custom registry."""
    return VoteService(
        vote_store=vote_store,
        registry=registry,
        resolver=VoteTransitionResolver(),
        executor=ConditionalUpdateExecutor(vote_store=vote_store),
        propagation_engine=PropagationEngine(registry=registry, vote_store=vote_store),
    )
