"""In-memory repository implementations for testing."""

from .vote_store import InMemoryVoteStore

__all__ = [
    "InMemoryVoteStore",
]
