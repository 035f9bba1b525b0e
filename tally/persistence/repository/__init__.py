"""PostgreSQL repository implementations."""

from tally.persistence.repository.vote_store import PostgresVoteStore

__all__ = [
    "PostgresVoteStore",
]
