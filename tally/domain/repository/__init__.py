"""Repository interfaces for Tally domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from tally.domain.repository.vote_store import VoteStore

__all__ = [
    "VoteStore",
]
