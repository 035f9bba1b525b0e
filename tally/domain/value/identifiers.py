"""Strongly typed identifiers for Tally domain entities.

Using NewType for strong typing prevents mixing up votee and voter ids
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Any votable entity (post, comment, user)
EntityId = NewType("EntityId", UUID)

# The identity casting a vote
VoterId = NewType("VoterId", UUID)
