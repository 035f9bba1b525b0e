"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .get_vote_side import GetVoteSideRequest, GetVoteSideResponse, GetVoteSideUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "GetVoteSideRequest",
    "GetVoteSideResponse",
    "GetVoteSideUseCase",
]
