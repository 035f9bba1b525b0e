"""Cast vote use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from tally.application.usecase.base import BaseUseCase
from tally.domain.error import (
    GuardMismatchError,
    NoOpVoteError,
    NotFoundError,
    ValidationError,
)
from tally.domain.service import VoteService
from tally.domain.value import VotableType, VoteIntent, VoteValue


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    votable_type: VotableType
    votable_id: str  # UUID string
    voter_id: str  # Voter ID from the calling layer
    value: Optional[VoteValue] = None  # Optional when unvoting
    unvote: bool = False
    revote: bool = False


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    success: bool
    message: str
    intent: Optional[VoteIntent] = None
    value: Optional[VoteValue] = None


class CastVoteUseCase(BaseUseCase):
    """Use case for voting up, down, switching sides, or unvoting."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Votes the service refuses are reported as unsuccessful responses;
        propagation failures are not part of the response.

        Args:
            request: Cast vote request

        Returns:
            Cast vote response
        """
        try:
            result = await self.vote_service.vote(
                request.votable_type,
                request.votable_id,
                request.voter_id,
                request.value,
                unvote=request.unvote,
                revote=request.revote,
            )
        except (
            ValidationError,
            NotFoundError,
            NoOpVoteError,
            GuardMismatchError,
        ) as e:
            logfire.info(
                "Vote rejected",
                votable_id=request.votable_id,
                voter_id=request.voter_id,
                reason=type(e).__name__,
            )
            return CastVoteResponse(success=False, message=str(e))

        return CastVoteResponse(
            success=True,
            message="Vote recorded",
            intent=result.intent,
            value=result.value,
        )
