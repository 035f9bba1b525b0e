"""Get vote side use case."""

from typing import Optional

from pydantic import BaseModel

from tally.application.usecase.base import BaseUseCase
from tally.domain.service import VoteService
from tally.domain.value import VotableType, VoteValue


class GetVoteSideRequest(BaseModel):
    """Get vote side request."""

    votable_type: VotableType
    votable_id: str  # UUID string
    voter_id: str


class GetVoteSideResponse(BaseModel):
    """Get vote side response."""

    votable_id: str
    voter_id: str
    value: Optional[VoteValue] = None  # None if the voter has not voted


class GetVoteSideUseCase(BaseUseCase):
    """Use case for showing a voter which side they hold on an entity."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize get vote side use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: GetVoteSideRequest) -> GetVoteSideResponse:
        """Execute get vote side flow.

        Raises:
            NotFoundError: If the entity does not exist
        """
        value = await self.vote_service.get_vote_side(
            request.votable_type, request.votable_id, request.voter_id
        )
        return GetVoteSideResponse(
            votable_id=request.votable_id, voter_id=request.voter_id, value=value
        )
