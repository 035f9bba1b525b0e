"""Unit tests for GetVoteSideUseCase."""

from uuid import uuid4

import pytest

from tally.application.usecase.vote import GetVoteSideRequest, GetVoteSideUseCase
from tally.domain.error import NotFoundError
from tally.domain.repository import VoteStore
from tally.domain.service import VoteService
from tally.domain.value import VotableType, VoteValue
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetVoteSideUseCase:
    """Tests for GetVoteSideUseCase."""

    @pytest.mark.asyncio
    async def test_returns_recorded_side(self, unit_env):
        """The response carries the voter's side, or None."""
        # Arrange
        use_case = await unit_env.get(GetVoteSideUseCase)
        vote_service = await unit_env.get(VoteService)
        vote_store = await unit_env.get(VoteStore)
        post = await vote_store.save(make_post())
        voter_id = uuid4()
        await vote_service.vote(VotableType.POST, post.id, voter_id, VoteValue.UP)

        # Act
        voted = await use_case.execute(
            GetVoteSideRequest(
                votable_type=VotableType.POST,
                votable_id=str(post.id),
                voter_id=str(voter_id),
            )
        )
        not_voted = await use_case.execute(
            GetVoteSideRequest(
                votable_type=VotableType.POST,
                votable_id=str(post.id),
                voter_id=str(uuid4()),
            )
        )

        # Assert
        assert voted.value is VoteValue.UP
        assert not_voted.value is None

    @pytest.mark.asyncio
    async def test_missing_entity_raises(self, unit_env):
        """Unknown entities raise NotFoundError."""
        use_case = await unit_env.get(GetVoteSideUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                GetVoteSideRequest(
                    votable_type=VotableType.POST,
                    votable_id=str(uuid4()),
                    voter_id=str(uuid4()),
                )
            )
