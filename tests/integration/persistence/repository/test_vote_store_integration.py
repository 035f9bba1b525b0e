"""Integration tests for PostgresVoteStore.

Require a migrated PostgreSQL database (see DATABASE__URL) and
TALLY_INTEGRATION=1 in the environment.
"""

import os
from uuid import uuid4

import pytest

from tally.domain.repository import VoteStore
from tally.domain.service import VoteService
from tally.domain.value import VotableType, VoterId, VoteValue
from tests.conftest import make_comment, make_post, make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    os.environ.get("TALLY_INTEGRATION") != "1",
    reason="set TALLY_INTEGRATION=1 to run against PostgreSQL",
)

# Integration test fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})


class TestPostgresVoteStoreIntegration:
    """Integration tests for guarded updates and propagation in PostgreSQL."""

    @pytest.mark.asyncio
    async def test_vote_revote_unvote_round_trip(self, integration_env):
        """The guarded UPDATE keeps arrays and counters in step."""
        # Arrange
        vote_service = await integration_env.get(VoteService)
        vote_store = await integration_env.get(VoteStore)
        author = await vote_store.save(make_user())
        post = await vote_store.save(make_post(author_id=author.id))
        comment = await vote_store.save(
            make_comment(post_id=post.id, author_id=author.id)
        )
        voter = VoterId(uuid4())

        # Act & Assert - new
        await vote_service.vote(VotableType.COMMENT, comment.id, voter, VoteValue.UP)
        stored = await vote_store.find_by_id(VotableType.COMMENT, comment.id)
        assert stored.votes.up_voter_ids == frozenset({voter})
        assert stored.votes.vote_point == 1

        # revote
        await vote_service.vote(VotableType.COMMENT, comment.id, voter, VoteValue.DOWN)
        stored = await vote_store.find_by_id(VotableType.COMMENT, comment.id)
        assert stored.votes.down_voter_ids == frozenset({voter})
        assert stored.votes.up_count == 0

        # unvote
        await vote_service.vote(VotableType.COMMENT, comment.id, voter, unvote=True)
        stored = await vote_store.find_by_id(VotableType.COMMENT, comment.id)
        assert stored.votes.side_of(voter) is None
        assert stored.votes.vote_count == 0

        stored_post = await vote_store.find_by_id(VotableType.POST, post.id)
        assert stored_post.votes.vote_count == 0
        assert stored_post.votes.vote_point == 0

    @pytest.mark.asyncio
    async def test_increment_on_missing_row_is_harmless(self, integration_env):
        """A missing ancestor leaves the session usable."""
        vote_service = await integration_env.get(VoteService)
        vote_store = await integration_env.get(VoteStore)
        author = await vote_store.save(make_user())
        post = await vote_store.save(make_post(author_id=author.id))
        comment = await vote_store.save(make_comment(post_id=post.id))

        result = await vote_service.vote(
            VotableType.COMMENT, comment.id, uuid4(), VoteValue.UP
        )

        assert all(o.succeeded for o in result.propagation)
        stored = await vote_store.find_by_id(VotableType.COMMENT, comment.id)
        assert stored.votes.vote_count == 1
