"""Unit tests for VoteRecord and VoteGuard."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from tally.domain.model import VoteGuard, VoteRecord, VoteTransition
from tally.domain.value import CounterDelta, VoterId, VoteIntent, VoteValue


class TestVoteRecord:
    """Tests for the embedded vote record."""

    def test_new_record_is_zeroed(self):
        """A fresh record has no voters and zero counters."""
        record = VoteRecord()

        assert record.up_voter_ids == frozenset()
        assert record.down_voter_ids == frozenset()
        assert (record.up_count, record.down_count) == (0, 0)
        assert (record.vote_count, record.vote_point) == (0, 0)

    def test_voter_on_both_sides_is_rejected(self):
        """A voter may not appear in both sets."""
        voter = VoterId(uuid4())

        with pytest.raises(ValidationError, match="both up and down"):
            VoteRecord(
                up_voter_ids=frozenset({voter}), down_voter_ids=frozenset({voter})
            )

    def test_side_of(self):
        """side_of reports which set holds the voter."""
        up_voter, down_voter = VoterId(uuid4()), VoterId(uuid4())
        record = VoteRecord(
            up_voter_ids=frozenset({up_voter}),
            down_voter_ids=frozenset({down_voter}),
            up_count=1,
            down_count=1,
            vote_count=2,
        )

        assert record.side_of(up_voter) is VoteValue.UP
        assert record.side_of(down_voter) is VoteValue.DOWN
        assert record.side_of(VoterId(uuid4())) is None

    def test_increment_does_not_touch_voters(self):
        """Counter increments leave voter sets alone."""
        voter = VoterId(uuid4())
        record = VoteRecord(up_voter_ids=frozenset({voter}), up_count=1, vote_count=1)

        updated = record.increment(CounterDelta(vote_point=5, down_count=1))

        assert updated.up_voter_ids == frozenset({voter})
        assert updated.vote_point == 5
        assert updated.down_count == 1
        assert record.vote_point == 0  # original untouched

    def test_apply_moves_voter(self):
        """Applying a revote moves the voter between sets."""
        voter = VoterId(uuid4())
        record = VoteRecord(
            up_voter_ids=frozenset({voter}), up_count=1, vote_count=1, vote_point=1
        )
        transition = VoteTransition(
            intent=VoteIntent.REVOTE,
            guard=VoteGuard(voter_id=voter, present_in=VoteValue.UP),
            add_to=VoteValue.DOWN,
            remove_from=VoteValue.UP,
            delta=CounterDelta(up_count=-1, down_count=1, vote_point=-2),
        )

        updated = record.apply(transition)

        assert updated.up_voter_ids == frozenset()
        assert updated.down_voter_ids == frozenset({voter})
        assert (updated.up_count, updated.down_count) == (0, 1)
        assert updated.vote_count == 1
        assert updated.vote_point == -1


class TestVoteGuard:
    """Tests for guard evaluation."""

    def test_absent_guard(self):
        """Absent-from guard fails once the voter is in any listed set."""
        voter = VoterId(uuid4())
        guard = VoteGuard(
            voter_id=voter, absent_from=frozenset({VoteValue.UP, VoteValue.DOWN})
        )

        assert guard.matches(VoteRecord())
        assert not guard.matches(VoteRecord(down_voter_ids=frozenset({voter})))

    def test_present_guard(self):
        """Present-in guard requires membership in that set."""
        voter = VoterId(uuid4())
        guard = VoteGuard(
            voter_id=voter,
            present_in=VoteValue.UP,
            absent_from=frozenset({VoteValue.DOWN}),
        )

        assert guard.matches(VoteRecord(up_voter_ids=frozenset({voter})))
        assert not guard.matches(VoteRecord())
        assert not guard.matches(VoteRecord(down_voter_ids=frozenset({voter})))
