"""Unit tests for the vote configuration registry."""

import pytest

from tally.domain.model import VoteConfigRegistryBuilder
from tally.domain.value import VotableType
from tally.util.error import ConfigurationError


class TestVoteConfigRegistryBuilder:
    """Tests for registering and freezing vote configuration."""

    def test_self_entry_supplies_votee_weights(self):
        """Registering without a related type sets the votee's own weights."""
        registry = (
            VoteConfigRegistryBuilder()
            .register(VotableType.COMMENT, up=1, down=-3)
            .build()
        )

        weights = registry.weights_for(VotableType.COMMENT)
        assert (weights.up, weights.down) == (1, -3)
        assert registry.relations_for(VotableType.COMMENT) == ()

    def test_first_registration_wins(self):
        """Later registrations of the same pair are ignored."""
        registry = (
            VoteConfigRegistryBuilder()
            .register(VotableType.POST, up=2, down=-2)
            .register(VotableType.POST, up=10, down=-10)
            .build()
        )

        assert registry.weights_for(VotableType.POST).up == 2

    def test_relations_resolve_foreign_keys(self):
        """Ancestor entries pick up the votee model's relation metadata."""
        registry = (
            VoteConfigRegistryBuilder()
            .register(VotableType.COMMENT, up=1, down=-1)
            .register(VotableType.COMMENT, VotableType.POST, up=2, down=-1)
            .register(
                VotableType.COMMENT,
                VotableType.USER,
                up=1,
                down=-1,
                propagate_counters=False,
            )
            .build()
        )

        relations = registry.relations_for(VotableType.COMMENT)
        assert [r.related_type for r in relations] == [
            VotableType.POST,
            VotableType.USER,
        ]
        assert relations[0].foreign_key == "post_id"
        assert relations[0].weights.up == 2
        assert relations[1].foreign_key == "author_id"
        assert relations[1].weights.propagate_counters is False

    def test_undeclared_relation_has_no_foreign_key(self):
        """A pairing the model does not declare is kept without accessor."""
        registry = (
            VoteConfigRegistryBuilder()
            .register(VotableType.POST, up=1, down=-1)
            .register(VotableType.POST, VotableType.COMMENT, up=1, down=-1)
            .build()
        )

        (relation,) = registry.relations_for(VotableType.POST)
        assert relation.related_type is VotableType.COMMENT
        assert relation.foreign_key is None

    def test_relations_without_self_weights_fail(self):
        """A votee type needs its own weights."""
        builder = VoteConfigRegistryBuilder().register(
            VotableType.COMMENT, VotableType.POST, up=1, down=-1
        )

        with pytest.raises(ConfigurationError, match="no self weights"):
            builder.build()

    def test_unregistered_votee_raises(self):
        """Looking up a type that was never registered is a config error."""
        registry = (
            VoteConfigRegistryBuilder()
            .register(VotableType.POST, up=1, down=-1)
            .build()
        )

        assert registry.is_voteable(VotableType.POST)
        assert not registry.is_voteable(VotableType.USER)
        with pytest.raises(ConfigurationError, match="not registered"):
            registry.config_for(VotableType.USER)
