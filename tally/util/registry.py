"""Build the vote registry from settings."""

from tally.config import VotingSettings
from tally.domain.model.registry import VoteConfigRegistry, VoteConfigRegistryBuilder


def build_registry(voting: VotingSettings) -> VoteConfigRegistry:
    """Register every configured relation and freeze the registry.

    Args:
        voting: Voting settings

    Returns:
        Immutable vote registry

    Raises:
        ConfigurationError: If a votee type has relations but no self weights
    """
    builder = VoteConfigRegistryBuilder()
    for relation in voting.relations:
        builder.register(
            relation.votee,
            relation.related,
            up=relation.up,
            down=relation.down,
            propagate_counters=relation.propagate_counters,
        )
    return builder.build()
