"""Vote configuration registry.

Maps a votee type to the weights used on the votee itself (the self entry)
and to the ancestor types that receive propagated counters. The registry is
assembled once at startup with VoteConfigRegistryBuilder and is read-only
afterwards.

Example:
    registry = (
        VoteConfigRegistryBuilder()
        .register(VotableType.COMMENT, up=1, down=-3)
        .register(VotableType.COMMENT, VotableType.POST, up=2, down=-1)
        .register(
            VotableType.COMMENT, VotableType.USER, up=1, down=-1,
            propagate_counters=False,
        )
        .build()
    )
"""

from types import MappingProxyType
from typing import Mapping, Optional

import logfire

from tally.domain.model.comment import Comment
from tally.domain.model.post import Post
from tally.domain.model.user import User
from tally.domain.model.votable import Votable
from tally.domain.value import VotableType, VoteWeights
from tally.domain.value.common import ValueObject
from tally.util.error import ConfigurationError

VOTABLE_MODELS: Mapping[VotableType, type[Votable]] = MappingProxyType(
    {model.votable_type: model for model in (Post, Comment, User)}
)


class VoteRelation(ValueObject):
    """Ancestor entry of a votee type.

    foreign_key is the votee attribute holding the ancestor id, or None when
    the votee model declares no relation to that type.
    """

    related_type: VotableType
    weights: VoteWeights
    foreign_key: Optional[str] = None


class VoteConfig(ValueObject):
    """Everything the vote flow needs to know about one votee type."""

    votee_type: VotableType
    weights: VoteWeights
    relations: tuple[VoteRelation, ...] = ()


class VoteConfigRegistry:
    """Immutable lookup of vote configuration per votee type."""

    def __init__(self, configs: Mapping[VotableType, VoteConfig]) -> None:
        self._configs = MappingProxyType(dict(configs))

    @property
    def votee_types(self) -> frozenset[VotableType]:
        """Types that can be voted on."""
        return frozenset(self._configs)

    def is_voteable(self, votee_type: VotableType) -> bool:
        return votee_type in self._configs

    def config_for(self, votee_type: VotableType) -> VoteConfig:
        """Configuration of a votee type.

        Raises:
            ConfigurationError: If the type was never registered as a votee
        """
        try:
            return self._configs[votee_type]
        except KeyError:
            raise ConfigurationError(
                f"{votee_type.value} is not registered as voteable"
            ) from None

    def weights_for(self, votee_type: VotableType) -> VoteWeights:
        """Self weights of a votee type."""
        return self.config_for(votee_type).weights

    def relations_for(self, votee_type: VotableType) -> tuple[VoteRelation, ...]:
        """Ancestor entries of a votee type, in registration order."""
        return self.config_for(votee_type).relations


class VoteConfigRegistryBuilder:
    """Collects registrations, then freezes them into a VoteConfigRegistry."""

    def __init__(
        self, models: Mapping[VotableType, type[Votable]] = VOTABLE_MODELS
    ) -> None:
        self._models = models
        self._entries: dict[tuple[VotableType, VotableType], VoteWeights] = {}

    def register(
        self,
        votee_type: VotableType,
        related_type: Optional[VotableType] = None,
        *,
        up: int,
        down: int,
        propagate_counters: bool = True,
    ) -> "VoteConfigRegistryBuilder":
        """Register vote weights for a (votee, related) pair.

        Omitting related_type registers the self entry. The first
        registration of a pair wins; later ones are ignored.
        """
        key = (votee_type, related_type or votee_type)
        if key in self._entries:
            logfire.debug(
                "Ignoring duplicate vote registration",
                votee_type=votee_type.value,
                related_type=key[1].value,
            )
            return self

        self._entries[key] = VoteWeights(
            up=up, down=down, propagate_counters=propagate_counters
        )
        return self

    def build(self) -> VoteConfigRegistry:
        """Freeze registrations.

        Raises:
            ConfigurationError: If a votee type has ancestors but no self weights
        """
        votee_types = list(dict.fromkeys(votee for votee, _ in self._entries))
        configs: dict[VotableType, VoteConfig] = {}

        for votee_type in votee_types:
            weights = self._entries.get((votee_type, votee_type))
            if weights is None:
                raise ConfigurationError(
                    f"{votee_type.value} has related vote entries but no self weights"
                )

            model = self._models.get(votee_type)
            relations = tuple(
                VoteRelation(
                    related_type=related,
                    weights=related_weights,
                    foreign_key=model.foreign_key_for(related) if model else None,
                )
                for (votee, related), related_weights in self._entries.items()
                if votee == votee_type and related != votee_type
            )
            configs[votee_type] = VoteConfig(
                votee_type=votee_type, weights=weights, relations=relations
            )

        logfire.info(
            "Vote registry built",
            votee_types=[t.value for t in configs],
            relation_count=sum(len(c.relations) for c in configs.values()),
        )
        return VoteConfigRegistry(configs)
