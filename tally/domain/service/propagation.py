"""Cascading of vote deltas to ancestor entities."""

import asyncio
from typing import Optional

import logfire

from tally.domain.error import PropagationWriteError
from tally.domain.model.registry import VoteConfigRegistry
from tally.domain.model.votable import Votable
from tally.domain.repository import VoteStore
from tally.domain.value import (
    CounterDelta,
    EntityId,
    VotableType,
    VoteIntent,
    VoteValue,
)
from tally.domain.value.common import ValueObject

from .base import Service
from .transition import counter_delta


class PropagationOutcome(ValueObject):
    """Result of one ancestor increment."""

    related_type: VotableType
    entity_id: EntityId
    delta: CounterDelta
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


class PropagationEngine(Service):
    """Applies weight-scaled deltas to every configured ancestor of a votee.

    Each ancestor gets an unconditional increment computed from the
    ancestor entry's own weights. Exactly-once holds because the triggering
    vote already passed its guard. Failed increments are logged and reported
    but never undo the vote.
    """

    def __init__(self, registry: VoteConfigRegistry, vote_store: VoteStore) -> None:
        """Initialize propagation engine.

        Args:
            registry: Vote configuration registry
            vote_store: Vote store
        """
        self.registry = registry
        self.vote_store = vote_store

    async def propagate(
        self,
        votee_type: VotableType,
        votee: Votable,
        intent: VoteIntent,
        value: VoteValue,
    ) -> list[PropagationOutcome]:
        """Fan out ancestor increments for a successful vote.

        Ancestors whose relation is undeclared, or whose foreign key is unset
        on the votee, are skipped.

        Args:
            votee_type: Type of the votee
            votee: Votee instance (used to read foreign keys)
            intent: Transition that was applied
            value: Side of that transition

        Returns:
            One outcome per ancestor write issued, in registration order
        """
        with logfire.span(
            "propagation_engine.propagate",
            votee_type=votee_type.value,
            votee_id=str(votee.id),
            intent=intent.value,
            value=value.value,
        ):
            writes = []
            for relation in self.registry.relations_for(votee_type):
                if relation.foreign_key is None:
                    logfire.debug(
                        "No relation metadata, skipping ancestor",
                        votee_type=votee_type.value,
                        related_type=relation.related_type.value,
                    )
                    continue

                ancestor_id = votee.foreign_key_value(relation.foreign_key)
                if ancestor_id is None:
                    continue

                delta = counter_delta(
                    intent,
                    value,
                    relation.weights,
                    include_counters=relation.weights.propagate_counters,
                )
                if delta.is_empty():
                    continue

                writes.append(
                    self._increment(relation.related_type, ancestor_id, delta)
                )

            outcomes = list(await asyncio.gather(*writes))

            failed = sum(1 for outcome in outcomes if not outcome.succeeded)
            logfire.info(
                "Vote propagated",
                votee_id=str(votee.id),
                ancestors=len(outcomes),
                failed=failed,
            )
            return outcomes

    async def _increment(
        self, related_type: VotableType, entity_id: EntityId, delta: CounterDelta
    ) -> PropagationOutcome:
        try:
            await self.vote_store.increment(related_type, entity_id, delta)
        except Exception as e:
            error = PropagationWriteError(related_type.value, str(entity_id), e)
            logfire.error(
                "Vote propagation write failed",
                related_type=related_type.value,
                entity_id=str(entity_id),
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=True,
            )
            return PropagationOutcome(
                related_type=related_type,
                entity_id=entity_id,
                delta=delta,
                error=str(error),
            )

        return PropagationOutcome(
            related_type=related_type, entity_id=entity_id, delta=delta
        )
