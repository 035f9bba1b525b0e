"""Guarded vote write."""

import logfire

from tally.domain.model.vote import VoteTransition
from tally.domain.repository import VoteStore
from tally.domain.value import EntityId, VotableType

from .base import Service


class ConditionalUpdateExecutor(Service):
    """Issues one atomic, guarded mutation against a votee."""

    def __init__(self, vote_store: VoteStore) -> None:
        """Initialize executor.

        Args:
            vote_store: Vote store
        """
        self.vote_store = vote_store

    async def apply(
        self,
        votable_type: VotableType,
        votee_id: EntityId,
        transition: VoteTransition,
    ) -> bool:
        """Apply a transition if its guard still holds.

        No retry: a False result means the caller's view of the voter's side
        is stale (or the votee is gone) and must be re-read before trying again.

        Returns:
            True only if exactly one entity matched and was mutated
        """
        with logfire.span(
            "conditional_update_executor.apply",
            votable_type=votable_type.value,
            votee_id=str(votee_id),
            voter_id=str(transition.guard.voter_id),
            intent=transition.intent.value,
        ):
            result = await self.vote_store.conditional_update(
                votable_type, votee_id, transition
            )
            applied = result.matched and result.count == 1

            if applied:
                logfire.info(
                    "Vote transition applied",
                    votee_id=str(votee_id),
                    intent=transition.intent.value,
                )
            else:
                logfire.warn(
                    "Vote guard did not match",
                    votee_id=str(votee_id),
                    voter_id=str(transition.guard.voter_id),
                    intent=transition.intent.value,
                    count=result.count,
                )

            return applied
