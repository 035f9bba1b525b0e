"""Vote transition resolution.

Turns an explicit (intent, value) request into the guard the store must
check and the mutation it must apply. Pure computation, no I/O.
"""

from tally.domain.model.vote import VoteGuard, VoteRequest, VoteTransition
from tally.domain.value import CounterDelta, VoteIntent, VoteValue, VoteWeights

from .base import Service

_COUNT_FIELDS = {VoteValue.UP: "up_count", VoteValue.DOWN: "down_count"}


def counter_delta(
    intent: VoteIntent,
    value: VoteValue,
    weights: VoteWeights,
    include_counters: bool = True,
) -> CounterDelta:
    """Counter increments produced by one transition under the given weights.

    Args:
        intent: New vote, revote or unvote
        value: Target side (the side being removed for an unvote)
        weights: Points per up/down vote
        include_counters: When False only vote_point moves

    Returns:
        Delta to add to the entity's counters
    """
    target = _COUNT_FIELDS[value]
    opposite = _COUNT_FIELDS[value.opposite]

    if intent is VoteIntent.NEW:
        point = weights.weight(value)
        counters = {"vote_count": 1, target: 1}
    elif intent is VoteIntent.REVOTE:
        # Up: +up -down; Down: +down -up
        point = weights.weight(value) - weights.weight(value.opposite)
        counters = {target: 1, opposite: -1}
    else:
        point = -weights.weight(value)
        counters = {"vote_count": -1, target: -1}

    if not include_counters:
        counters = {}

    return CounterDelta(vote_point=point, **counters)


class VoteTransitionResolver(Service):
    """Computes guard and field deltas for a vote request."""

    def resolve(self, request: VoteRequest, weights: VoteWeights) -> VoteTransition:
        """Resolve a request against the votee's own weights.

        - New: voter in neither set; add to the value set
        - Revote: voter in the opposite set only; move to the value set
        - Unvote: voter in the value set only; remove from it

        Args:
            request: Request with explicit intent and value
            weights: Self weights of the votee type

        Returns:
            Transition to hand to the conditional update
        """
        value = request.value
        intent = request.intent
        delta = counter_delta(intent, value, weights)

        if intent is VoteIntent.NEW:
            guard = VoteGuard(
                voter_id=request.voter_id,
                absent_from=frozenset({VoteValue.UP, VoteValue.DOWN}),
            )
            return VoteTransition(intent=intent, guard=guard, add_to=value, delta=delta)

        if intent is VoteIntent.REVOTE:
            guard = VoteGuard(
                voter_id=request.voter_id,
                present_in=value.opposite,
                absent_from=frozenset({value}),
            )
            return VoteTransition(
                intent=intent,
                guard=guard,
                add_to=value,
                remove_from=value.opposite,
                delta=delta,
            )

        guard = VoteGuard(
            voter_id=request.voter_id,
            present_in=value,
            absent_from=frozenset({value.opposite}),
        )
        return VoteTransition(
            intent=intent, guard=guard, remove_from=value, delta=delta
        )
