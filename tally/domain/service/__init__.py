"""Domain services."""

from .base import Service
from .executor import ConditionalUpdateExecutor
from .propagation import PropagationEngine, PropagationOutcome
from .transition import VoteTransitionResolver, counter_delta
from .vote_service import VoteResult, VoteService

__all__ = [
    "ConditionalUpdateExecutor",
    "PropagationEngine",
    "PropagationOutcome",
    "Service",
    "VoteResult",
    "VoteService",
    "VoteTransitionResolver",
    "counter_delta",
]
