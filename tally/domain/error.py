"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NoOpVoteError(DomainError):
    """Raised when a vote would not change anything.

    Either a new vote for the side the voter already holds, or an unvote
    when the voter has no vote. Rejected before any write.
    """

    def __init__(self, votee_id: str, voter_id: str, reason: str):
        self.votee_id = votee_id
        self.voter_id = voter_id
        super().__init__(f"Vote by {voter_id} on {votee_id} is a no-op: {reason}")


class GuardMismatchError(DomainError):
    """Raised when a conditional vote update matched no entity.

    Either the caller's view of the voter's side was stale or the votee
    is gone. Callers may re-read state and try again.
    """

    def __init__(self, votee_id: str, voter_id: str, intent: str):
        self.votee_id = votee_id
        self.voter_id = voter_id
        self.intent = intent
        super().__init__(
            f"Precondition for {intent} vote by {voter_id} on {votee_id} "
            "no longer holds"
        )


class PropagationWriteError(DomainError):
    """A failed ancestor increment.

    Logged and recorded on the propagation outcome; never raised out of a
    vote because the primary write is already committed.
    """

    def __init__(self, related_type: str, entity_id: str, cause: Exception):
        self.related_type = related_type
        self.entity_id = entity_id
        self.cause = cause
        super().__init__(
            f"Failed to propagate vote to {related_type} {entity_id}: {cause}"
        )
