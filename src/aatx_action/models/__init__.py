from .github import CommitRef, EventPayload, PullRequest, ReviewComment, ReviewEvent
from .validation import (
    Event,
    EventStatus,
    ImplementationLocation,
    PullRequestDetails,
    ValidationMetadata,
    ValidationOptions,
    ValidationRequest,
    ValidationResult,
    ValidationSummary,
)

__all__ = [
    "CommitRef",
    "EventPayload",
    "PullRequest",
    "ReviewComment",
    "ReviewEvent",
    "Event",
    "EventStatus",
    "ImplementationLocation",
    "PullRequestDetails",
    "ValidationMetadata",
    "ValidationOptions",
    "ValidationRequest",
    "ValidationResult",
    "ValidationSummary",
]
