from enum import Enum
from pydantic import BaseModel


class CommitRef(BaseModel):
    sha: str


class PullRequest(BaseModel):
    number: int
    head: CommitRef
    base: CommitRef


class EventPayload(BaseModel):
    # Only the pull_request key matters; every other trigger leaves it unset.
    pull_request: PullRequest | None = None


class ReviewEvent(str, Enum):
    REQUEST_CHANGES = "REQUEST_CHANGES"
    COMMENT = "COMMENT"


class ReviewComment(BaseModel):
    path: str
    line: int
    body: str
