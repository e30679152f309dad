from .comments import build_review_comments, build_review_summary, review_disposition
from .publisher import ReviewPublisher
from .reporter import ResultReporter

__all__ = [
    "build_review_comments",
    "build_review_summary",
    "review_disposition",
    "ReviewPublisher",
    "ResultReporter",
]
