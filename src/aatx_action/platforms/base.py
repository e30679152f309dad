from abc import ABC, abstractmethod
from aatx_action.models.github import ReviewComment, ReviewEvent


class ReviewPlatform(ABC):
    @abstractmethod
    async def create_review(
        self,
        owner: str,
        repo: str,
        pull_number: int,
        body: str,
        event: ReviewEvent,
        comments: list[ReviewComment],
    ) -> None:
        pass
