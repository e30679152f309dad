# src/aatx_action/report/publisher.py
import logging
from aatx_action.config import GitHubContext
from aatx_action.errors import ReviewPublishError
from aatx_action.models.validation import ValidationResult
from aatx_action.platforms.base import ReviewPlatform
from aatx_action.platforms.github import GitHubClient
from .comments import build_review_comments, build_review_summary, review_disposition


logger = logging.getLogger(__name__)


class ReviewPublisher:
    """Posts the validation result as a pull request review.

    Publishing is best effort: every failure ends in a warning, never in a
    failed run.
    """

    def __init__(self, context: GitHubContext, platform: ReviewPlatform | None = None):
        self.context = context
        self.platform = platform

    async def publish(self, result: ValidationResult, pull_number: int) -> int:
        """Create the review, returning the number of comments posted."""
        if not self.context.token:
            logger.warning("GITHUB_TOKEN not available, skipping PR review comments")
            return 0

        try:
            comments = build_review_comments(result)
            if not comments:
                logger.info("No review comments to add")
                return 0

            platform = self.platform or GitHubClient(token=self.context.token, api_url=self.context.api_url)
            owner, repo = self.context.repo
            await platform.create_review(
                owner=owner,
                repo=repo,
                pull_number=pull_number,
                body=build_review_summary(result),
                event=review_disposition(result),
                comments=comments,
            )
        except ReviewPublishError as e:
            logger.warning(f"Failed to add PR review comments: {e}")
            if e.body:
                logger.warning(f"GitHub API response (HTTP {e.status_code}): {e.body}")
            return 0
        except Exception as e:
            logger.warning(f"Failed to add PR review comments: {e!r}")
            return 0

        logger.info(f"Created PR review with {len(comments)} comments")
        return len(comments)
