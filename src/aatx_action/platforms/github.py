import httpx
from aatx_action.errors import ReviewPublishError
from aatx_action.models.github import ReviewComment, ReviewEvent
from .base import ReviewPlatform


class GitHubClient(ReviewPlatform):
    def __init__(self, token: str, api_url: str = "https://api.github.com"):
        self.token = token
        self.api_url = api_url.rstrip("/")

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }

    async def create_review(
        self,
        owner: str,
        repo: str,
        pull_number: int,
        body: str,
        event: ReviewEvent,
        comments: list[ReviewComment],
    ) -> None:
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    f"{self.api_url}/repos/{owner}/{repo}/pulls/{pull_number}/reviews",
                    headers=self._headers(),
                    json={
                        "body": body,
                        "event": event.value,
                        "comments": [comment.model_dump() for comment in comments],
                    },
                    timeout=30.0,
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ReviewPublishError(
                f"GitHub API returned HTTP {e.response.status_code}",
                status_code=e.response.status_code,
                body=e.response.text,
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise ReviewPublishError(f"GitHub API request failed: {e!r}") from e
