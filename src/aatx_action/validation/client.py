# src/aatx_action/validation/client.py
import logging
import httpx
from pydantic import ValidationError

from aatx_action.config import ActionInputs, GitHubContext
from aatx_action.errors import MalformedResponseError, ValidationCallError
from aatx_action.models.github import PullRequest
from aatx_action.models.validation import (
    PullRequestDetails,
    ValidationOptions,
    ValidationRequest,
    ValidationResult,
)


logger = logging.getLogger(__name__)


def build_request(
    inputs: ActionInputs,
    context: GitHubContext,
    pull_request: PullRequest | None = None,
) -> ValidationRequest:
    """Assemble the request payload from action inputs and repository context."""
    pr_details = PullRequestDetails()
    if pull_request is not None:
        pr_details = PullRequestDetails(
            pr_number=pull_request.number,
            head_sha=pull_request.head.sha,
            base_sha=pull_request.base.sha,
        )

    return ValidationRequest(
        repository_url=context.repository_url,
        tracking_plan_id=inputs.tracking_plan_id,
        options=ValidationOptions(
            holistic=inputs.holistic,
            delta=inputs.delta,
            auto_update_tracking_plan=inputs.auto_update,
            overwrite_existing=inputs.overwrite,
            comment=inputs.comment,
        ),
        pr_details=pr_details,
    )


class ValidationClient:
    USER_AGENT = "AATX-GitHub-Action"

    def __init__(self, api_key: str, api_url: str):
        self.api_key = api_key
        self.api_url = api_url.rstrip("/")
        self.endpoint = f"{self.api_url}/api/github-action/validate"

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "User-Agent": self.USER_AGENT,
        }

    async def validate(self, request: ValidationRequest) -> ValidationResult:
        """POST the request once and return the parsed result."""
        logger.info(f"Calling validation endpoint: {self.endpoint}")

        try:
            # No timeout: the CI job's own limit bounds a stalled call.
            async with httpx.AsyncClient(timeout=None) as client:
                response = await client.post(
                    self.endpoint,
                    headers=self._headers(),
                    json=request.to_payload(),
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            body = e.response.text
            raise ValidationCallError(
                f"Validation API returned HTTP {status}: {body}",
                status_code=status,
                body=body,
            ) from e
        except httpx.RequestError as e:
            raise ValidationCallError(f"Validation API request failed: {e!r}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponseError("Invalid response format from validation API: body is not JSON") from e

        if not isinstance(data, dict):
            raise MalformedResponseError("Invalid response format from validation API: expected an object")

        try:
            return ValidationResult.model_validate(data)
        except ValidationError as e:
            raise MalformedResponseError(f"Invalid response format from validation API: {e}") from e
