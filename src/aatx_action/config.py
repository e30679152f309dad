# src/aatx_action/config.py
import json
import logging
from pathlib import Path
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from aatx_action.errors import ConfigurationError
from aatx_action.models.github import EventPayload, PullRequest


logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://app.aatx.ai"

# YAML 1.2 core schema booleans, the only tokens the runner treats as booleans.
TRUE_TOKENS = ("true", "True", "TRUE")
FALSE_TOKENS = ("false", "False", "FALSE")


class ActionInputs(BaseSettings):
    """Action inputs as exposed by the runner (INPUT_<NAME>, hyphens kept)."""

    model_config = SettingsConfigDict(env_ignore_empty=True, populate_by_name=True)

    api_key: str = Field(validation_alias="INPUT_API-KEY")
    tracking_plan_id: str = Field(validation_alias="INPUT_TRACKING-PLAN-ID")
    api_url: str = Field(DEFAULT_API_URL, validation_alias="INPUT_API-URL")

    holistic: bool = Field(False, validation_alias="INPUT_HOLISTIC")
    delta: bool = Field(True, validation_alias="INPUT_DELTA")
    auto_update: bool = Field(False, validation_alias="INPUT_AUTO-UPDATE")
    overwrite: bool = Field(False, validation_alias="INPUT_OVERWRITE")
    comment: bool = Field(True, validation_alias="INPUT_COMMENT")
    fail_on_invalid: bool = Field(True, validation_alias="INPUT_FAIL-ON-INVALID")

    @field_validator("api_key", "tracking_plan_id", "api_url", mode="before")
    @classmethod
    def strip_whitespace(cls, value):
        if isinstance(value, str):
            value = value.strip()
            if not value:
                raise ValueError("Input required and not supplied")
        return value

    @field_validator("api_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator(
        "holistic", "delta", "auto_update", "overwrite", "comment", "fail_on_invalid",
        mode="before",
    )
    @classmethod
    def parse_boolean(cls, value):
        if isinstance(value, bool):
            return value
        token = str(value).strip()
        if token in TRUE_TOKENS:
            return True
        if token in FALSE_TOKENS:
            return False
        raise ValueError(
            "Input does not meet YAML 1.2 Core Schema specification. "
            "Support boolean input list: `true | True | TRUE | false | False | FALSE`"
        )


class GitHubContext(BaseSettings):
    """Repository and trigger context provided by the runner."""

    model_config = SettingsConfigDict(env_prefix="GITHUB_", env_ignore_empty=True)

    repository: str | None = None
    event_name: str | None = None
    event_path: Path | None = None
    server_url: str = "https://github.com"
    api_url: str = "https://api.github.com"
    token: str | None = None

    @property
    def repo(self) -> tuple[str, str]:
        """(owner, name) of the repository the workflow runs in."""
        owner, _, name = (self.repository or "").partition("/")
        if not owner or not name:
            raise ConfigurationError(
                "GITHUB_REPOSITORY environment variable must look like 'owner/repo'"
            )
        return owner, name

    @property
    def repository_url(self) -> str:
        owner, name = self.repo
        return f"{self.server_url.rstrip('/')}/{owner}/{name}"

    def load_pull_request(self) -> PullRequest | None:
        """Pull request from the triggering event payload, None for non-PR triggers."""
        if self.event_path is None:
            return None
        if not self.event_path.exists():
            logger.warning(f"GITHUB_EVENT_PATH {self.event_path} does not exist")
            return None

        try:
            data = json.loads(self.event_path.read_text(encoding="utf-8"))
            payload = EventPayload.model_validate(data)
        except (OSError, ValueError) as e:
            # pydantic's ValidationError is a ValueError
            raise ConfigurationError(f"Could not read event payload {self.event_path}: {e}") from e

        return payload.pull_request


def _input_name(loc: tuple) -> str:
    name = str(loc[0]) if loc else "input"
    if name.lower().startswith("input_"):
        name = name[len("input_"):]
    return name.lower().replace("_", "-")


def _describe(error: ValidationError) -> str:
    lines = []
    for err in error.errors():
        name = _input_name(err["loc"])
        if err["type"] == "missing":
            lines.append(f"Input required and not supplied: {name}")
        else:
            lines.append(f"Invalid input {name}: {err['msg']}")
    return "\n".join(lines)


def load_inputs(**overrides) -> ActionInputs:
    """Read action inputs, raising ConfigurationError on missing or bad values."""
    try:
        return ActionInputs(**overrides)
    except ValidationError as e:
        raise ConfigurationError(_describe(e)) from e


def load_context() -> GitHubContext:
    try:
        return GitHubContext()
    except ValidationError as e:
        raise ConfigurationError(str(e)) from e
