from enum import Enum
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class EventStatus(str, Enum):
    VALID = "valid"
    INVALID = "invalid"
    MISSING = "missing"
    NEW = "new"


class ValidationOptions(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    holistic: bool = False
    delta: bool = True
    auto_update_tracking_plan: bool = False
    overwrite_existing: bool = False
    comment: bool = True


class PullRequestDetails(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    pr_number: int | None = None
    head_sha: str | None = None
    base_sha: str | None = None


class ValidationRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    repository_url: str
    tracking_plan_id: str
    options: ValidationOptions = Field(default_factory=ValidationOptions)
    pr_details: PullRequestDetails = Field(default_factory=PullRequestDetails)

    def to_payload(self) -> dict[str, Any]:
        """Wire form: camelCase keys, unset PR fields omitted."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class ImplementationLocation(BaseModel):
    path: str
    line: int
    code: str | None = None


class Event(BaseModel):
    name: str
    status: EventStatus
    message: str | None = None
    implementation: list[ImplementationLocation] | None = None
    properties: dict[str, Any] | None = None

    @property
    def location(self) -> ImplementationLocation | None:
        """First implementation location, if the event has one."""
        if self.implementation:
            return self.implementation[0]
        return None

    @property
    def property_names(self) -> list[str]:
        return list(self.properties or {})


class ValidationSummary(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_events: int = 0
    valid_events: int = 0
    invalid_events: int = 0
    missing_events: int = 0
    new_events: int = 0

    @field_validator("*", mode="before")
    @classmethod
    def null_count_is_zero(cls, value: Any) -> Any:
        return 0 if value is None else value


class ValidationMetadata(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    validation_duration: int | float | str | None = None
    agent_version: str | None = None


class ValidationResult(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    valid: bool = False
    summary: ValidationSummary = Field(default_factory=ValidationSummary)
    events: list[Event] = Field(default_factory=list)
    tracking_plan_updated: bool = False
    metadata: ValidationMetadata | None = None

    @field_validator("valid", "tracking_plan_updated", mode="before")
    @classmethod
    def null_flag_is_false(cls, value: Any) -> Any:
        return False if value is None else value

    @field_validator("summary", mode="before")
    @classmethod
    def null_summary_is_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("events", mode="before")
    @classmethod
    def null_events_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def events_with_status(self, status: EventStatus) -> list[Event]:
        return [event for event in self.events if event.status == status]
