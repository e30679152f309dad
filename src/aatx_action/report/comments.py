from aatx_action.models.github import ReviewComment, ReviewEvent
from aatx_action.models.validation import Event, EventStatus, ValidationResult


# Missing events have no location in the diff, so they share one anchor.
MISSING_EVENTS_PATH = "README.md"
MISSING_EVENTS_LINE = 1

INVALID_EVENT_TEMPLATE = """❌ **Invalid Event**: `{name}`

{message}

**Required Properties**: {properties}"""

NEW_EVENT_TEMPLATE = """🆕 **New Event**: `{name}`

{message}

**Properties**: {properties}"""

MISSING_EVENTS_TEMPLATE = """⚠️ **Missing Events**: The following events are defined in the tracking plan but not found in the codebase:

{names}

Please implement these events or remove them from the tracking plan."""


def _located_comment(event: Event, template: str, default_message: str, no_properties: str) -> ReviewComment | None:
    location = event.location
    if location is None:
        return None
    return ReviewComment(
        path=location.path,
        line=location.line,
        body=template.format(
            name=event.name,
            message=event.message or default_message,
            properties=", ".join(event.property_names) or no_properties,
        ),
    )


def build_review_comments(result: ValidationResult) -> list[ReviewComment]:
    """Inline comments for invalid and new events plus one aggregate for missing ones."""
    comments: list[ReviewComment] = []

    for event in result.events_with_status(EventStatus.INVALID):
        comment = _located_comment(
            event, INVALID_EVENT_TEMPLATE, "Event does not match tracking plan", "None specified"
        )
        if comment:
            comments.append(comment)

    for event in result.events_with_status(EventStatus.NEW):
        comment = _located_comment(
            event, NEW_EVENT_TEMPLATE, "Event found in codebase but not in tracking plan", "None detected"
        )
        if comment:
            comments.append(comment)

    missing = result.events_with_status(EventStatus.MISSING)
    if missing:
        comments.append(ReviewComment(
            path=MISSING_EVENTS_PATH,
            line=MISSING_EVENTS_LINE,
            body=MISSING_EVENTS_TEMPLATE.format(names=", ".join(f"`{e.name}`" for e in missing)),
        ))

    return comments


def build_review_summary(result: ValidationResult) -> str:
    """Markdown body of the review itself."""
    summary = result.summary
    lines = [
        "## AATX Tracking Plan Validation Review",
        "",
        f"- **Total Events**: {summary.total_events}",
        f"- **Valid Events**: {summary.valid_events}",
        f"- **Invalid Events**: {summary.invalid_events}",
        f"- **Missing Events**: {summary.missing_events}",
        f"- **New Events**: {summary.new_events}",
        "",
    ]

    if result.tracking_plan_updated:
        lines.append("✅ Tracking plan was automatically updated with new events")
    if result.valid:
        lines.append("✅ All events match the tracking plan")
    else:
        lines.append("❌ Some events do not match the tracking plan")

    metadata = result.metadata
    if metadata and metadata.validation_duration:
        lines.append(f"\n**Validation Duration**: {metadata.validation_duration}ms")
    if metadata and metadata.agent_version:
        lines.append(f"\n**Agent Version**: {metadata.agent_version}")

    return "\n".join(lines)


def review_disposition(result: ValidationResult) -> ReviewEvent:
    if result.summary.invalid_events > 0:
        return ReviewEvent.REQUEST_CHANGES
    return ReviewEvent.COMMENT
