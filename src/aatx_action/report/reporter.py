# src/aatx_action/report/reporter.py
import logging
from aatx_action.actions import set_output
from aatx_action.models.validation import Event, EventStatus, ValidationResult


logger = logging.getLogger(__name__)


def _event_block(index: int, event: Event, note_label: str | None, properties_label: str) -> str:
    """Multi-line description of one event: name, note, location, code, properties."""
    lines = [f"{index}. Event: {event.name}"]
    if note_label and event.message:
        lines.append(f"   {note_label}: {event.message}")
    location = event.location
    if location is not None:
        lines.append(f"   Location: {location.path}:{location.line}")
        if location.code:
            lines.append(f"   Code: {location.code.strip()}")
    if event.property_names:
        lines.append(f"   {properties_label}: {', '.join(event.property_names)}")
    return "\n".join(lines)


class ResultReporter:
    """Logs a validation result and publishes it as step outputs."""

    def report(self, result: ValidationResult) -> None:
        self._log_summary(result)
        self._log_events(result)
        self.set_outputs(result)

    def _log_summary(self, result: ValidationResult) -> None:
        summary = result.summary
        logger.info(f"Validation completed with {'success' if result.valid else 'errors'}")
        logger.info(f"Total events: {summary.total_events}")
        logger.info(f"Valid events: {summary.valid_events}")
        logger.info(f"Invalid events: {summary.invalid_events}")
        logger.info(f"Missing events: {summary.missing_events}")
        logger.info(f"New events: {summary.new_events}")

        if result.tracking_plan_updated:
            logger.info("Tracking plan was automatically updated with new events")

    def _log_events(self, result: ValidationResult) -> None:
        invalid = result.events_with_status(EventStatus.INVALID)
        if invalid:
            logger.warning(f"❌ INVALID EVENTS ({len(invalid)}):")
            for i, event in enumerate(invalid, start=1):
                logger.warning(_event_block(i, event, "Error", "Required Properties"))

        missing = result.events_with_status(EventStatus.MISSING)
        if missing:
            logger.warning(f"⚠️ MISSING EVENTS ({len(missing)}):")
            for i, event in enumerate(missing, start=1):
                logger.warning(_event_block(i, event, "Note", "Required Properties"))

        new = result.events_with_status(EventStatus.NEW)
        if new:
            logger.info(f"🆕 NEW EVENTS ({len(new)}):")
            for i, event in enumerate(new, start=1):
                logger.info(_event_block(i, event, None, "Detected Properties"))

    def set_outputs(self, result: ValidationResult) -> None:
        summary = result.summary
        set_output("valid", result.valid)
        set_output("total_events", summary.total_events)
        set_output("valid_events", summary.valid_events)
        set_output("invalid_events", summary.invalid_events)
        set_output("missing_events", summary.missing_events)
        set_output("new_events", summary.new_events)
        set_output("tracking_plan_updated", result.tracking_plan_updated)

    def failure_message(self, result: ValidationResult) -> str | None:
        """Message explaining why an invalid result fails the run, None if valid."""
        if result.valid:
            return None

        summary = result.summary
        message = (
            f"❌ Validation failed with {summary.invalid_events} invalid events "
            f"and {summary.missing_events} missing events"
        )

        # Name lists follow the events actually returned, not the summary counts.
        invalid_names = [e.name for e in result.events_with_status(EventStatus.INVALID)]
        if invalid_names:
            message += f"\n\nInvalid events: {', '.join(invalid_names)}"

        missing_names = [e.name for e in result.events_with_status(EventStatus.MISSING)]
        if missing_names:
            message += f"\n\nMissing events: {', '.join(missing_names)}"

        message += "\n\nSee the detailed output above for specific issues and locations."
        return message
