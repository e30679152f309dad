# tests/unit/test_actions.py
import logging
from aatx_action.actions import WorkflowCommandFormatter, add_mask, escape_data, set_output


def _record(level: int, message: str) -> logging.LogRecord:
    return logging.LogRecord("aatx_action", level, __file__, 1, message, None, None)


def test_formatter_renders_annotations():
    formatter = WorkflowCommandFormatter("%(message)s")

    assert formatter.format(_record(logging.INFO, "Total events: 5")) == "Total events: 5"
    assert formatter.format(_record(logging.DEBUG, "payload")) == "::debug::payload"
    assert formatter.format(_record(logging.WARNING, "1. Event: a\n   Error: b")) == "::warning::1. Event: a%0A   Error: b"
    assert formatter.format(_record(logging.ERROR, "100% broken")) == "::error::100%25 broken"


def test_escape_data():
    assert escape_data("a%b\r\nc") == "a%25b%0D%0Ac"


def test_set_output_writes_file(github_output):
    set_output("valid", True)
    set_output("total_events", 5)
    set_output("tracking_plan_updated", False)

    assert github_output() == {"valid": "true", "total_events": "5", "tracking_plan_updated": "false"}


def test_set_output_falls_back_to_command(capsys):
    set_output("new_events", 3)

    assert capsys.readouterr().out == "::set-output name=new_events::3\n"


def test_add_mask(capsys):
    add_mask("secret-key")
    add_mask("")

    assert capsys.readouterr().out == "::add-mask::secret-key\n"
