"""Helpers for talking to the GitHub Actions runner.

The runner understands "workflow commands" printed to stdout
(``::warning::message``) and reads step outputs from the file named by
``GITHUB_OUTPUT``. Logging goes through the standard ``logging`` module; the
formatter below turns warnings and errors into annotations.
"""
import logging
import os
import sys
import uuid
from pathlib import Path


COMMAND_LEVELS = {
    logging.DEBUG: "debug",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "error",
}


def escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def to_command_value(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


class WorkflowCommandFormatter(logging.Formatter):
    """Render log records as workflow commands; INFO stays plain text."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        command = COMMAND_LEVELS.get(record.levelno)
        if command is None:
            return message
        return f"::{command}::{escape_data(message)}"


def configure_logging() -> None:
    """Send package logs to stdout as workflow commands."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(WorkflowCommandFormatter("%(message)s"))

    root = logging.getLogger("aatx_action")
    root.handlers = [handler]
    root.propagate = False
    root.setLevel(logging.DEBUG if os.environ.get("RUNNER_DEBUG") == "1" else logging.INFO)


def add_mask(secret: str) -> None:
    """Ask the runner to redact a value from all further log output."""
    if secret:
        sys.stdout.write(f"::add-mask::{escape_data(secret)}\n")
        sys.stdout.flush()


def set_output(name: str, value) -> None:
    """Set a step output for downstream steps."""
    text = to_command_value(value)
    output_file = os.environ.get("GITHUB_OUTPUT")
    if not output_file:
        sys.stdout.write(f"::set-output name={name}::{escape_data(text)}\n")
        return

    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    with Path(output_file).open("a", encoding="utf-8") as f:
        f.write(f"{name}<<{delimiter}\n{text}\n{delimiter}\n")
