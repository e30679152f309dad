# tests/conftest.py
import os
from pathlib import Path
import pytest


def pytest_collection_modifyitems(items):
    """Mark tests by directory: tests/unit -> unit, tests/integration -> integration."""
    for item in items:
        path = str(item.fspath)
        if "/integration/" in path:
            item.add_marker(pytest.mark.integration)
        elif "/unit/" in path:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def clean_runner_env(monkeypatch):
    """Keep the runner's own INPUT_*/GITHUB_* variables out of the tests."""
    for name in list(os.environ):
        if name.upper().startswith(("INPUT_", "GITHUB_")) or name == "RUNNER_DEBUG":
            monkeypatch.delenv(name, raising=False)


def read_outputs(path: Path) -> dict[str, str]:
    """Parse a GITHUB_OUTPUT file written with the heredoc delimiter syntax."""
    outputs = {}
    lines = path.read_text(encoding="utf-8").splitlines()
    i = 0
    while i < len(lines):
        name, delimiter = lines[i].split("<<", 1)
        i += 1
        value = []
        while lines[i] != delimiter:
            value.append(lines[i])
            i += 1
        outputs[name] = "\n".join(value)
        i += 1
    return outputs


@pytest.fixture
def github_output(monkeypatch, tmp_path):
    path = tmp_path / "github_output"
    path.touch()
    monkeypatch.setenv("GITHUB_OUTPUT", str(path))
    return lambda: read_outputs(path)
