# tests/unit/test_config.py
import json
import pytest
from aatx_action.config import DEFAULT_API_URL, GitHubContext, load_context, load_inputs
from aatx_action.errors import ConfigurationError


@pytest.fixture
def required_inputs(monkeypatch):
    monkeypatch.setenv("INPUT_API-KEY", "secret-key")
    monkeypatch.setenv("INPUT_TRACKING-PLAN-ID", "tp_123")


def test_inputs_load_from_env(required_inputs, monkeypatch):
    monkeypatch.setenv("INPUT_API-URL", "https://aatx.example.com/")
    monkeypatch.setenv("INPUT_HOLISTIC", "true")
    monkeypatch.setenv("INPUT_AUTO-UPDATE", "TRUE")
    monkeypatch.setenv("INPUT_FAIL-ON-INVALID", "False")

    inputs = load_inputs()

    assert inputs.api_key == "secret-key"
    assert inputs.tracking_plan_id == "tp_123"
    assert inputs.api_url == "https://aatx.example.com"
    assert inputs.holistic is True
    assert inputs.auto_update is True
    assert inputs.fail_on_invalid is False


def test_inputs_defaults(required_inputs):
    inputs = load_inputs()

    assert inputs.api_url == DEFAULT_API_URL
    assert inputs.holistic is False
    assert inputs.delta is True
    assert inputs.auto_update is False
    assert inputs.overwrite is False
    assert inputs.comment is True
    assert inputs.fail_on_invalid is True


def test_empty_input_falls_back_to_default(required_inputs, monkeypatch):
    monkeypatch.setenv("INPUT_API-URL", "")
    monkeypatch.setenv("INPUT_COMMENT", "")

    inputs = load_inputs()

    assert inputs.api_url == DEFAULT_API_URL
    assert inputs.comment is True


def test_missing_required_input(monkeypatch):
    monkeypatch.setenv("INPUT_TRACKING-PLAN-ID", "tp_123")

    with pytest.raises(ConfigurationError, match="api-key"):
        load_inputs()


def test_blank_required_input(required_inputs, monkeypatch):
    monkeypatch.setenv("INPUT_TRACKING-PLAN-ID", "   ")

    with pytest.raises(ConfigurationError, match="tracking-plan-id"):
        load_inputs()


@pytest.mark.parametrize("token", ["yes", "1", "on", "tru"])
def test_unrecognized_boolean_is_rejected(required_inputs, monkeypatch, token):
    monkeypatch.setenv("INPUT_COMMENT", token)

    with pytest.raises(ConfigurationError, match="comment"):
        load_inputs()


def test_inputs_from_keyword_arguments():
    inputs = load_inputs(api_key="k", tracking_plan_id="tp", delta=False)
    assert inputs.api_key == "k"
    assert inputs.delta is False


def test_context_repository_url(monkeypatch):
    monkeypatch.setenv("GITHUB_REPOSITORY", "acme/shop")

    context = load_context()

    assert context.repo == ("acme", "shop")
    assert context.repository_url == "https://github.com/acme/shop"
    assert context.api_url == "https://api.github.com"
    assert context.token is None


def test_context_uses_server_url(monkeypatch):
    monkeypatch.setenv("GITHUB_REPOSITORY", "acme/shop")
    monkeypatch.setenv("GITHUB_SERVER_URL", "https://github.acme.internal/")

    assert load_context().repository_url == "https://github.acme.internal/acme/shop"


def test_context_requires_repository():
    with pytest.raises(ConfigurationError, match="GITHUB_REPOSITORY"):
        GitHubContext().repo


def test_load_pull_request(tmp_path):
    event_path = tmp_path / "event.json"
    event_path.write_text(json.dumps({
        "action": "synchronize",
        "pull_request": {
            "number": 42,
            "head": {"sha": "head123", "ref": "feature"},
            "base": {"sha": "base456", "ref": "main"},
        },
    }))

    pull_request = GitHubContext(event_path=event_path).load_pull_request()

    assert pull_request.number == 42
    assert pull_request.head.sha == "head123"
    assert pull_request.base.sha == "base456"


def test_push_event_has_no_pull_request(tmp_path):
    event_path = tmp_path / "event.json"
    event_path.write_text(json.dumps({"ref": "refs/heads/main", "after": "abc"}))

    assert GitHubContext(event_path=event_path).load_pull_request() is None


def test_missing_event_path():
    assert GitHubContext().load_pull_request() is None


def test_unreadable_event_payload(tmp_path):
    event_path = tmp_path / "event.json"
    event_path.write_text("{not json")

    with pytest.raises(ConfigurationError):
        GitHubContext(event_path=event_path).load_pull_request()
