import json
from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from n8n_webhook_client.cli import cli
from n8n_webhook_client.errors import ErrorCategory
from n8n_webhook_client.models import (
    DataProcessingResponse,
    SimpleWebhookRequest,
    SimpleWebhookResponse,
    UserRegistrationResponse,
)
from n8n_webhook_client.webhook import WebhookResponse


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def mock_trigger():
    with patch(
        "n8n_webhook_client.cli.N8nWebhookService.trigger_webhook", new_callable=AsyncMock
    ) as mock:
        mock.return_value = WebhookResponse.ok(
            data={"ok": True}, status_code=200, raw_response='{"ok": true}'
        )
        yield mock


def invoke(runner, *args):
    return runner.invoke(cli, ["--log-level", "CRITICAL", *args])


def test_simple_uses_configured_url(runner, mock_trigger, monkeypatch):
    monkeypatch.setenv("N8N_BASE_URL", "https://n8n.example.com")

    result = invoke(runner, "simple", "--message", "Hello", "--data", "source=cli")

    assert result.exit_code == 0
    url, payload, result_type = mock_trigger.call_args[0]
    assert url == "https://n8n.example.com/webhook/simple-webhook"
    assert payload == SimpleWebhookRequest(message="Hello", data={"source": "cli"})
    assert result_type is SimpleWebhookResponse
    output = json.loads(result.output)
    assert output["success"] is True
    assert output["statusCode"] == 200
    assert output["data"] == {"ok": True}


def test_simple_without_data(runner, mock_trigger):
    result = invoke(runner, "simple", "--url", "https://hooks.example.com/simple")

    assert result.exit_code == 0
    url, payload, _ = mock_trigger.call_args[0]
    assert url == "https://hooks.example.com/simple"
    assert payload.data is None
    assert payload.message == "Hello from the n8n webhook client!"


def test_failed_call_exits_with_error(runner, mock_trigger):
    mock_trigger.return_value = WebhookResponse.fail(
        "Request failed with status code: BadRequest",
        ErrorCategory.HTTP_STATUS_ERROR,
        status_code=400,
        raw_response="bad input",
    )

    result = invoke(runner, "simple")

    assert result.exit_code == 1
    output = json.loads(result.output)
    assert output["success"] is False
    assert output["errorMessage"] == "Request failed with status code: BadRequest"
    assert output["rawResponse"] == "bad input"


def test_register(runner, mock_trigger):
    result = invoke(
        runner,
        "register",
        "--email",
        "test@example.com",
        "--username",
        "testuser",
        "--password",
        "password123",
    )

    assert result.exit_code == 0
    url, payload, result_type = mock_trigger.call_args[0]
    assert url == "http://localhost:5678/webhook/user-registration"
    assert payload.email == "test@example.com"
    assert payload.password == "password123"
    assert result_type is UserRegistrationResponse


def test_register_prompts_for_password(runner, mock_trigger):
    result = runner.invoke(
        cli,
        ["--log-level", "CRITICAL", "register", "--email", "a@b.c", "--username", "ab"],
        input="secret\n",
    )

    assert result.exit_code == 0
    assert mock_trigger.call_args[0][1].password == "secret"


def test_process_keeps_item_order(runner, mock_trigger):
    result = invoke(runner, "process", "--item", "alpha=1", "--item", "beta=2", "--item", "alpha=3")

    assert result.exit_code == 0
    _, payload, result_type = mock_trigger.call_args[0]
    assert [(item.name, item.value) for item in payload.items] == [
        ("alpha", "1"),
        ("beta", "2"),
        ("alpha", "3"),
    ]
    assert result_type is DataProcessingResponse


def test_process_requires_items(runner, mock_trigger):
    result = invoke(runner, "process")

    assert result.exit_code == 2
    mock_trigger.assert_not_called()


def test_bad_pair_is_rejected(runner, mock_trigger):
    result = invoke(runner, "process", "--item", "no-separator")

    assert result.exit_code == 2
    assert "expected KEY=VALUE" in result.output
    mock_trigger.assert_not_called()


def test_trigger_raw_payload(runner, mock_trigger):
    result = invoke(runner, "trigger", "--url", "https://hooks.example.com/x", '{"key": "value"}')

    assert result.exit_code == 0
    mock_trigger.assert_awaited_once_with("https://hooks.example.com/x", {"key": "value"}, None)


def test_trigger_invalid_json(runner, mock_trigger):
    result = invoke(runner, "trigger", "--url", "https://hooks.example.com/x", "{ nope")

    assert result.exit_code == 2
    assert "invalid JSON" in result.output
    mock_trigger.assert_not_called()


def test_timeout_option_reaches_service(runner, monkeypatch):
    captured = {}

    async def fake_trigger(self, url, payload, result_type=None):
        captured["timeout"] = self.timeout
        return WebhookResponse.ok(data=None, status_code=200, raw_response="null")

    monkeypatch.setattr("n8n_webhook_client.cli.N8nWebhookService.trigger_webhook", fake_trigger)

    result = runner.invoke(cli, ["--log-level", "CRITICAL", "--timeout", "2.5", "simple"])

    assert result.exit_code == 0
    assert captured["timeout"] == 2.5
