from unittest.mock import Mock

import pytest
import structlog

N8N_ENV_VARS = (
    "N8N_BASE_URL",
    "N8N_SIMPLE_WEBHOOK_URL",
    "N8N_USER_REGISTRATION_WEBHOOK_URL",
    "N8N_DATA_PROCESSING_WEBHOOK_URL",
    "N8N_REQUEST_TIMEOUT",
    "N8N_LOG_LEVEL",
    "N8N_LOG_JSON",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's n8n settings out of the tests."""
    for name in N8N_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo logging configuration done by a test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def mock_logger():
    """Create a mock structlog logger."""
    return Mock()


@pytest.fixture
def webhook_url():
    return "https://n8n.example.com/webhook/test"
