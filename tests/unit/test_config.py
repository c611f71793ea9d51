"""Unit tests for webhook configuration."""

import os

import pytest

from n8n_webhook_client.config import WebhookConfig


def test_defaults():
    config = WebhookConfig()

    assert config.base_url == "http://localhost:5678"
    assert config.simple_webhook_url == "http://localhost:5678/webhook/simple-webhook"
    assert config.user_registration_webhook_url == "http://localhost:5678/webhook/user-registration"
    assert config.data_processing_webhook_url == "http://localhost:5678/webhook/data-processing"
    assert config.timeout is None
    assert config.log_level == "INFO"
    assert config.log_json is False


def test_webhook_urls_follow_base_url():
    config = WebhookConfig(base_url="https://n8n.example.com/")

    assert config.base_url == "https://n8n.example.com"
    assert config.simple_webhook_url == "https://n8n.example.com/webhook/simple-webhook"


def test_from_env(monkeypatch):
    monkeypatch.setenv("N8N_BASE_URL", "https://n8n.example.com")
    monkeypatch.setenv("N8N_SIMPLE_WEBHOOK_URL", "https://hooks.example.com/simple")
    monkeypatch.setenv("N8N_REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("N8N_LOG_LEVEL", "debug")
    monkeypatch.setenv("N8N_LOG_JSON", "true")

    config = WebhookConfig.from_env(load_env_file=False)

    assert config.simple_webhook_url == "https://hooks.example.com/simple"
    assert config.data_processing_webhook_url == "https://n8n.example.com/webhook/data-processing"
    assert config.timeout == 2.5
    assert config.log_level == "DEBUG"
    assert config.log_json is True


def test_from_env_reads_env_file(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("N8N_BASE_URL=https://from-file.example.com\n")
    monkeypatch.chdir(tmp_path)

    try:
        config = WebhookConfig.from_env()
    finally:
        os.environ.pop("N8N_BASE_URL", None)

    assert config.base_url == "https://from-file.example.com"


def test_from_env_invalid_timeout(monkeypatch):
    monkeypatch.setenv("N8N_REQUEST_TIMEOUT", "soon")

    with pytest.raises(ValueError):
        WebhookConfig.from_env(load_env_file=False)


def test_from_dict_ignores_unknown_keys():
    config = WebhookConfig.from_dict({"base_url": "http://n8n:5678", "unknown": 1, "timeout": 3})

    assert config.base_url == "http://n8n:5678"
    assert config.timeout == 3
