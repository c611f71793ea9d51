"""Configuration management for the n8n webhook client."""

from .webhook_config import WebhookConfig

__all__ = ["WebhookConfig"]
