"""Configuration settings for n8n webhooks."""

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv

DEFAULT_BASE_URL = "http://localhost:5678"

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class WebhookConfig:
    """Configuration for triggering n8n webhooks.

    Attributes:
        base_url: Base URL of the n8n instance
        simple_webhook_url: URL of the simple message webhook
        user_registration_webhook_url: URL of the user registration webhook
        data_processing_webhook_url: URL of the data processing webhook
        timeout: Optional total request timeout in seconds, applied to
            sessions the clients create
        log_level: Log level for the CLI
        log_json: Render CLI logs as JSON instead of console output
    """

    base_url: str = DEFAULT_BASE_URL
    simple_webhook_url: Optional[str] = None
    user_registration_webhook_url: Optional[str] = None
    data_processing_webhook_url: Optional[str] = None
    timeout: Optional[float] = None
    log_level: str = "INFO"
    log_json: bool = False

    def __post_init__(self):
        self.base_url = self.base_url.rstrip("/")
        if not self.simple_webhook_url:
            self.simple_webhook_url = f"{self.base_url}/webhook/simple-webhook"
        if not self.user_registration_webhook_url:
            self.user_registration_webhook_url = f"{self.base_url}/webhook/user-registration"
        if not self.data_processing_webhook_url:
            self.data_processing_webhook_url = f"{self.base_url}/webhook/data-processing"

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "WebhookConfig":
        """Create config from environment variables.

        Environment Variables:
            N8N_BASE_URL: Optional n8n base URL
            N8N_SIMPLE_WEBHOOK_URL: Optional simple webhook URL
            N8N_USER_REGISTRATION_WEBHOOK_URL: Optional user registration webhook URL
            N8N_DATA_PROCESSING_WEBHOOK_URL: Optional data processing webhook URL
            N8N_REQUEST_TIMEOUT: Optional request timeout in seconds
            N8N_LOG_LEVEL: Optional log level
            N8N_LOG_JSON: Optional flag for JSON log output

        Args:
            load_env_file: Read a ``.env`` file found from the working
                directory upwards into the environment first

        Returns:
            WebhookConfig instance

        Raises:
            ValueError: If N8N_REQUEST_TIMEOUT is not a number
        """
        if load_env_file:
            load_dotenv(find_dotenv(usecwd=True))

        timeout = os.getenv("N8N_REQUEST_TIMEOUT")
        return cls(
            base_url=os.getenv("N8N_BASE_URL", DEFAULT_BASE_URL),
            simple_webhook_url=os.getenv("N8N_SIMPLE_WEBHOOK_URL"),
            user_registration_webhook_url=os.getenv("N8N_USER_REGISTRATION_WEBHOOK_URL"),
            data_processing_webhook_url=os.getenv("N8N_DATA_PROCESSING_WEBHOOK_URL"),
            timeout=float(timeout) if timeout else None,
            log_level=os.getenv("N8N_LOG_LEVEL", "INFO").upper(),
            log_json=os.getenv("N8N_LOG_JSON", "false").lower() in _TRUE_VALUES,
        )

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "WebhookConfig":
        """Create a WebhookConfig instance from a dictionary.

        Args:
            config_dict: Dictionary containing configuration values

        Returns:
            WebhookConfig instance with values from dictionary
        """
        return cls(**{k: v for k, v in config_dict.items() if k in cls.__dataclass_fields__})
