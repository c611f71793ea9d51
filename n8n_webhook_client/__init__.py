"""Client for triggering n8n workflows through their webhooks."""

from .config import WebhookConfig
from .errors import DecodeError, ErrorCategory, HttpStatusError, TransportError
from .webhook import N8nWebhookService, SyncN8nWebhookService, WebhookModel, WebhookResponse

__version__ = "1.0.0"

__all__ = [
    "DecodeError",
    "ErrorCategory",
    "HttpStatusError",
    "N8nWebhookService",
    "SyncN8nWebhookService",
    "TransportError",
    "WebhookConfig",
    "WebhookModel",
    "WebhookResponse",
]
