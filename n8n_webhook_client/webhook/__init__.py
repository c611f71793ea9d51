"""Webhook package for the n8n webhook client."""

from .decoding import WebhookModel, decode_response, encode_payload
from .response import WebhookResponse
from .service import N8nWebhookService, SyncN8nWebhookService
from .status import status_name

__all__ = [
    "N8nWebhookService",
    "SyncN8nWebhookService",
    "WebhookModel",
    "WebhookResponse",
    "decode_response",
    "encode_payload",
    "status_name",
]
