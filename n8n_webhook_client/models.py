"""Payload and response models for the n8n webhooks."""

from typing import Any, Dict, List, Optional

from n8n_webhook_client.webhook.decoding import WebhookModel


class UserRegistrationRequest(WebhookModel):
    email: str = ""
    username: str = ""
    password: str = ""


class User(WebhookModel):
    id: str = ""
    email: str = ""
    username: str = ""
    created_at: str = ""
    status: str = ""


class UserRegistrationResponse(WebhookModel):
    success: bool = False
    message: str = ""
    user: Optional[User] = None
    errors: Optional[List[str]] = None


class SimpleWebhookRequest(WebhookModel):
    message: str = ""
    data: Optional[Dict[str, Any]] = None


class SimpleWebhookResponse(WebhookModel):
    success: bool = False
    message: str = ""
    received_data: Optional[Any] = None
    processed_at: str = ""


class DataItem(WebhookModel):
    name: str = ""
    value: str = ""


class DataProcessingRequest(WebhookModel):
    items: Optional[List[DataItem]] = None


class ProcessedDataItem(WebhookModel):
    name: str = ""
    value: str = ""
    processed_at: str = ""
    status: str = ""


class ProcessingStatistics(WebhookModel):
    total_items: int = 0
    processed_at: str = ""
    summary: str = ""


class DataProcessingResponse(WebhookModel):
    """Result of the data-processing workflow."""

    items: Optional[List[ProcessedDataItem]] = None
    total_count: int = 0
    processing_timestamp: str = ""
    statistics: Optional[ProcessingStatistics] = None
