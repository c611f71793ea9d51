"""Error definitions for the n8n webhook client."""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class ErrorCategory(str, Enum):
    """Categories of failures a webhook call can end in."""

    TRANSPORT_ERROR = "transport_error"
    HTTP_STATUS_ERROR = "http_status_error"
    DECODE_ERROR = "decode_error"
    UNEXPECTED_ERROR = "unexpected_error"


class WebhookClientError(Exception):
    """Base error class for all webhook client errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize base error.

        Args:
            message: Error message
            category: Error category
            details: Optional error details
        """
        super().__init__(message)
        self.message = message
        self.category = category
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()


class TransportError(WebhookClientError):
    """Error raised when no HTTP response could be obtained."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, ErrorCategory.TRANSPORT_ERROR, details)


class HttpStatusError(WebhookClientError):
    """Error raised when the endpoint answered with a non-2xx status."""

    def __init__(
        self,
        status_code: int,
        status_name: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            f"Request failed with status code: {status_name}",
            ErrorCategory.HTTP_STATUS_ERROR,
            details,
        )
        self.status_code = status_code
        self.status_name = status_name


class DecodeError(WebhookClientError):
    """Error raised when a response body does not decode into the result type."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, ErrorCategory.DECODE_ERROR, details)
