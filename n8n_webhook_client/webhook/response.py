"""Result envelope returned by webhook calls."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic_core import to_jsonable_python

from n8n_webhook_client.errors import ErrorCategory

T = TypeVar("T")


@dataclass(frozen=True)
class WebhookResponse(Generic[T]):
    """Response from a single webhook call.

    Exactly one of ``data`` and ``error_message`` is set. ``status_code`` is
    ``0`` and ``raw_response`` is ``None`` when no HTTP response was received.
    """

    success: bool
    status_code: int = 0
    data: Optional[T] = None
    error_message: Optional[str] = None
    raw_response: Optional[str] = None
    error_type: Optional[ErrorCategory] = None
    response_time: Optional[float] = None
    timestamp: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    @classmethod
    def ok(
        cls,
        data: T,
        status_code: int,
        raw_response: Optional[str],
        response_time: Optional[float] = None,
    ) -> "WebhookResponse[T]":
        return cls(
            success=True,
            status_code=status_code,
            data=data,
            raw_response=raw_response,
            response_time=response_time,
        )

    @classmethod
    def fail(
        cls,
        error_message: str,
        error_type: ErrorCategory,
        status_code: int = 0,
        raw_response: Optional[str] = None,
        response_time: Optional[float] = None,
    ) -> "WebhookResponse[T]":
        return cls(
            success=False,
            status_code=status_code,
            error_message=error_message,
            raw_response=raw_response,
            error_type=error_type,
            response_time=response_time,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert the envelope to a JSON-compatible dictionary."""
        return {
            "success": self.success,
            "statusCode": self.status_code,
            "data": to_jsonable_python(self.data, by_alias=True),
            "errorMessage": self.error_message,
            "rawResponse": self.raw_response,
            "errorType": self.error_type.value if self.error_type else None,
            "responseTime": self.response_time,
            "timestamp": self.timestamp,
        }
