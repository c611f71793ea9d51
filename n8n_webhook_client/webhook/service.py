"""Clients that trigger n8n webhooks and wrap the outcome in a WebhookResponse."""

import asyncio
import time
from typing import Any, Optional, Type, TypeVar

import aiohttp
import requests
import structlog

from n8n_webhook_client.errors import DecodeError, ErrorCategory, HttpStatusError, TransportError
from n8n_webhook_client.metrics import WEBHOOK_LATENCY, WEBHOOK_REQUESTS
from n8n_webhook_client.webhook.decoding import decode_response, encode_payload
from n8n_webhook_client.webhook.response import WebhookResponse
from n8n_webhook_client.webhook.status import is_success, status_name

T = TypeVar("T")

JSON_HEADERS = {"Content-Type": "application/json; charset=utf-8"}


def _error_text(error: BaseException) -> str:
    return str(error) or error.__class__.__name__


def _body_text(response: requests.Response) -> str:
    """Decode a requests response body, defaulting to UTF-8.

    requests falls back to ISO-8859-1 for text/* responses without a charset.
    """
    if "charset" in response.headers.get("Content-Type", "").lower():
        return response.text
    return response.content.decode("utf-8", errors="replace")


class _WebhookServiceBase:
    """Outcome classification shared by the async and blocking clients.

    Every path returns a WebhookResponse; nothing is raised to the caller.
    """

    def __init__(self, logger: Optional[Any] = None):
        self.logger = logger or structlog.get_logger(__name__)

    def _observe(self, outcome: str, start_time: float) -> float:
        duration = time.time() - start_time
        WEBHOOK_LATENCY.observe(duration)
        WEBHOOK_REQUESTS.labels(outcome=outcome).inc()
        return duration

    def _handle_response(
        self,
        webhook_url: str,
        status_code: int,
        response_text: str,
        result_type: Optional[Type[T]],
        start_time: float,
    ) -> WebhookResponse[T]:
        """Classify a received response.

        Raises:
            DecodeError: If a 2xx body does not decode into ``result_type``
        """
        if is_success(status_code):
            data = decode_response(response_text, result_type)
            duration = self._observe("success", start_time)
            return WebhookResponse.ok(
                data=data,
                status_code=status_code,
                raw_response=response_text,
                response_time=duration,
            )

        error = HttpStatusError(status_code, status_name(status_code))
        self.logger.error(
            "webhook_request_failed",
            url=webhook_url,
            status_code=status_code,
            status=error.status_name,
            error=error.message,
        )
        duration = self._observe(error.category.value, start_time)
        return WebhookResponse.fail(
            error_message=error.message,
            error_type=error.category,
            status_code=status_code,
            raw_response=response_text,
            response_time=duration,
        )

    def _decode_failure(
        self,
        webhook_url: str,
        error: DecodeError,
        status_code: int,
        response_text: Optional[str],
        start_time: float,
    ) -> WebhookResponse[Any]:
        self.logger.error(
            "webhook_json_error",
            url=webhook_url,
            status_code=status_code,
            error=error.message,
            exc_info=error,
        )
        duration = self._observe(error.category.value, start_time)
        return WebhookResponse.fail(
            error_message=error.message,
            error_type=error.category,
            status_code=status_code,
            raw_response=response_text,
            response_time=duration,
        )

    def _transport_failure(
        self, webhook_url: str, error: BaseException, start_time: float
    ) -> WebhookResponse[Any]:
        failure = TransportError(_error_text(error), details={"exception": type(error).__name__})
        self.logger.error(
            "webhook_http_request_error", url=webhook_url, error=failure.message, exc_info=error
        )
        duration = self._observe(failure.category.value, start_time)
        return WebhookResponse.fail(
            error_message=failure.message,
            error_type=failure.category,
            response_time=duration,
        )

    def _unexpected_failure(
        self,
        webhook_url: str,
        error: Exception,
        status_code: int,
        response_text: Optional[str],
        start_time: float,
    ) -> WebhookResponse[Any]:
        message = _error_text(error)
        self.logger.error(
            "webhook_trigger_error",
            url=webhook_url,
            status_code=status_code,
            error=message,
            exc_info=error,
        )
        duration = self._observe(ErrorCategory.UNEXPECTED_ERROR.value, start_time)
        return WebhookResponse.fail(
            error_message=message,
            error_type=ErrorCategory.UNEXPECTED_ERROR,
            status_code=status_code,
            raw_response=response_text,
            response_time=duration,
        )


class N8nWebhookService(_WebhookServiceBase):
    """Asynchronous webhook client built on aiohttp.

    A session passed in is used as is and left open; a session created by the
    service is closed by ``close()`` or on leaving ``async with``.
    """

    def __init__(
        self,
        session: Optional[aiohttp.ClientSession] = None,
        logger: Optional[Any] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize the webhook service.

        Args:
            session: Optional aiohttp session to send requests with
            logger: Optional structlog logger
            timeout: Total timeout in seconds for sessions the service creates
        """
        super().__init__(logger)
        self._session = session
        self._owns_session = session is None
        self.timeout = timeout

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            if self.timeout:
                self._session = aiohttp.ClientSession(
                    timeout=aiohttp.ClientTimeout(total=self.timeout)
                )
            else:
                self._session = aiohttp.ClientSession()
        return self._session

    async def trigger_webhook(
        self,
        webhook_url: str,
        payload: Any,
        result_type: Optional[Type[T]] = None,
    ) -> WebhookResponse[T]:
        """POST ``payload`` as JSON to ``webhook_url``.

        Args:
            webhook_url: Webhook endpoint URL
            payload: JSON-serializable payload, pydantic model or dataclass
            result_type: Type to decode a successful response into; ``None``
                keeps the parsed JSON

        Returns:
            WebhookResponse describing the outcome
        """
        start_time = time.time()
        status_code = 0
        response_text: Optional[str] = None

        try:
            body = encode_payload(payload)
            self.logger.info("sending_webhook_request", url=webhook_url)

            session = await self._get_session()
            async with session.post(webhook_url, data=body, headers=JSON_HEADERS) as response:
                response_text = await response.text(errors="replace")
                status_code = response.status

            return self._handle_response(
                webhook_url, status_code, response_text, result_type, start_time
            )
        except DecodeError as e:
            return self._decode_failure(webhook_url, e, status_code, response_text, start_time)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            return self._transport_failure(webhook_url, e, start_time)
        except Exception as e:
            return self._unexpected_failure(
                webhook_url, e, status_code, response_text, start_time
            )

    async def close(self) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> "N8nWebhookService":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()


class SyncN8nWebhookService(_WebhookServiceBase):
    """Blocking webhook client built on requests, for thread-based callers."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        logger: Optional[Any] = None,
        timeout: Optional[float] = None,
    ):
        super().__init__(logger)
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.timeout = timeout

    def trigger_webhook(
        self,
        webhook_url: str,
        payload: Any,
        result_type: Optional[Type[T]] = None,
    ) -> WebhookResponse[T]:
        """POST ``payload`` as JSON to ``webhook_url``.

        Same contract as ``N8nWebhookService.trigger_webhook``.
        """
        start_time = time.time()
        status_code = 0
        response_text: Optional[str] = None

        try:
            body = encode_payload(payload)
            self.logger.info("sending_webhook_request", url=webhook_url)

            response = self.session.post(
                webhook_url, data=body, headers=JSON_HEADERS, timeout=self.timeout
            )
            response_text = _body_text(response)
            status_code = response.status_code

            return self._handle_response(
                webhook_url, status_code, response_text, result_type, start_time
            )
        except DecodeError as e:
            return self._decode_failure(webhook_url, e, status_code, response_text, start_time)
        except requests.exceptions.RequestException as e:
            return self._transport_failure(webhook_url, e, start_time)
        except Exception as e:
            return self._unexpected_failure(
                webhook_url, e, status_code, response_text, start_time
            )

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "SyncN8nWebhookService":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
