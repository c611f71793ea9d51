"""Command line interface for triggering n8n webhooks."""

import asyncio
import json
from typing import Any, List, Optional, Tuple, Type

import click
import structlog

from n8n_webhook_client.config import WebhookConfig
from n8n_webhook_client.logging_config import configure_logging
from n8n_webhook_client.models import (
    DataItem,
    DataProcessingRequest,
    DataProcessingResponse,
    SimpleWebhookRequest,
    SimpleWebhookResponse,
    UserRegistrationRequest,
    UserRegistrationResponse,
)
from n8n_webhook_client.webhook import N8nWebhookService, WebhookResponse

logger = structlog.get_logger(__name__)


def parse_pairs(ctx, param, values: Tuple[str, ...]) -> List[Tuple[str, str]]:
    """Split repeated ``KEY=VALUE`` options into key/value pairs."""
    pairs = []
    for value in values:
        key, sep, item = value.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {value!r}")
        pairs.append((key, item))
    return pairs


async def _trigger(
    config: WebhookConfig, url: str, payload: Any, result_type: Optional[Type]
) -> WebhookResponse:
    async with N8nWebhookService(timeout=config.timeout) as service:
        return await service.trigger_webhook(url, payload, result_type)


def run_webhook(
    ctx: click.Context, url: str, payload: Any, result_type: Optional[Type] = None
) -> None:
    """Trigger a webhook, print the response envelope and set the exit code."""
    response = asyncio.run(_trigger(ctx.obj, url, payload, result_type))
    click.echo(json.dumps(response.to_dict(), indent=2))
    if not response.success:
        ctx.exit(1)


@click.group()
@click.option("--log-level", default=None, help="Log level (overrides N8N_LOG_LEVEL)")
@click.option("--log-json/--no-log-json", default=None, help="Emit logs as JSON lines")
@click.option("--timeout", type=float, default=None, help="Request timeout in seconds")
@click.pass_context
def cli(ctx, log_level: Optional[str], log_json: Optional[bool], timeout: Optional[float]):
    """Trigger n8n workflows through their webhooks."""
    config = WebhookConfig.from_env()
    if log_level:
        config.log_level = log_level.upper()
    if log_json is not None:
        config.log_json = log_json
    if timeout is not None:
        config.timeout = timeout

    configure_logging(config.log_level, config.log_json)
    ctx.obj = config


@cli.command()
@click.option("--url", default=None, help="Webhook URL (defaults to N8N_SIMPLE_WEBHOOK_URL)")
@click.option("--message", default="Hello from the n8n webhook client!", show_default=True)
@click.option(
    "--data", "data", multiple=True, callback=parse_pairs, help="Extra KEY=VALUE data"
)
@click.pass_context
def simple(ctx, url: Optional[str], message: str, data: List[Tuple[str, str]]):
    """Send a message to the simple webhook."""
    payload = SimpleWebhookRequest(message=message, data=dict(data) or None)
    run_webhook(ctx, url or ctx.obj.simple_webhook_url, payload, SimpleWebhookResponse)


@cli.command()
@click.option("--url", default=None, help="Webhook URL (defaults to N8N_USER_REGISTRATION_WEBHOOK_URL)")
@click.option("--email", required=True)
@click.option("--username", required=True)
@click.option("--password", prompt=True, hide_input=True)
@click.pass_context
def register(ctx, url: Optional[str], email: str, username: str, password: str):
    """Register a user through the user registration webhook."""
    payload = UserRegistrationRequest(email=email, username=username, password=password)
    run_webhook(
        ctx, url or ctx.obj.user_registration_webhook_url, payload, UserRegistrationResponse
    )


@cli.command()
@click.option("--url", default=None, help="Webhook URL (defaults to N8N_DATA_PROCESSING_WEBHOOK_URL)")
@click.option(
    "--item",
    "items",
    multiple=True,
    required=True,
    callback=parse_pairs,
    help="Item to process as NAME=VALUE",
)
@click.pass_context
def process(ctx, url: Optional[str], items: List[Tuple[str, str]]):
    """Send items to the data processing webhook."""
    payload = DataProcessingRequest(
        items=[DataItem(name=name, value=value) for name, value in items]
    )
    run_webhook(ctx, url or ctx.obj.data_processing_webhook_url, payload, DataProcessingResponse)


@cli.command()
@click.option("--url", required=True, help="Webhook URL")
@click.argument("payload_json")
@click.pass_context
def trigger(ctx, url: str, payload_json: str):
    """Send an arbitrary JSON payload to any webhook."""
    try:
        payload = json.loads(payload_json)
    except json.JSONDecodeError as e:
        logger.warning("invalid_payload_json", error=str(e))
        raise click.BadParameter(f"invalid JSON: {e}", param_hint="PAYLOAD_JSON")
    run_webhook(ctx, url, payload)
