"""Prometheus metrics for webhook calls."""

from prometheus_client import Counter, Histogram

WEBHOOK_REQUESTS = Counter(
    "n8n_webhook_requests_total",
    "Total number of webhook requests",
    ["outcome"],
)
WEBHOOK_LATENCY = Histogram(
    "n8n_webhook_request_duration_seconds",
    "Webhook request latency in seconds",
    buckets=(0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
)
