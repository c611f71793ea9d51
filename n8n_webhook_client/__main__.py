"""Main entry point for the n8n webhook client package."""

from n8n_webhook_client.cli import cli

if __name__ == "__main__":
    cli()
