"""CLI command that runs the HTTP API."""

from __future__ import annotations

import click
import uvicorn

from receipt_processor.infrastructure.api.app import create_app
from receipt_processor.infrastructure.bootstrap import configure_logging
from receipt_processor.infrastructure.config import get_settings


@click.command("serve")
@click.option("--host", default=None, help="Interface to bind (default: HOST setting).")
@click.option("--port", default=None, type=int, help="Port to listen on (default: PORT setting).")
@click.option("--log-level", default=None, help="Logging level (default: LOG_LEVEL setting).")
def serve(host: str | None, port: int | None, log_level: str | None) -> None:
    """Serve the receipts API."""
    settings = get_settings()
    host = host or settings.HOST
    port = port or settings.PORT
    log_level = (log_level or settings.LOG_LEVEL).upper()

    configure_logging(log_level)
    click.echo(f"Serving {settings.PROJECT_NAME} on http://{host}:{port}")
    uvicorn.run(create_app(settings=settings), host=host, port=port, log_level=log_level.lower())
