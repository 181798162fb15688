from __future__ import annotations

import asyncio
import sys
from typing import Optional

import typer

from atlas_crud import runner
from atlas_crud.config import get_settings
from atlas_crud.infrastructure.client_factory import COLLECTION_NAME, DATABASE_NAME, redact_uri
from atlas_crud.reporter import print_report
from atlas_crud.utils.logging import configure_logging

app = typer.Typer(help="MongoDB Atlas CRUD demo CLI.")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"URI={redact_uri(settings.mongodb_uri)} | "
        f"target={DATABASE_NAME}.{COLLECTION_NAME} "
        f"server_selection_timeout_ms={settings.mongodb_server_selection_timeout_ms}"
    )


@app.command()
def run(
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print the run report as JSON instead of a table.",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Override the log level (default from settings).",
    ),
) -> None:
    """
    Connect, ping, run create/read/update/delete once, and close.
    """
    settings = get_settings()
    configure_logging(level=log_level or settings.log_level, json_logs=settings.log_json)

    report = asyncio.run(runner.run(settings))
    if json_output:
        typer.echo(report.to_json())
    else:
        print_report(report)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
