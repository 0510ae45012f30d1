"""CLI commands for the wedding RSVP backend."""

import asyncio
import logging
from enum import Enum
from pathlib import Path

import typer
import uvicorn

from wedding_rsvp.config.database import Database
from wedding_rsvp.config.logging import setup_logging
from wedding_rsvp.config.settings import settings
from wedding_rsvp.rsvps.dtos import RSVPStorageError
from wedding_rsvp.rsvps.exporters import export_filename, render_csv, render_json
from wedding_rsvp.rsvps.repository.read_models import SqlRSVPReadModel

logger = logging.getLogger(__name__)

app = typer.Typer(help="CLI commands for the wedding RSVP backend")


class ExportFormat(str, Enum):
    CSV = "csv"
    JSON = "json"


@app.callback()
def main():
    setup_logging()


@app.command()
def serve(
    reload: bool = typer.Option(False, "--reload", help="Restart on code changes"),
):
    """Run the HTTP server on the configured host and port."""
    logger.info(f"Server listening on http://{settings.host}:{settings.port}")
    uvicorn.run(
        "wedding_rsvp.main:app",
        host=settings.host,
        port=settings.port,
        reload=reload,
    )


async def _init_db(database: Database) -> None:
    try:
        await database.initialize()
    finally:
        await database.dispose()


@app.command()
def init_db():
    """Create the rsvps table if it does not exist yet."""
    database = Database.from_path(settings.db_path)
    try:
        asyncio.run(_init_db(database))
    except Exception:
        # already logged by Database.initialize
        typer.secho(f"Could not initialize {database.location}", fg=typer.colors.RED)
        raise typer.Exit(1)

    typer.secho(f"Database ready at {database.location}", fg=typer.colors.GREEN)


async def _render_export(export_format: ExportFormat) -> str:
    database = Database.from_path(settings.db_path)
    try:
        rsvps = await SqlRSVPReadModel(database).list_rsvps()
    finally:
        await database.dispose()

    if export_format == ExportFormat.JSON:
        return render_json(rsvps)
    return render_csv(rsvps)


@app.command()
def export(
    export_format: ExportFormat = typer.Option(
        ExportFormat.CSV,
        "--format",
        "-f",
        help="Export format",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="File to write; a directory gets the dated export filename",
    ),
):
    """Export every RSVP as CSV or JSON, to stdout or a file."""
    try:
        content = asyncio.run(_render_export(export_format))
    except RSVPStorageError:
        typer.secho(f"Could not read RSVPs from {settings.db_path}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    if output is None:
        typer.echo(content, nl=False)
        return

    if output.is_dir():
        output = output / export_filename(export_format.value)
    output.write_text(content, encoding="utf-8")
    typer.secho(f"Exported RSVPs to {output}", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
