"""Renderers shared by the export routes and the CLI."""

import csv
import io
import json
from dataclasses import asdict
from datetime import UTC, date, datetime

from wedding_rsvp.rsvps.dtos import RSVPDTO

CSV_COLUMNS = ["id", "created_at", "code", "name", "attending", "dietary", "message"]
EXPORT_FILENAME_PREFIX = "wedding-rsvps"


def rsvp_to_dict(rsvp: RSVPDTO) -> dict:
    data = asdict(rsvp)
    data["created_at"] = rsvp.created_at.isoformat()
    return data


def render_json(rsvps: list[RSVPDTO]) -> str:
    return json.dumps([rsvp_to_dict(rsvp) for rsvp in rsvps], indent=2, ensure_ascii=False)


def render_csv(rsvps: list[RSVPDTO]) -> str:
    """
    Header row plus one row per RSVP, no newline after the last row. Fields
    holding a comma, quote or newline are quoted with embedded quotes
    doubled; missing values are empty.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(CSV_COLUMNS)
    for rsvp in rsvps:
        row = rsvp_to_dict(rsvp)
        writer.writerow([row[column] for column in CSV_COLUMNS])
    return buffer.getvalue().removesuffix("\n")


def export_filename(extension: str, today: date | None = None) -> str:
    today = today or datetime.now(UTC).date()
    return f"{EXPORT_FILENAME_PREFIX}-{today.isoformat()}.{extension}"


def attachment_headers(extension: str) -> dict[str, str]:
    return {"Content-Disposition": f'attachment; filename="{export_filename(extension)}"'}
