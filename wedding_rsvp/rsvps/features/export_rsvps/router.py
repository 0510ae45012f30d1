from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, Response

from wedding_rsvp.rsvps.dependencies import get_rsvp_read_model
from wedding_rsvp.rsvps.dtos import RSVPStorageError
from wedding_rsvp.rsvps.exporters import attachment_headers, render_csv, render_json
from wedding_rsvp.rsvps.repository.read_models import RSVPReadModel
from wedding_rsvp.rsvps.urls import EXPORT_CSV_URL, EXPORT_JSON_URL

router = APIRouter()


@router.get(EXPORT_JSON_URL)
async def export_json(
    read_model: RSVPReadModel = Depends(get_rsvp_read_model),
) -> Response:
    """Download all RSVPs as a pretty-printed JSON file."""
    rsvps = await read_model.list_rsvps()
    return Response(
        content=render_json(rsvps),
        media_type="application/json; charset=utf-8",
        headers=attachment_headers("json"),
    )


@router.get(EXPORT_CSV_URL)
async def export_csv(
    read_model: RSVPReadModel = Depends(get_rsvp_read_model),
) -> Response:
    """Download all RSVPs as a CSV file."""
    try:
        rsvps = await read_model.list_rsvps()
    except RSVPStorageError as e:
        # spreadsheet clients get plain text, not a JSON error body
        return PlainTextResponse(e.message, status_code=500)

    return Response(
        content=render_csv(rsvps),
        media_type="text/csv",
        headers=attachment_headers("csv"),
    )
