from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse

from wedding_rsvp.config.database import Database, get_database
from wedding_rsvp.rsvps.dependencies import get_rsvp_read_model
from wedding_rsvp.rsvps.dtos import RSVPStorageError
from wedding_rsvp.rsvps.features.admin_page.templates import render_admin_page
from wedding_rsvp.rsvps.repository.read_models import RSVPReadModel
from wedding_rsvp.rsvps.urls import ADMIN_URL

router = APIRouter()


# TODO: put this page and the exports behind an admin login; they expose every submission.
@router.get(ADMIN_URL, response_class=HTMLResponse)
async def admin_page(
    read_model: RSVPReadModel = Depends(get_rsvp_read_model),
    database: Database = Depends(get_database),
):
    """Render all RSVPs as an HTML table, newest first."""
    try:
        rsvps = await read_model.list_rsvps()
    except RSVPStorageError as e:
        return PlainTextResponse(e.message, status_code=500)

    return HTMLResponse(render_admin_page(rsvps, db_location=database.location))
