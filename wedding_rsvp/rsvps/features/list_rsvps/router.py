from datetime import datetime

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from wedding_rsvp.rsvps.dependencies import get_rsvp_read_model
from wedding_rsvp.rsvps.repository.read_models import RSVPReadModel
from wedding_rsvp.rsvps.urls import LIST_RSVPS_URL

router = APIRouter()


class RSVPResponse(BaseModel):
    id: int
    code: str | None
    name: str | None
    attending: str | None
    dietary: str | None
    message: str | None
    created_at: datetime


@router.get(LIST_RSVPS_URL, response_model=list[RSVPResponse])
async def list_rsvps(
    read_model: RSVPReadModel = Depends(get_rsvp_read_model),
) -> list[RSVPResponse]:
    """List all RSVPs, newest first."""
    rsvps = await read_model.list_rsvps()
    return [
        RSVPResponse(
            id=rsvp.id,
            code=rsvp.code,
            name=rsvp.name,
            attending=rsvp.attending,
            dietary=rsvp.dietary,
            message=rsvp.message,
            created_at=rsvp.created_at,
        )
        for rsvp in rsvps
    ]
