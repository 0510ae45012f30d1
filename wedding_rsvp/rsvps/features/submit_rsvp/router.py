import json

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, field_validator

from wedding_rsvp.rsvps.dependencies import get_rsvp_write_model
from wedding_rsvp.rsvps.dtos import RSVPCreateDTO
from wedding_rsvp.rsvps.repository.write_models import RSVPWriteModel
from wedding_rsvp.rsvps.urls import SUBMIT_RSVP_URL

router = APIRouter()


class RSVPSubmit(BaseModel):
    """RSVP form body. Every field is optional and stored as free text."""

    code: str | None = None
    name: str | None = None
    attending: str | None = None
    dietary: str | None = None
    message: str | None = None

    @field_validator("code", "name", "attending", "dietary", "message", mode="before")
    @classmethod
    def coerce_to_text(cls, value):
        # forms often send attending as a JSON boolean
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        if isinstance(value, (list, dict)):
            return json.dumps(value, ensure_ascii=False)
        return value


class RSVPSubmitResponse(BaseModel):
    success: bool
    id: int


async def read_rsvp_submission(request: Request) -> RSVPSubmit:
    """Parse the body leniently: anything but a JSON object is an empty submission."""
    body = await request.body()
    try:
        payload = json.loads(body) if body else {}
    except ValueError:
        payload = {}
    if not isinstance(payload, dict):
        payload = {}
    return RSVPSubmit.model_validate(payload)


@router.post(SUBMIT_RSVP_URL, response_model=RSVPSubmitResponse)
async def submit_rsvp(
    rsvp_data: RSVPSubmit = Depends(read_rsvp_submission),
    write_model: RSVPWriteModel = Depends(get_rsvp_write_model),
) -> RSVPSubmitResponse:
    """
    Store an RSVP submission.
    Missing or malformed fields are stored as null or text; nothing is rejected.
    """
    rsvp_id = await write_model.create_rsvp(
        RSVPCreateDTO(
            code=rsvp_data.code,
            name=rsvp_data.name,
            attending=rsvp_data.attending,
            dietary=rsvp_data.dietary,
            message=rsvp_data.message,
        )
    )
    return RSVPSubmitResponse(success=True, id=rsvp_id)
