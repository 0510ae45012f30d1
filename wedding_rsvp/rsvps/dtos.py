from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wedding_rsvp.rsvps.repository.orm_models import RSVP


class RSVPStorageError(Exception):
    """Raised when the store fails to save or load RSVPs.

    The message is generic. The underlying cause is logged
    where the error is raised and chained as ``__cause__``.
    """

    def __init__(self, message: str = "Database error") -> None:
        self.message = message
        super().__init__(message)


@dataclass(frozen=True)
class RSVPCreateDTO:
    """Fields supplied by the guest. All of them are optional free text."""

    code: str | None = None
    name: str | None = None
    attending: str | None = None
    dietary: str | None = None
    message: str | None = None


@dataclass(frozen=True)
class RSVPDTO:
    """A stored RSVP as returned by the read model."""

    id: int
    code: str | None
    name: str | None
    attending: str | None
    dietary: str | None
    message: str | None
    created_at: datetime

    @classmethod
    def from_rsvp(cls, rsvp: "RSVP") -> "RSVPDTO":
        return cls(
            id=rsvp.id,
            code=rsvp.code,
            name=rsvp.name,
            attending=rsvp.attending,
            dietary=rsvp.dietary,
            message=rsvp.message,
            created_at=rsvp.created_at,
        )
