"""RSVP write model - inserts submissions and returns the assigned id."""

import logging
from abc import ABC, abstractmethod

from sqlalchemy.exc import SQLAlchemyError

from wedding_rsvp.config.database import Database
from wedding_rsvp.rsvps.dtos import RSVPCreateDTO, RSVPStorageError
from wedding_rsvp.rsvps.repository.orm_models import RSVP

logger = logging.getLogger(__name__)


class RSVPWriteModel(ABC):
    @abstractmethod
    async def create_rsvp(self, rsvp_data: RSVPCreateDTO) -> int:
        """
        Store a new RSVP and return its id.
        Raises RSVPStorageError when the insert fails.
        """
        raise NotImplementedError


class SqlRSVPWriteModel(RSVPWriteModel):
    """Write operations for RSVP. Submissions are stored as given, never updated."""

    def __init__(self, database: Database) -> None:
        self._database = database

    async def create_rsvp(self, rsvp_data: RSVPCreateDTO) -> int:
        try:
            async with self._database.session() as session:
                rsvp = RSVP(
                    code=rsvp_data.code,
                    name=rsvp_data.name,
                    attending=rsvp_data.attending,
                    dietary=rsvp_data.dietary,
                    message=rsvp_data.message,
                )
                session.add(rsvp)
                await session.flush()
                rsvp_id = rsvp.id
        except SQLAlchemyError as e:
            logger.error(f"Insert failed: {e}")
            raise RSVPStorageError() from e

        logger.debug(f"Stored RSVP {rsvp_id}")
        return rsvp_id
