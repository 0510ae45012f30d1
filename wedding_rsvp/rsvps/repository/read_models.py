import abc
import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from wedding_rsvp.config.database import Database
from wedding_rsvp.rsvps.dtos import RSVPDTO, RSVPStorageError
from wedding_rsvp.rsvps.repository.orm_models import RSVP

logger = logging.getLogger(__name__)


class RSVPReadModel(abc.ABC):
    @abc.abstractmethod
    async def list_rsvps(self) -> list[RSVPDTO]:
        """
        Get every RSVP, newest first.
        Raises RSVPStorageError when the store cannot be read.
        """
        raise NotImplementedError


class SqlRSVPReadModel(RSVPReadModel):
    """SQL implementation of RSVP read model."""

    def __init__(self, database: Database) -> None:
        self._database = database

    async def list_rsvps(self) -> list[RSVPDTO]:
        # created_at only has second resolution, id breaks the ties
        stmt = select(RSVP).order_by(RSVP.created_at.desc(), RSVP.id.desc())
        try:
            async with self._database.session(auto_commit=False) as session:
                result = await session.execute(stmt)
                return [RSVPDTO.from_rsvp(rsvp) for rsvp in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error(f"Select failed: {e}")
            raise RSVPStorageError() from e
