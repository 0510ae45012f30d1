from fastapi import Depends

from wedding_rsvp.config.database import Database, get_database
from wedding_rsvp.rsvps.repository.read_models import RSVPReadModel, SqlRSVPReadModel
from wedding_rsvp.rsvps.repository.write_models import RSVPWriteModel, SqlRSVPWriteModel


def get_rsvp_read_model(database: Database = Depends(get_database)) -> RSVPReadModel:
    """Dependency to get RSVP read model instance."""
    return SqlRSVPReadModel(database)


def get_rsvp_write_model(database: Database = Depends(get_database)) -> RSVPWriteModel:
    """Dependency to get RSVP write model instance."""
    return SqlRSVPWriteModel(database)
