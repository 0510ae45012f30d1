from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from wedding_rsvp.config.database import Database, get_database

router = APIRouter()


class HealthCheckResponse(BaseModel):
    status: str
    database: str
    version: str = "0.1.0"


@router.get("/", response_model=HealthCheckResponse)
async def health_check(database: Database = Depends(get_database)):
    """
    Health check endpoint. Reports 503 when the store cannot be reached.
    """
    if not await database.ping():
        return JSONResponse(
            status_code=503,
            content=HealthCheckResponse(status="unhealthy", database="unreachable").model_dump(),
        )
    return HealthCheckResponse(status="healthy", database="ok")
