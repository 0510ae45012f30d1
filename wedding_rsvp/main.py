from contextlib import asynccontextmanager

import sentry_sdk
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration

from wedding_rsvp.config.database import Database
from wedding_rsvp.config.logging import setup_logging
from wedding_rsvp.config.settings import settings
from wedding_rsvp.routers.healthz.router import router as healthz_router
from wedding_rsvp.rsvps.dtos import RSVPStorageError
from wedding_rsvp.rsvps.routers import router as rsvps_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    database: Database = app.state.database
    # a store that cannot be opened aborts startup
    await database.initialize()
    yield
    await database.dispose()


async def storage_error_handler(request: Request, exc: RSVPStorageError) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": exc.message})


async def root() -> str:
    return "Wedding RSVP backend is running 🌿"


def create_app(database: Database | None = None) -> FastAPI:
    app = FastAPI(
        title="Wedding RSVP API",
        description="API for collecting wedding RSVPs and exporting them",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.database = database or Database.from_path(settings.db_path)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RSVPStorageError, storage_error_handler)

    # Include routers
    app.add_api_route("/", root, methods=["GET"], response_class=PlainTextResponse, tags=["Root"])
    app.include_router(healthz_router, prefix="/healthz", tags=["Healthz"])
    app.include_router(rsvps_router, tags=["RSVPs"])

    return app


setup_logging()

if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.ENVIRONMENT,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        profiles_sample_rate=settings.SENTRY_PROFILES_SAMPLE_RATE,
        integrations=[
            StarletteIntegration(transaction_style="endpoint"),
            FastApiIntegration(transaction_style="endpoint"),
        ],
        send_default_pii=False,
    )

app = create_app()
