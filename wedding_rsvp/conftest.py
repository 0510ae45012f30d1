import contextlib

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from wedding_rsvp.config.database import Database
from wedding_rsvp.main import create_app


@pytest_asyncio.fixture
async def database(tmp_path):
    """A freshly initialized store in a temporary file."""
    database = Database.from_path(tmp_path / "rsvps.db")
    await database.initialize()
    yield database
    await database.dispose()


@pytest.fixture
def client_factory(database):
    """Build a test client for an app bound to the temporary store.

    ``overrides`` maps dependencies to replacements, as for
    ``app.dependency_overrides``.
    """

    @contextlib.asynccontextmanager
    async def factory(overrides: dict | None = None):
        app = create_app(database=database)
        app.dependency_overrides.update(overrides or {})

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac

    return factory


@pytest_asyncio.fixture
async def client(client_factory):
    """Create a test client."""
    async with client_factory() as ac:
        yield ac
