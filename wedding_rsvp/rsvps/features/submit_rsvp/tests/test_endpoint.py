import pytest

from wedding_rsvp.rsvps.dependencies import get_rsvp_write_model
from wedding_rsvp.rsvps.tests.inmemory_models import (
    FailingRSVPWriteModel,
    InMemoryRSVPWriteModel,
    create_test_store,
)
from wedding_rsvp.rsvps.urls import SUBMIT_RSVP_URL


@pytest.fixture
def store():
    return create_test_store()


@pytest.fixture
def overrides(store):
    write_model = InMemoryRSVPWriteModel(store)
    return {get_rsvp_write_model: lambda: write_model}


@pytest.mark.asyncio
async def test_submit_rsvp(client_factory, store, overrides):
    """Test that a full submission is stored as given."""
    rsvp_data = {
        "code": "A1",
        "name": "Jo",
        "attending": "yes",
        "dietary": "none",
        "message": "hi",
    }

    async with client_factory(overrides) as client:
        response = await client.post(SUBMIT_RSVP_URL, json=rsvp_data)

    assert response.status_code == 200
    assert response.json() == {"success": True, "id": 1}

    stored = store.rsvps[0]
    assert stored.code == "A1"
    assert stored.name == "Jo"
    assert stored.attending == "yes"
    assert stored.dietary == "none"
    assert stored.message == "hi"


@pytest.mark.asyncio
async def test_submit_rsvp_returns_fresh_ids(client_factory, overrides):
    async with client_factory(overrides) as client:
        first = await client.post(SUBMIT_RSVP_URL, json={"name": "Jo"})
        second = await client.post(SUBMIT_RSVP_URL, json={"name": "Sam"})

    assert first.json()["id"] != second.json()["id"]


@pytest.mark.asyncio
async def test_submit_rsvp_missing_fields_are_stored_as_null(client_factory, store, overrides):
    async with client_factory(overrides) as client:
        response = await client.post(SUBMIT_RSVP_URL, json={"name": "Jo"})

    assert response.status_code == 200
    stored = store.rsvps[0]
    assert stored.name == "Jo"
    assert stored.code is None
    assert stored.attending is None
    assert stored.dietary is None
    assert stored.message is None


@pytest.mark.asyncio
async def test_submit_rsvp_without_body(client_factory, store, overrides):
    """An empty submission is accepted rather than rejected."""
    async with client_factory(overrides) as client:
        response = await client.post(SUBMIT_RSVP_URL)

    assert response.status_code == 200
    assert response.json()["success"] is True
    assert store.rsvps[0].name is None


@pytest.mark.asyncio
async def test_submit_rsvp_coerces_scalars_to_text(client_factory, store, overrides):
    rsvp_data = {"code": 1234, "attending": True, "dietary": False}

    async with client_factory(overrides) as client:
        response = await client.post(SUBMIT_RSVP_URL, json=rsvp_data)

    assert response.status_code == 200
    stored = store.rsvps[0]
    assert stored.code == "1234"
    assert stored.attending == "true"
    assert stored.dietary == "false"


@pytest.mark.asyncio
async def test_submit_rsvp_ignores_unknown_fields(client_factory, store, overrides):
    async with client_factory(overrides) as client:
        response = await client.post(SUBMIT_RSVP_URL, json={"name": "Jo", "plus_ones": 3})

    assert response.status_code == 200
    assert store.rsvps[0].name == "Jo"


@pytest.mark.asyncio
async def test_submit_rsvp_stores_nested_values_as_text(client_factory, store, overrides):
    rsvp_data = {"name": "Jo", "dietary": ["vegan", "nuts"], "message": {"note": "hi"}}

    async with client_factory(overrides) as client:
        response = await client.post(SUBMIT_RSVP_URL, json=rsvp_data)

    assert response.status_code == 200
    stored = store.rsvps[0]
    assert stored.name == "Jo"
    assert stored.dietary == '["vegan", "nuts"]'
    assert stored.message == '{"note": "hi"}'


@pytest.mark.asyncio
async def test_submit_rsvp_array_body_is_an_empty_submission(client_factory, store, overrides):
    async with client_factory(overrides) as client:
        response = await client.post(SUBMIT_RSVP_URL, json=["Jo", "yes"])

    assert response.status_code == 200
    assert response.json() == {"success": True, "id": 1}
    assert len(store.rsvps) == 1
    assert store.rsvps[0].name is None


@pytest.mark.asyncio
async def test_submit_rsvp_form_body_is_an_empty_submission(client_factory, store, overrides):
    """Only JSON bodies are read; other encodings still store a row."""
    async with client_factory(overrides) as client:
        response = await client.post(SUBMIT_RSVP_URL, data={"name": "Jo"})

    assert response.status_code == 200
    assert response.json()["success"] is True
    assert len(store.rsvps) == 1
    assert store.rsvps[0].name is None


@pytest.mark.asyncio
async def test_submit_rsvp_database_error(client_factory):
    """A storage failure is reported without its cause."""
    overrides = {get_rsvp_write_model: lambda: FailingRSVPWriteModel()}

    async with client_factory(overrides) as client:
        response = await client.post(SUBMIT_RSVP_URL, json={"name": "Jo"})

    assert response.status_code == 500
    assert response.json() == {"error": "Database error"}
