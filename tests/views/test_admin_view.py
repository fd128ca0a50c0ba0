"""AdminView — login gate, edit mode, and pet/page management through the API."""

import os

import httpx
import pytest

from petadoption.main import app
from petadoption.views.admin import AdminView
from petadoption.views.api_client import PetsApiClient

PASSWORD = os.environ["ADMIN_PASSWORD"]
IMAGE = ("cat.png", b"png bytes", "image/png")


def make_client(token: str | None = None) -> PetsApiClient:
    return PetsApiClient(
        "http://test", transport=httpx.ASGITransport(app=app), token=token,
    )


@pytest.fixture
async def admin(client):
    async with make_client() as api:
        view = AdminView(api)
        assert await view.login(PASSWORD) is True
        yield view


async def test_load_without_token_is_not_authenticated(client):
    async with make_client() as api:
        view = AdminView(api)
        await view.load()
    assert view.authenticated is False
    assert view.pets == []
    assert view.page_title == "Welcome to the Pet Adoption Center"


async def test_wrong_password_alerts(client):
    async with make_client() as api:
        view = AdminView(api)
        assert await view.login("wrong") is False
    assert view.alerts == ["Incorrect password"]
    assert view.authenticated is False


async def test_login_fetches_pets(admin):
    assert admin.authenticated is True
    assert len(admin.pets) == 6


async def test_token_reused_by_a_new_view(admin):
    async with make_client(admin.client.token) as api:
        view = AdminView(api)
        await view.load()
    assert view.authenticated is True
    assert len(view.pets) == 6


async def test_start_edit_prefills_and_switches_submit(admin):
    admin.start_edit(admin.find_pet(3))
    assert admin.name == "Charlie"
    assert admin.description == "Energetic and playful pup."
    assert admin.submit_label == "Update Animal"

    admin.cancel_edit()
    assert admin.submit_label == "Add Animal"
    assert admin.name == ""


async def test_submit_in_edit_mode_updates(admin):
    admin.start_edit(admin.find_pet(3))
    assert await admin.submit_pet("Chuck", "Renamed.") is True
    assert admin.find_pet(3)["name"] == "Chuck"
    assert admin.editing is None


async def test_submit_without_edit_adds(admin):
    assert await admin.submit_pet("Whiskers", "A cat.", IMAGE) is True
    assert len(admin.pets) == 7
    assert admin.pets[-1]["name"] == "Whiskers"


async def test_add_without_image_alerts(admin):
    assert await admin.submit_pet("Whiskers", "A cat.") is False
    assert admin.alerts == ["Error adding animal"]


async def test_remove_and_unadopt(client, admin):
    await client.post(
        "/adopt", json={"id": 1, "adopteeName": "Ann"},
        headers={"X-Forwarded-For": "1.2.3.4"},
    )
    await admin.fetch_pets()
    assert admin.find_pet(1)["adopted_by"] == "Ann"

    assert await admin.unadopt_pet(1) is True
    assert admin.find_pet(1)["adopted_by"] is None

    assert await admin.remove_pet(1) is True
    assert admin.find_pet(1) is None


async def test_update_page_details_alerts_success(admin):
    assert await admin.update_page_details("New", "Text") is True
    assert admin.alerts == ["Page details updated successfully"]


async def test_mutations_fail_after_logout(admin):
    await admin.logout()
    assert admin.authenticated is False
    assert await admin.remove_pet(2) is False
    assert admin.alerts == ["Error removing animal"]
