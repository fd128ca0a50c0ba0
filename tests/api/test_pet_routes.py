"""Pet Routes — listing, add with upload, update with optional upload, remove.

Invariants:
    - GET /pets returns the seeded pets ordered by id
    - Update-then-fetch returns exactly the updated fields
    - Remove of an unknown id → {"deleted": 0}, not an error
    - Mutations without an admin token → 401
"""

import pytest
from sqlalchemy import text


@pytest.fixture
def png():
    return ("rex.png", b"\x89PNG fake image bytes", "image/png")


async def test_list_pets_returns_seeded_pets_in_order(client):
    res = await client.get("/pets")
    assert res.status_code == 200
    pets = res.json()
    assert [p["id"] for p in pets] == [1, 2, 3, 4, 5, 6]
    assert pets[0] == {
        "id": 1,
        "name": "Buddy",
        "description": "Friendly dog looking for a home.",
        "image": "/images/1.jpg",
        "adopted_by": None,
        "adopter_ip": None,
    }


async def test_add_animal_stores_image_and_returns_id(client, admin_headers, png, image_store):
    res = await client.post(
        "/add-animal",
        data={"name": "Rex", "description": "Good dog."},
        files={"image": png},
        headers=admin_headers,
    )
    assert res.status_code == 200
    new_id = res.json()["id"]
    assert new_id == 7

    pet = next(p for p in (await client.get("/pets")).json() if p["id"] == new_id)
    assert pet["name"] == "Rex"
    assert pet["image"].startswith("/images/") and pet["image"].endswith(".png")
    stored = image_store.directory / pet["image"].rsplit("/", 1)[1]
    assert stored.read_bytes() == png[1]


async def test_add_animal_without_image_is_rejected(client, admin_headers):
    res = await client.post(
        "/add-animal",
        data={"name": "Rex", "description": "Good dog."},
        headers=admin_headers,
    )
    assert res.status_code == 400


async def test_add_animal_requires_admin(client, png):
    res = await client.post(
        "/add-animal",
        data={"name": "Rex", "description": "Good dog."},
        files={"image": png},
    )
    assert res.status_code == 401
    assert res.json()["code"] == "AUTHENTICATION_FAILED"


async def test_update_then_fetch_returns_updated_fields(client, admin_headers):
    res = await client.put(
        "/update-animal/2",
        data={"name": "Luna II", "description": "Now even sweeter."},
        headers=admin_headers,
    )
    assert res.json() == {"updated": 1}

    pet = next(p for p in (await client.get("/pets")).json() if p["id"] == 2)
    assert pet["name"] == "Luna II"
    assert pet["description"] == "Now even sweeter."
    assert pet["image"] == "/images/2.png"


async def test_update_with_image_replaces_image(client, admin_headers, png):
    await client.put(
        "/update-animal/3",
        data={"name": "Charlie", "description": "Energetic and playful pup."},
        files={"image": png},
        headers=admin_headers,
    )
    pet = next(p for p in (await client.get("/pets")).json() if p["id"] == 3)
    assert pet["image"] != "/images/3.jpg"
    assert pet["image"].endswith(".png")


async def test_update_keeps_adoption_fields(client, admin_headers):
    await client.post(
        "/adopt", json={"id": 1, "adopteeName": "Ann"},
        headers={"X-Forwarded-For": "1.2.3.4"},
    )
    await client.put(
        "/update-animal/1",
        data={"name": "Buddy", "description": "Adopted already."},
        headers=admin_headers,
    )
    pet = next(p for p in (await client.get("/pets")).json() if p["id"] == 1)
    assert pet["adopted_by"] == "Ann"


async def test_update_unknown_pet_reports_zero(client, admin_headers):
    res = await client.put(
        "/update-animal/999",
        data={"name": "Ghost", "description": "Not here."},
        headers=admin_headers,
    )
    assert res.json() == {"updated": 0}


async def test_remove_animal(client, admin_headers):
    res = await client.delete("/remove-animal/6", headers=admin_headers)
    assert res.json() == {"deleted": 1}
    ids = [p["id"] for p in (await client.get("/pets")).json()]
    assert 6 not in ids


async def test_remove_nonexistent_animal_reports_zero(client, admin_headers):
    res = await client.delete("/remove-animal/999", headers=admin_headers)
    assert res.status_code == 200
    assert res.json() == {"deleted": 0}


async def test_remove_requires_admin(client):
    res = await client.delete("/remove-animal/1")
    assert res.status_code == 401


async def test_non_numeric_id_is_a_validation_error(client, admin_headers):
    res = await client.delete("/remove-animal/abc", headers=admin_headers)
    assert res.status_code == 400
    assert res.json()["code"] == "VALIDATION_ERROR"


async def test_update_unknown_pet_discards_upload(client, admin_headers, png, image_store):
    res = await client.put(
        "/update-animal/999",
        data={"name": "Ghost", "description": "Not here."},
        files={"image": png},
        headers=admin_headers,
    )
    assert res.json() == {"updated": 0}
    assert list(image_store.directory.iterdir()) == []


async def test_failed_insert_discards_upload(client, admin_headers, png, image_store, db_manager):
    async with db_manager.session() as db:
        await db.execute(text("DROP TABLE pets"))
        await db.commit()

    res = await client.post(
        "/add-animal",
        data={"name": "Rex", "description": "Good dog."},
        files={"image": png},
        headers=admin_headers,
    )
    assert res.status_code == 500
    assert res.json() == {"error": "no such table: pets", "code": "DATABASE_ERROR"}
    assert list(image_store.directory.iterdir()) == []
