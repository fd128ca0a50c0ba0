"""Site Text Routes — page details and website title singletons."""


async def test_get_page_details_returns_seeded_row(client):
    res = await client.get("/page-details")
    assert res.status_code == 200
    body = res.json()
    assert body["id"] == 1
    assert body["title"] == "Welcome to the Pet Adoption Center"
    assert body["description"].startswith("Here you can find a variety of pets")


async def test_update_page_details_then_fetch(client, admin_headers):
    res = await client.put(
        "/update-page-details",
        json={"title": "Adopt Today", "description": "Six good dogs."},
        headers=admin_headers,
    )
    assert res.json() == {"updated": 1}
    assert (await client.get("/page-details")).json() == {
        "id": 1, "title": "Adopt Today", "description": "Six good dogs.",
    }


async def test_update_page_details_requires_both_fields(client, admin_headers):
    res = await client.put(
        "/update-page-details", json={"title": "Only a title"}, headers=admin_headers,
    )
    assert res.status_code == 400


async def test_website_title_scenario(client, admin_headers):
    res = await client.put(
        "/update-website-title", json={"title": "X"}, headers=admin_headers,
    )
    assert res.json() == {"updated": 1}
    assert (await client.get("/website-title")).json() == {"id": 1, "title": "X"}


async def test_site_text_updates_require_admin(client):
    assert (await client.put("/update-website-title", json={"title": "X"})).status_code == 401
    res = await client.put("/update-page-details", json={"title": "T", "description": "D"})
    assert res.status_code == 401
    assert (await client.get("/website-title")).json()["title"] == "Pet Adoption Site"


async def test_missing_singleton_row_is_404(client, test_db):
    from sqlalchemy import delete
    from petadoption.models.site_text import WebsiteTitle

    await test_db.execute(delete(WebsiteTitle))
    await test_db.commit()

    res = await client.get("/website-title")
    assert res.status_code == 404
    assert res.json()["code"] == "RESOURCE_NOT_FOUND"
