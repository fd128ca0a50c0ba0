"""Root conftest — environment, in-memory database, and FastAPI test client.

Invariants:
    - Environment is pinned before the app is imported (get_settings is cached)
    - Every test gets a fresh, seeded in-memory SQLite database
    - Outbound collaborators (Telegram, IP lookup, image store) are replaced
      through app.dependency_overrides; nothing leaves the process

Design Decisions:
    - The real DatabaseSessionManager is placed on app.state, so get_db is
      exercised exactly as in production
    - httpx ASGITransport reports the client as 127.0.0.1 (a trusted proxy),
      so tests pick the caller IP with an X-Forwarded-For header
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ADMIN_PASSWORD", "test-admin-password")
os.environ.setdefault("TELEGRAM_BOT_TOKEN", "")
os.environ.setdefault("TELEGRAM_CHAT_ID", "")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from petadoption.api.dependencies import (  # noqa: E402
    get_image_store, get_ip_lookup, get_notifier,
)
from petadoption.db.seed import seed_database  # noqa: E402
from petadoption.infrastructure.database import DatabaseSessionManager  # noqa: E402
from petadoption.infrastructure.image_store import LocalImageStore  # noqa: E402
from petadoption.main import app  # noqa: E402

ADMIN_PASSWORD = os.environ["ADMIN_PASSWORD"]


class FakeNotifier:
    """Records adoption notices instead of calling Telegram."""

    def __init__(self):
        self.sent: list[tuple[int, str, str]] = []

    async def notify_adoption(self, pet_id: int, adoptee_name: str, ip: str) -> bool:
        self.sent.append((pet_id, adoptee_name, ip))
        return True


class FakeIpLookup:
    def __init__(self, ip: str = "203.0.113.7"):
        self.ip = ip

    async def lookup(self) -> dict:
        return {"ip": self.ip}


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await manager.create_schema()
    async with manager.session() as db:
        await seed_database(db)
    yield manager
    await manager.dispose()


@pytest.fixture
async def test_db(db_manager):
    async with db_manager.session() as session:
        yield session


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def ip_lookup():
    return FakeIpLookup()


@pytest.fixture
def image_store(tmp_path):
    return LocalImageStore(tmp_path / "images")


@pytest.fixture
async def client(db_manager, notifier, ip_lookup, image_store):
    """FastAPI test client bound to the per-test database."""
    app.state.db_manager = db_manager
    app.dependency_overrides[get_notifier] = lambda: notifier
    app.dependency_overrides[get_ip_lookup] = lambda: ip_lookup
    app.dependency_overrides[get_image_store] = lambda: image_store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    del app.state.db_manager


@pytest.fixture
async def admin_headers(client):
    res = await client.post("/admin-login", json={"password": ADMIN_PASSWORD})
    assert res.status_code == 200
    return {"Authorization": f"Bearer {res.json()['token']}"}
