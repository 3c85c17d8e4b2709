import os

os.environ.setdefault("SEED_ON_STARTUP", "false")
os.environ.setdefault("LOG_FILE_PATH", "")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from decimal import Decimal

import pytest
from httpx import ASGITransport, AsyncClient

from quickbite.main import app  # noqa: E402  configures logging first
from quickbite.core.config import settings
from quickbite.db import database
from quickbite.schemas.menu_item import MenuItemCreate


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
async def db(anyio_backend, tmp_path):
    """Point the application at a fresh SQLite file for one test."""
    original_url = settings.DATABASE_URL
    await database.dispose_engine()
    settings.DATABASE_URL = f"sqlite+aiosqlite:///{tmp_path / 'menu.db'}"
    await database.init_db()
    yield
    await database.dispose_engine()
    settings.DATABASE_URL = original_url


@pytest.fixture
async def session(db):
    async with database.get_db() as s:
        yield s


@pytest.fixture
async def client(db):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


def _build_create(**overrides) -> MenuItemCreate:
    data = {
        "name": "Margherita Pizza",
        "description": "Classic pizza with tomato sauce, mozzarella, and fresh basil",
        "price": Decimal("12.99"),
        "category": "Main Course",
        "dietary_tag": "Vegetarian",
    }
    data.update(overrides)
    return MenuItemCreate(**data)


@pytest.fixture
def make_create():
    """Factory for create payloads with sensible defaults."""
    return _build_create
