"""
Shared pytest fixtures.

Every test gets a fresh in-memory MongoDB (mongomock-motor) with Beanie
initialised on it, so the declared unique index is live. Owners and their
bearer credentials are created per test; nothing is shared across tests.
"""
import os
from uuid import uuid4

# Settings are read at import time
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("JWT_SECRET", "test-secret-not-real")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from app.configs.setup import create_app
from app.core.ownership import OwnerScope
from app.databases import mongodb
from app.models import DOCUMENT_MODELS, Folder, User
from app.utils.jwt_verification import create_token

SEED_FOLDER_NAMES = ["Work", "Archive", "Personal", "Drafts"]


@pytest_asyncio.fixture
async def db():
    """Fresh in-memory database with Beanie and its indexes initialised."""
    await mongodb.connect(document_models=DOCUMENT_MODELS, client=AsyncMongoMockClient())
    yield mongodb.database
    await mongodb.disconnect()


@pytest.fixture
def app(db):
    return create_app(use_lifespan=False)


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def make_user(db):
    """Factory creating a user and returning (user, auth headers)."""
    async def _make_user(username: str | None = None):
        user = User(username=username or f"user-{uuid4().hex[:8]}", fullname="Test User")
        await user.insert()
        token = create_token(user.username)
        return user, {"Authorization": f"Bearer {token}"}
    return _make_user


@pytest_asyncio.fixture
async def owner(make_user):
    return await make_user()


@pytest.fixture
def user(owner):
    return owner[0]


@pytest.fixture
def auth_headers(owner):
    return owner[1]


@pytest.fixture
def scope(user):
    return OwnerScope.from_user(user)


@pytest_asyncio.fixture
async def seed_folders(user):
    folders = [Folder(owner_id=str(user.id), name=name) for name in SEED_FOLDER_NAMES]
    for folder in folders:
        await folder.insert()
    return folders
