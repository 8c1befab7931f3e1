# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Sets up environment variables before the app is imported, then provides an
# in-memory SQLite database, a fake media host and a TestClient wired to both
# through FastAPI dependency overrides.
# =============================================================================

import io
import os
import tempfile

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# app.core.config reads these at import time

os.environ.setdefault("JWT_SECRET", "test-secret-key-for-catalog-tests")
os.environ.setdefault("JWT_ALGORITHM", "HS256")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="catalog-logs-"))

import pytest
from fastapi.testclient import TestClient
from PIL import Image
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401
from app.core.dependencies import get_db, get_media_host
from app.core.errors import MediaHostError
from app.core.identity import Authenticated
from app.core.jwt import create_access_token
from app.crud.admin_store import AdminStore
from app.db.session import Base
from app.main import app as fastapi_app


# =============================================================================
# Fakes
# =============================================================================

class FakeMediaHost:
    """Records uploads/destroys instead of talking to Cloudinary."""

    def __init__(self):
        self.uploaded = []
        self.destroyed = []
        self.fail_on_upload = None

    def upload(self, image_bytes: bytes, folder: str) -> str:
        if self.fail_on_upload is not None and len(self.uploaded) + 1 == self.fail_on_upload:
            raise MediaHostError("Cloud upload failed", error="quota exceeded")
        n = len(self.uploaded) + 1
        url = f"https://res.cloudinary.com/demo/image/upload/v170000000{n}/{folder}/img{n}.jpg"
        self.uploaded.append(url)
        return url

    def destroy(self, reference: str) -> None:
        self.destroyed.append(reference)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def media_host():
    return FakeMediaHost()


@pytest.fixture
def client(session_factory, media_host):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    fastapi_app.dependency_overrides[get_db] = override_get_db
    fastapi_app.dependency_overrides[get_media_host] = lambda: media_host
    with TestClient(fastapi_app) as c:
        yield c
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def store(db):
    return AdminStore(db)


@pytest.fixture
def admin(store):
    """A seeded, active, top-level admin."""
    return store.create(full_name="Alice Admin", email="a@x.com", password="secret123")


@pytest.fixture
def auth_headers(admin):
    return {"Authorization": f"Bearer {create_access_token(admin.id)}"}


@pytest.fixture
def identity(admin):
    return Authenticated(id=admin.id, name=admin.full_name, email=admin.email)


@pytest.fixture
def png_bytes():
    buffer = io.BytesIO()
    Image.new("RGB", (8, 8), color=(200, 30, 30)).save(buffer, format="PNG")
    return buffer.getvalue()
