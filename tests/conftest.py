"""
Pytest fixtures: an in-memory SQLite store per test, a viewer context with
a fixed date, a media root under tmp_path and an API client wired to both.
"""
import io
import uuid
from datetime import date

import pytest
from fastapi.testclient import TestClient
from PIL import Image
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.context import build_context
from database.base import Base
from database.connection import get_db
from database.object_store import LocalObjectStore, get_object_store
from database.store import RowStore
from models import offer, property_listing, rating, search_request, service_listing  # noqa: F401
from services.auth import create_access_token

TODAY = date(2026, 5, 1)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False}
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()


@pytest.fixture
def store(db):
    return RowStore(db)


@pytest.fixture
def object_store(tmp_path):
    return LocalObjectStore(root=str(tmp_path), base_url="http://testserver/uploads")


@pytest.fixture
def user_id():
    return str(uuid.uuid4())


@pytest.fixture
def ctx(user_id):
    """Signed-in English viewer."""
    return build_context(locale="en", user_id=user_id, today=TODAY)


@pytest.fixture
def anon_ctx():
    return build_context(locale="en", today=TODAY)


@pytest.fixture
def other_ctx():
    return build_context(locale="en", user_id=str(uuid.uuid4()), today=TODAY)


@pytest.fixture
def auth_headers():
    """Build bearer headers for any user id."""
    def _headers(uid):
        return {"Authorization": f"Bearer {create_access_token(uid)}"}
    return _headers


@pytest.fixture
def client(db, object_store):
    from main import app

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_object_store] = lambda: object_store
    yield TestClient(app)
    app.dependency_overrides.clear()


def make_image(size=(64, 48), color=(200, 30, 30), fmt="PNG", mode="RGB") -> bytes:
    buffer = io.BytesIO()
    Image.new(mode, size, color).save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def png_bytes():
    return make_image()
