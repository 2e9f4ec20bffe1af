"""Shared pytest fixtures.

Environment variables are set before any application module is imported,
because ``config`` reads them at import time.
"""

import os
import tempfile

_TEST_ROOT = tempfile.mkdtemp(prefix="construction-api-tests-")
os.environ["DATA_DIR"] = os.path.join(_TEST_ROOT, "data")
os.environ["UPLOAD_DIR"] = os.path.join(_TEST_ROOT, "uploads")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TEST_ROOT, 'app.db')}"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["JWT_EXPIRES_IN"] = "24h"
os.environ["BCRYPT_ROUNDS"] = "10"
os.environ["APP_ENV"] = "production"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app import app  # noqa: E402
from core.database import create_db_engine, get_db, init_db  # noqa: E402
from core.dependencies import get_media_storage, get_token_service  # noqa: E402
from utils.upload_validator import MediaStorage  # noqa: E402
from utils.user_manager import AdminUserManager  # noqa: E402

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "secret123"


@pytest.fixture
def engine():
    db_engine = create_db_engine("sqlite://", poolclass=StaticPool)
    init_db(bind=db_engine)
    yield db_engine
    db_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def upload_dir(tmp_path):
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def storage(upload_dir):
    return MediaStorage(upload_dir=upload_dir)


@pytest.fixture
def client(session_factory, storage):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_media_storage] = lambda: storage
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def token_service():
    return get_token_service()


@pytest.fixture
def user_manager(db):
    return AdminUserManager(db)


@pytest.fixture
def admin_user(user_manager):
    return user_manager.create_user(
        username=ADMIN_USERNAME,
        password=ADMIN_PASSWORD,
        name="Site Admin",
        email="admin@example.com",
    )


@pytest.fixture
def auth_headers(admin_user, token_service):
    return {"Authorization": f"Bearer {token_service.issue(admin_user)}"}


@pytest.fixture
def editor_headers(user_manager, token_service):
    editor = user_manager.create_user(
        username="editor", password="editor123", name="Editor", role="editor"
    )
    return {"Authorization": f"Bearer {token_service.issue(editor)}"}
