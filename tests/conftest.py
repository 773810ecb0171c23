import os
import tempfile

# Must be set before app.config is imported anywhere
_db_dir = tempfile.mkdtemp(prefix="roster-test-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_db_dir, 'test.db')}"
os.environ["DATABASE_INIT_STRICT"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.database import build_engine, get_db
from app.main import app

UNREACHABLE_DATABASE_URL = f"sqlite:///{os.path.join(_db_dir, 'missing', 'nowhere.db')}"


@pytest.fixture(scope="session")
def client():
    # Entering the context runs the startup hook, which creates and seeds the DB
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def broken_engine():
    engine = build_engine(UNREACHABLE_DATABASE_URL)
    yield engine
    engine.dispose()


@pytest.fixture()
def broken_client(client, broken_engine):
    session_local = sessionmaker(autocommit=False, autoflush=False, bind=broken_engine)

    def override_get_db():
        db = session_local()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield client
    app.dependency_overrides.clear()


@pytest.fixture()
def fresh_engine(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'fresh.db'}")
    yield engine
    engine.dispose()
