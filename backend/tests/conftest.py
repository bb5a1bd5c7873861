import os
import tempfile
from collections.abc import Generator

TEST_DB_DIR = tempfile.mkdtemp(prefix="screamscore-test-")
TEST_DATABASE_URL = f"sqlite:///{os.path.join(TEST_DB_DIR, 'test.db')}"
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ["ADMIN_TOKEN"] = "test-admin-token"
os.environ["TMDB_KEY"] = "test-tmdb-key"
os.environ["OMDB_KEY"] = "test-omdb-key"

import pytest  # noqa: E402
from alembic import command  # noqa: E402
from alembic.config import Config  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.engine import Engine  # noqa: E402
from sqlmodel import Session  # noqa: E402

from screamscore.api.deps import get_db  # noqa: E402
from screamscore.core.db import init_db  # noqa: E402
from screamscore.main import app  # noqa: E402

from .fixtures.factories import *  # noqa: E402, F403

ALEMBIC_CFG_PATH = os.path.join(os.path.dirname(__file__), "..", "alembic.ini")


@pytest.fixture(scope="session", autouse=True)
def create_test_database() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
    )

    alembic_cfg = Config(ALEMBIC_CFG_PATH)
    alembic_cfg.set_main_option("sqlalchemy.url", TEST_DATABASE_URL)
    command.upgrade(alembic_cfg, "head")

    with Session(engine) as session:
        init_db(session)

    yield engine

    engine.dispose()


@pytest.fixture(scope="function", autouse=True)
def db_transaction(create_test_database: Engine) -> Generator[Session, None, None]:
    connection = create_test_database.connect()
    transaction = connection.begin()

    session = Session(bind=connection)

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db

    yield session

    session.close()
    transaction.rollback()
    connection.close()
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c


@pytest.fixture(scope="function")
def admin_headers() -> dict[str, str]:
    return {"X-Admin-Token": "test-admin-token"}
