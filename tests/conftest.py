import os

TEST_DB_FILE = "test_roster.db"
TEST_DB_URL = f"sqlite:///./{TEST_DB_FILE}"
TEST_TOKEN = "test-token"

# must be set before roster.core.config is imported
os.environ["ROSTER_DATABASE_URL"] = TEST_DB_URL
os.environ["ROSTER_AUTH_TOKEN"] = TEST_TOKEN

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from roster.core.deps import get_submission_source  # noqa: E402
from roster.db.base_class import Base  # noqa: E402
from roster.db.session import SessionLocal, engine  # noqa: E402
from roster.main import app  # noqa: E402
from roster.models.participant import Participant  # noqa: E402
from roster.models.weekly_row import WeeklyRow  # noqa: E402
from roster.schemas.row import Row  # noqa: E402
from roster.services.persistence import PersistenceGateway  # noqa: E402
from tests.helpers import FakeSubmissionSource  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def setup_test_db():
    """Create a fresh schema once for the whole test session."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()
    if os.path.exists(TEST_DB_FILE):
        os.remove(TEST_DB_FILE)


@pytest.fixture(autouse=True)
def clean_tables():
    """Every test starts from empty storage."""
    db = SessionLocal()
    try:
        db.query(WeeklyRow).delete()
        db.query(Participant).delete()
        db.commit()
    finally:
        db.close()
    yield


@pytest.fixture()
def seed_rows():
    """Write rows to storage; call before creating the client so startup loads them."""

    def _seed(rows: list[Row]) -> None:
        PersistenceGateway(SessionLocal).flush(rows)

    return _seed


@pytest.fixture()
def seed_participants():
    def _seed(pairs: list[tuple[str, str]]) -> None:
        db = SessionLocal()
        try:
            db.add_all(Participant(name=name, github=github) for name, github in pairs)
            db.commit()
        finally:
            db.close()

    return _seed


@pytest.fixture()
def source():
    return FakeSubmissionSource()


@pytest.fixture()
def client_factory(source):
    """Builds test clients wired to the fake source. Startup (and the table load) runs on enter."""
    app.dependency_overrides[get_submission_source] = lambda: source
    yield lambda: TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def client(client_factory):
    with client_factory() as c:
        yield c


@pytest.fixture()
def auth():
    return {"Authorization": TEST_TOKEN}
