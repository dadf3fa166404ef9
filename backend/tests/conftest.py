import os

# Keep the app's own engine off disk; tests use test_engine below
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402

from toornament_sync.database import get_session  # noqa: E402
from toornament_sync.main import app  # noqa: E402

from tests.payloads import make_match, make_opponent, make_stage, participant  # noqa: E402

TEST_DATABASE_URL = "sqlite:///:memory:"

# ============================================================================
# Test Database Setup with StaticPool
# ============================================================================
# 1. Use sqlite:///:memory: with StaticPool so ALL sessions share same DB
# 2. check_same_thread=False required for TestClient/threaded access
# 3. All models MUST be imported before create_all() (see session_fixture)
# 4. App dependency overridden to use test_engine (see client_fixture)
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


def override_get_session():
    """Override session to use test engine"""
    with Session(test_engine) as session:
        yield session


@pytest.fixture(name="session", scope="function")
def session_fixture():
    """Provide a test database session on fresh tables"""
    from toornament_sync.models.bracket_match import BracketMatch  # noqa: F401
    from toornament_sync.models.bracket_participant import BracketParticipant  # noqa: F401
    from toornament_sync.models.bracket_stage import BracketStage  # noqa: F401
    from toornament_sync.models.id_mapping import ToornamentIdMapping  # noqa: F401

    SQLModel.metadata.drop_all(test_engine)
    SQLModel.metadata.create_all(test_engine)

    with Session(test_engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(session: Session):
    """Provide a test client with overridden database session

    Override MUST be set BEFORE TestClient() and stay in place for the
    entire duration, so the app never uses its own engine.
    """
    app.dependency_overrides[get_session] = override_get_session

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def four_player_bracket():
    """Two semi-finals feeding a final (single elimination, 4 players)."""
    stages = [make_stage("s1", size=4)]
    matches = [
        make_match(
            "sf1",
            [
                make_opponent(participant("p1", "Alice"), score=2, result="win"),
                make_opponent(participant("p4", "Dave"), score=0, result="loss", number=2),
            ],
            number=1,
            status="completed",
        ),
        make_match(
            "sf2",
            [
                make_opponent(participant("p2", "Bob"), score=1, result="loss"),
                make_opponent(participant("p3", "Carol"), score=2, result="win", number=2),
            ],
            number=2,
            status="completed",
        ),
        make_match(
            "final",
            [
                make_opponent(participant("p1", "Alice"), source="sf1"),
                make_opponent(participant("p3", "Carol"), source="sf2", number=2),
            ],
            number=1,
            round_id="r2",
            status="running",
        ),
    ]
    return stages, matches
