"""
Main fixtures for the order notifier tests
"""
import sys
from pathlib import Path
from typing import Generator, List

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

# Make the project root importable
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import order_notifier.models  # noqa: F401,E402  registers the tables on Base
from order_notifier.database import Base  # noqa: E402
from order_notifier.events.core.event import Event  # noqa: E402
from order_notifier.events.core.event_bus import EventBus  # noqa: E402
from order_notifier.events.runtime import set_event_bus  # noqa: E402
from order_notifier.main import app  # noqa: E402
from order_notifier.schemas.order_snapshot_schema import OrderSnapshot  # noqa: E402
from tests.helpers.builders import FakeSnapshotReader, RecordingTransport, make_snapshot  # noqa: E402


# ============================================================================
# Environment isolation
# ============================================================================

@pytest.fixture(autouse=True)
def clear_slack_environment(monkeypatch):
    """Keep developer environment variables out of the settings under test"""
    for variable in (
        "SLACK_NOTIFICATIONS_WEBHOOK_URL",
        "SLACK_NOTIFICATIONS_TIMEOUT_SECONDS",
        "SLACK_NOTIFICATIONS_NOTIFY_ON_ORDER_CREATED",
    ):
        monkeypatch.delenv(variable, raising=False)


# ============================================================================
# Database Test Setup
# ============================================================================

# SQLite in-memory for the tests
test_engine = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """Isolated database session; tables are dropped after each test"""
    Base.metadata.create_all(bind=test_engine)
    session = TestSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


# ============================================================================
# Orders and webhook
# ============================================================================

@pytest.fixture
def sample_snapshot() -> OrderSnapshot:
    return make_snapshot()


@pytest.fixture
def snapshot_reader(sample_snapshot) -> FakeSnapshotReader:
    return FakeSnapshotReader([sample_snapshot])


@pytest.fixture
def slack_transport() -> RecordingTransport:
    return RecordingTransport()


# ============================================================================
# EventBus Spy
# ============================================================================

class EventBusSpy(EventBus):
    """EventBus recording every published event"""

    def __init__(self):
        super().__init__()
        self.published_events: List[Event] = []

    async def publish(self, event: Event) -> None:
        self.published_events.append(event)
        await super().publish(event)

    def get_events_by_type(self, event_type: str) -> List[Event]:
        return [e for e in self.published_events if e.event_type == event_type]


@pytest.fixture(scope="function")
def event_bus_spy() -> Generator[EventBusSpy, None, None]:
    spy = EventBusSpy()
    set_event_bus(spy)
    yield spy
    set_event_bus(None)


# ============================================================================
# HTTP Clients
# ============================================================================

@pytest.fixture
def client(event_bus_spy) -> TestClient:
    """Synchronous client; the lifespan does not run so the spy bus is used"""
    return TestClient(app)


@pytest_asyncio.fixture
async def async_client(event_bus_spy):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
