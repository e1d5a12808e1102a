import os
from datetime import date, timedelta

# Keep the app lifespan off the on-disk database during tests.
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite://")
os.environ.setdefault("PERSIST_BOOKINGS", "false")
os.environ.setdefault("SEED_SAMPLE_DATA", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from classbook.api.deps import get_db, get_schedule_store
from classbook.db.base import Base
from classbook.main import app
from classbook.services.schedule_store import create_schedule_store


@pytest.fixture()
def session_factory():
    engine = create_engine(
        "sqlite+pysqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture()
def schedule_store():
    return create_schedule_store()


@pytest.fixture()
def client(session_factory, schedule_store):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_schedule_store] = lambda: schedule_store

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture()
def next_weekday():
    """Return the next date strictly after today with the given ISO weekday."""

    def _next(isoweekday: int, weeks_ahead: int = 1) -> date:
        today = date.today()
        delta = (isoweekday - today.isoweekday()) % 7 or 7
        return today + timedelta(days=delta + 7 * (weeks_ahead - 1))

    return _next
