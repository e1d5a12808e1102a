import pytest
from sqlalchemy import select

from classbook.api.deps import get_schedule_store
from classbook.core.config import Settings
from classbook.main import app
from classbook.models.ledger_entry import LedgerEntry
from classbook.services.booking_ledger import SqlLedgerBackend
from classbook.services.schedule_store import build_schedule_store


@pytest.fixture
def persistent_settings():
    return Settings(persist_bookings=True, regular_classes_path=None)


def test_bookings_survive_a_restart(session_factory, persistent_settings, next_weekday):
    wednesday = next_weekday(3).isoformat()
    store = build_schedule_store(persistent_settings, session_factory=session_factory)
    store.booking_service.book(date=wednesday, room="CSE-301", slot="09:00-10:00", batch_name="CS2024A")

    with session_factory() as db:
        rows = db.execute(select(LedgerEntry)).scalars().all()
    assert [(row.booking_date, row.room_number, row.time_slot, row.batch_name) for row in rows] == [
        (wednesday, "CSE-301", "09:00-10:00", "CS2024A")
    ]

    restarted = build_schedule_store(persistent_settings, session_factory=session_factory)
    assert restarted.ledger.booking_at(wednesday, "CSE-301", "09:00-10:00").batch_name == "CS2024A"
    assert restarted.resolver.effective_schedule(wednesday)["CSE-301"]["09:00-10:00"].batch_name == "CS2024A"


def test_booking_endpoint_writes_through(client, session_factory, persistent_settings, next_weekday):
    store = build_schedule_store(persistent_settings, session_factory=session_factory)
    app.dependency_overrides[get_schedule_store] = lambda: store
    wednesday = next_weekday(3).isoformat()

    response = client.post(
        "/api/schedule",
        json={"roomNumber": "CSE-302", "timeSlot": "10:00-11:00", "batchName": "DS2024A", "date": wednesday},
    )
    assert response.status_code == 200

    with session_factory() as db:
        entry = db.execute(select(LedgerEntry).where(LedgerEntry.room_number == "CSE-302")).scalar_one()
    assert entry.booking_date == wednesday
    assert entry.batch_name == "DS2024A"


def test_storage_failure_leaves_memory_unchanged(
    client, session_factory, persistent_settings, next_weekday, monkeypatch
):
    store = build_schedule_store(persistent_settings, session_factory=session_factory)
    app.dependency_overrides[get_schedule_store] = lambda: store
    wednesday = next_weekday(3).isoformat()

    def failing_save(self, date, room, slot, detail):
        raise RuntimeError("database is locked")

    monkeypatch.setattr(SqlLedgerBackend, "save", failing_save)
    response = client.post(
        "/api/schedule",
        json={"roomNumber": "CSE-302", "timeSlot": "10:00-11:00", "batchName": "DS2024A", "date": wednesday},
    )
    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
    assert store.ledger.booking_at(wednesday, "CSE-302", "10:00-11:00") is None
    assert store.ledger.dates() == []
