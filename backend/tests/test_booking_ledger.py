from classbook.schemas.schedule import BookingDetail
from classbook.services.booking_ledger import BookingLedger, SqlLedgerBackend


def test_reads_do_not_create_dates():
    ledger = BookingLedger()
    assert ledger.entry_for("2025-01-08") == {}
    assert ledger.cell("2025-01-08", "CSE-301", "09:00-10:00") == (False, None)
    assert ledger.dates() == []


def test_commit_and_tombstone_cells():
    ledger = BookingLedger()
    detail = BookingDetail(batch_name="CS2024A")
    ledger.commit("2025-01-08", "CSE-301", "09:00-10:00", detail)
    ledger.commit("2025-01-08", "CSE-301", "10:00-11:00", None)

    assert ledger.booking_at("2025-01-08", "CSE-301", "09:00-10:00") == detail
    assert ledger.cell("2025-01-08", "CSE-301", "10:00-11:00") == (True, None)
    assert ledger.dates() == ["2025-01-08"]


def test_entry_for_returns_a_copy():
    ledger = BookingLedger()
    ledger.commit("2025-01-08", "CSE-301", "09:00-10:00", BookingDetail(batch_name="CS2024A"))
    snapshot = ledger.entry_for("2025-01-08")
    snapshot["CSE-301"].clear()
    snapshot["CSE-999"] = {}
    assert ledger.booking_at("2025-01-08", "CSE-301", "09:00-10:00") is not None
    assert "CSE-999" not in ledger.entry_for("2025-01-08")


def test_lock_for_is_stable_per_date():
    ledger = BookingLedger()
    assert ledger.lock_for("2025-01-08") is ledger.lock_for("2025-01-08")
    assert ledger.lock_for("2025-01-08") is not ledger.lock_for("2025-01-09")


def test_sql_backend_round_trip(session_factory):
    backend = SqlLedgerBackend(session_factory)
    ledger = BookingLedger.from_backend(backend)
    ledger.commit(
        "2025-01-08",
        "CSE-301",
        "09:00-10:00",
        BookingDetail(batch_name="CS2024A", teacher_name="Dr. Verma", course_name="AI"),
    )
    ledger.commit("2025-01-08", "CSE-302", "10:00-11:00", None)
    ledger.commit("2025-01-08", "CSE-301", "09:00-10:00", BookingDetail(batch_name="CS2024B"))

    restored = BookingLedger.from_backend(SqlLedgerBackend(session_factory))
    assert restored.booking_at("2025-01-08", "CSE-301", "09:00-10:00") == BookingDetail(batch_name="CS2024B")
    assert restored.cell("2025-01-08", "CSE-302", "10:00-11:00") == (True, None)
    assert restored.dates() == ["2025-01-08"]


def test_release_locks_before_drops_idle_past_locks():
    ledger = BookingLedger()
    old = ledger.lock_for("2025-01-06")
    held = ledger.lock_for("2025-01-07")
    current = ledger.lock_for("2025-01-08")

    with held:
        assert ledger.release_locks_before("2025-01-08") == 1

    assert ledger.lock_for("2025-01-07") is held
    assert ledger.lock_for("2025-01-08") is current
    assert ledger.lock_for("2025-01-06") is not old
