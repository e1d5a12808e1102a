from datetime import date

import pytest

from classbook.schemas.schedule import BookingDetail
from classbook.services.booking_ledger import BookingLedger
from classbook.services.recurring_timetable import RecurringTimetable
from classbook.services.schedule_resolver import ScheduleResolver, is_weekend, parse_schedule_date
from classbook.services.staff_rooms import StaffRoomPolicy

MONDAY = "2025-01-06"
WEDNESDAY = "2025-01-08"
SATURDAY = "2025-01-11"


@pytest.fixture
def ledger():
    return BookingLedger()


@pytest.fixture
def resolver(ledger):
    return ScheduleResolver(recurring=RecurringTimetable.default(), ledger=ledger, staff_rooms=StaffRoomPolicy())


def test_parse_schedule_date():
    assert parse_schedule_date("2025-01-08") == date(2025, 1, 8)
    assert parse_schedule_date("2025-01-08T10:30:00.000Z") == date(2025, 1, 8)
    assert parse_schedule_date(date(2025, 1, 8)) == date(2025, 1, 8)
    for bad in ("", "08-01-2025", "2025-13-01", "tomorrow"):
        with pytest.raises(ValueError):
            parse_schedule_date(bad)


def test_is_weekend():
    assert is_weekend(date(2025, 1, 11))
    assert is_weekend(date(2025, 1, 12))
    assert not is_weekend(date(2025, 1, 10))


def test_weekday_merges_recurring_classes(resolver):
    schedule = resolver.effective_schedule(MONDAY)
    assert schedule["CSE-101"]["09:00-10:00"].batch_name == "CS2024A"
    assert schedule["CSE-201"]["16:00-17:00"].course_name == "SE101"


def test_weekend_has_no_recurring_classes(resolver, ledger):
    assert resolver.effective_schedule(SATURDAY) == {}
    ledger.commit(SATURDAY, "CSE-301", "09:00-10:00", BookingDetail(batch_name="Weekend"))
    assert resolver.effective_schedule(SATURDAY) == {
        "CSE-301": {"09:00-10:00": BookingDetail(batch_name="Weekend")}
    }


def test_explicit_entries_win_over_recurring(resolver, ledger):
    override = BookingDetail(batch_name="Override")
    ledger.commit(MONDAY, "CSE-101", "09:00-10:00", override)
    ledger.commit(MONDAY, "CSE-101", "10:00-11:00", None)

    schedule = resolver.effective_schedule(MONDAY)
    assert schedule["CSE-101"]["09:00-10:00"] == override
    assert schedule["CSE-101"]["10:00-11:00"] is None
    assert not resolver.slot_status(MONDAY, "CSE-101", "10:00-11:00").occupied


def test_reads_are_idempotent_and_pure(resolver, ledger):
    first = resolver.effective_schedule(WEDNESDAY)
    first["CSE-301"] = {}
    assert resolver.effective_schedule(WEDNESDAY) == resolver.effective_schedule(WEDNESDAY)
    assert "CSE-301" not in resolver.effective_schedule(WEDNESDAY)
    assert ledger.dates() == []


def test_recurring_conflict_only_on_weekdays(resolver):
    assert resolver.has_recurring_conflict(MONDAY, "CSE-101", "09:00-10:00")
    assert not resolver.has_recurring_conflict(MONDAY, "CSE-101", "11:00-12:00")
    assert not resolver.has_recurring_conflict("2025-01-13T08:00:00", "CSE-101", "12:00-13:00")


def test_room_schedule_lists_every_slot_in_order(resolver):
    slots = resolver.room_schedule(MONDAY, "CSE-101")
    assert list(slots) == [
        "09:00-10:00",
        "10:00-11:00",
        "11:00-12:00",
        "12:00-13:00",
        "14:00-15:00",
        "15:00-16:00",
        "16:00-17:00",
    ]
    assert slots["09:00-10:00"].batch_name == "CS2024A"
    assert slots["11:00-12:00"] is None


def test_slot_status_sources(resolver, ledger):
    ledger.commit(WEDNESDAY, "CSE-301", "09:00-10:00", BookingDetail(batch_name="AdHoc"))

    staff = resolver.slot_status(WEDNESDAY, "CSE-104", "16:00-17:00")
    assert staff.occupied and staff.source == "staff" and staff.is_staff_room
    assert staff.booking.batch_name == "Teachers Department CSE-AI"

    assert resolver.slot_status(WEDNESDAY, "CSE-301", "09:00-10:00").source == "ad_hoc"
    assert resolver.slot_status(MONDAY, "CSE-101", "09:00-10:00").source == "recurring"
    free = resolver.slot_status(WEDNESDAY, "CSE-305", "09:00-10:00")
    assert free.source == "free" and not free.occupied
    assert resolver.is_room_free(WEDNESDAY, "CSE-305", "09:00-10:00")
    assert not resolver.is_room_free(WEDNESDAY, "CSE-103", "09:00-10:00")


def test_upcoming_bookings_are_sorted_and_limited(resolver, ledger):
    ledger.commit(WEDNESDAY, "CSE-301", "09:00-10:00", BookingDetail(batch_name="AdHoc"))

    upcoming = resolver.upcoming_bookings(MONDAY, weekdays=5, limit=100)
    keys = [(item.date, item.slot, item.room) for item in upcoming]
    assert upcoming[0].date == MONDAY
    assert all(not is_weekend(parse_schedule_date(item.date)) for item in upcoming)
    assert ("2025-01-08", "09:00-10:00", "CSE-301") in keys
    adhoc = next(item for item in upcoming if item.room == "CSE-301")
    assert adhoc.source == "ad_hoc"
    assert {item.source for item in upcoming} == {"ad_hoc", "recurring"}

    assert len(resolver.upcoming_bookings(MONDAY, weekdays=5, limit=3)) == 3


def test_upcoming_skips_weekends(resolver):
    upcoming = resolver.upcoming_bookings(SATURDAY, weekdays=1, limit=100)
    assert upcoming
    assert {item.date for item in upcoming} == {"2025-01-13"}


def test_staff_room_is_occupied_in_every_slot(resolver):
    # CSE-104 carries a recurring class on Wednesday afternoon in the built-in week.
    slots = resolver.room_schedule(WEDNESDAY, "CSE-104")
    assert list(slots) == list(resolver.room_schedule(WEDNESDAY, "CSE-301"))
    assert all(detail is not None for detail in slots.values())
    assert {detail.batch_name for detail in slots.values()} == {"Teachers Department CSE-AI"}
    for slot in slots:
        assert resolver.slot_status(WEDNESDAY, "CSE-104", slot).booking == slots[slot]


def test_upcoming_bookings_exclude_staff_rooms(resolver):
    upcoming = resolver.upcoming_bookings(MONDAY, weekdays=5, limit=500)
    staff_rooms = resolver.staff_rooms.rooms
    assert not [item for item in upcoming if item.room in staff_rooms]
    assert ("CSE-103", "14:00-15:00") not in {(item.room, item.slot) for item in upcoming if item.date == MONDAY}
