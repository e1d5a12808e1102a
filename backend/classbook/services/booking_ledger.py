from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
import logging
from threading import Lock

from sqlalchemy import select
from sqlalchemy.orm import Session

from classbook.models.ledger_entry import LedgerEntry
from classbook.schemas.schedule import BookingDetail, DailySchedule

logger = logging.getLogger(__name__)

LedgerData = dict[str, DailySchedule]

_ABSENT = object()


class SqlLedgerBackend:
    """Load/save round trip of ledger cells through SQLAlchemy."""

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def load(self) -> LedgerData:
        data: LedgerData = {}
        with self._session_factory() as db:
            for entry in db.execute(select(LedgerEntry)).scalars():
                detail = None
                if entry.batch_name is not None:
                    detail = BookingDetail(
                        batch_name=entry.batch_name,
                        teacher_name=entry.teacher_name,
                        course_name=entry.course_name,
                    )
                data.setdefault(entry.booking_date, {}).setdefault(entry.room_number, {})[entry.time_slot] = detail
        return data

    def save(self, date: str, room: str, slot: str, detail: BookingDetail | None) -> None:
        with self._session_factory() as db:
            entry = db.execute(
                select(LedgerEntry).where(
                    LedgerEntry.booking_date == date,
                    LedgerEntry.room_number == room,
                    LedgerEntry.time_slot == slot,
                )
            ).scalar_one_or_none()
            if entry is None:
                entry = LedgerEntry(booking_date=date, room_number=room, time_slot=slot)
                db.add(entry)
            entry.batch_name = detail.batch_name if detail is not None else None
            entry.teacher_name = detail.teacher_name if detail is not None else None
            entry.course_name = detail.course_name if detail is not None else None
            db.commit()


class BookingLedger:
    """Date-keyed explicit cells layered over the weekly timetable.

    A ``None`` value is a tombstone: the cell is explicitly free and hides any
    recurring class. An absent key defers to the timetable. Reads never
    create dates; only :meth:`commit` does.
    """

    def __init__(self, data: LedgerData | None = None, *, backend: SqlLedgerBackend | None = None) -> None:
        self._dates: LedgerData = {
            date: {room: dict(slots) for room, slots in rooms.items()} for date, rooms in (data or {}).items()
        }
        self._backend = backend
        self._locks: defaultdict[str, Lock] = defaultdict(Lock)
        self._locks_guard = Lock()
        self._write_lock = Lock()

    @classmethod
    def from_backend(cls, backend: SqlLedgerBackend) -> "BookingLedger":
        data = backend.load()
        logger.info("Restored %d ledger date(s) from storage", len(data))
        return cls(data, backend=backend)

    def entry_for(self, date: str) -> DailySchedule:
        rooms = self._dates.get(date)
        if rooms is None:
            return {}
        return {room: dict(slots) for room, slots in rooms.items()}

    def cell(self, date: str, room: str, slot: str) -> tuple[bool, BookingDetail | None]:
        value = self._dates.get(date, {}).get(room, {}).get(slot, _ABSENT)
        if value is _ABSENT:
            return False, None
        return True, value

    def booking_at(self, date: str, room: str, slot: str) -> BookingDetail | None:
        return self._dates.get(date, {}).get(room, {}).get(slot)

    def commit(self, date: str, room: str, slot: str, detail: BookingDetail | None) -> None:
        if self._backend is not None:
            self._backend.save(date, room, slot, detail)
        # Copy-on-write so lock-free readers never iterate a dict mid-mutation.
        with self._write_lock:
            rooms = dict(self._dates.get(date, {}))
            slots = dict(rooms.get(room, {}))
            slots[slot] = detail
            rooms[room] = slots
            self._dates = {**self._dates, date: rooms}

    def lock_for(self, date: str) -> Lock:
        with self._locks_guard:
            return self._locks[date]

    def release_locks_before(self, date: str) -> int:
        """Drop idle locks for dates earlier than ``date``.

        Bookings for past dates are rejected before a lock is taken, so these
        entries are never contended again.
        """
        with self._locks_guard:
            stale = [key for key, lock in self._locks.items() if key < date and not lock.locked()]
            for key in stale:
                del self._locks[key]
        return len(stale)

    def dates(self) -> list[str]:
        return sorted(self._dates)
