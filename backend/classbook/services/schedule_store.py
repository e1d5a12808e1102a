from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
import logging

from sqlalchemy.orm import Session

from classbook.core.config import Settings
from classbook.services.booking_ledger import BookingLedger, SqlLedgerBackend
from classbook.services.booking_service import BookingService
from classbook.services.floor_plan import FloorPlan
from classbook.services.recurring_timetable import RecurringTimetable, load_recurring_timetable
from classbook.services.schedule_resolver import ScheduleResolver
from classbook.services.staff_rooms import StaffRoomPolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScheduleStore:
    """Everything the schedule routes need, wired once per process."""

    timetable: RecurringTimetable
    staff_rooms: StaffRoomPolicy
    ledger: BookingLedger
    resolver: ScheduleResolver
    booking_service: BookingService
    floor_plan: FloorPlan


def create_schedule_store(
    *,
    timetable: RecurringTimetable | None = None,
    staff_rooms: StaffRoomPolicy | None = None,
    ledger: BookingLedger | None = None,
    floor_plan: FloorPlan | None = None,
    today: Callable[[], date] = date.today,
) -> ScheduleStore:
    timetable = timetable or RecurringTimetable.default()
    staff_rooms = staff_rooms or StaffRoomPolicy()
    ledger = ledger if ledger is not None else BookingLedger()
    resolver = ScheduleResolver(recurring=timetable, ledger=ledger, staff_rooms=staff_rooms)
    return ScheduleStore(
        timetable=timetable,
        staff_rooms=staff_rooms,
        ledger=ledger,
        resolver=resolver,
        booking_service=BookingService(resolver=resolver, ledger=ledger, staff_rooms=staff_rooms, today=today),
        floor_plan=floor_plan or FloorPlan(),
    )


def build_schedule_store(settings: Settings, *, session_factory: Callable[[], Session] | None = None) -> ScheduleStore:
    timetable = load_recurring_timetable(settings.regular_classes_path)
    staff_rooms = StaffRoomPolicy(settings.staff_rooms, label=settings.staff_room_label)
    persistent = settings.persist_bookings and session_factory is not None
    if persistent:
        ledger = BookingLedger.from_backend(SqlLedgerBackend(session_factory))
    else:
        ledger = BookingLedger()
    floor_plan = FloorPlan(
        prefix=settings.building_prefix,
        floor_count=settings.floor_count,
        rooms_per_floor=settings.rooms_per_floor,
    )
    logger.info(
        "Schedule store ready: %d regular classes, %d staff rooms, persistence %s",
        timetable.class_count(),
        len(staff_rooms.rooms),
        "on" if persistent else "off",
    )
    return create_schedule_store(timetable=timetable, staff_rooms=staff_rooms, ledger=ledger, floor_plan=floor_plan)
