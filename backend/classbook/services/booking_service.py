from __future__ import annotations

from collections.abc import Callable
from datetime import date
import logging

from pydantic import ValidationError as PydanticValidationError

from classbook.core.exceptions import (
    AlreadyBookedConflict,
    PastOrWeekendError,
    RecurringConflict,
    StaffRoomConflict,
    ValidationError,
)
from classbook.schemas.schedule import BookingDetail
from classbook.services.booking_ledger import BookingLedger
from classbook.services.schedule_resolver import ScheduleResolver, is_weekend, parse_schedule_date
from classbook.services.staff_rooms import StaffRoomPolicy
from classbook.services.time_slots import is_time_slot

logger = logging.getLogger(__name__)


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    trimmed = value.strip()
    return trimmed or None


class BookingService:
    """Sole writer of the booking ledger.

    Checks run in a fixed order because callers branch on the error kind:
    input shape, date policy, staff room, recurring class, existing booking.
    """

    def __init__(
        self,
        *,
        resolver: ScheduleResolver,
        ledger: BookingLedger,
        staff_rooms: StaffRoomPolicy,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.resolver = resolver
        self.ledger = ledger
        self.staff_rooms = staff_rooms
        self._today = today

    def book(
        self,
        *,
        date: str | None,
        room: str | None,
        slot: str | None,
        batch_name: str | None,
        teacher_name: str | None = None,
        course_name: str | None = None,
    ) -> BookingDetail:
        room = _clean(room)
        slot = _clean(slot)
        batch_name = _clean(batch_name)
        if not date or not room or not slot or not batch_name:
            raise ValidationError("Missing required fields")
        try:
            booking_day = parse_schedule_date(date)
        except ValueError:
            raise ValidationError("Invalid booking date format", details={"date": date}) from None
        if not is_time_slot(slot):
            raise ValidationError("Invalid time slot", details={"timeSlot": slot})
        try:
            detail = BookingDetail(
                batch_name=batch_name,
                teacher_name=_clean(teacher_name),
                course_name=_clean(course_name),
            )
        except PydanticValidationError as exc:
            errors = exc.errors(include_url=False, include_context=False)
            raise ValidationError("Invalid booking details", details={"errors": errors}) from None

        if booking_day < self._today() or is_weekend(booking_day):
            raise PastOrWeekendError(details={"date": booking_day.isoformat()})

        if self.staff_rooms.is_staff_room(room):
            raise StaffRoomConflict(room, self.staff_rooms.label)

        if self.resolver.has_recurring_conflict(booking_day, room, slot):
            raise RecurringConflict(room, slot)

        self.ledger.release_locks_before(self._today().isoformat())
        key = booking_day.isoformat()
        with self.ledger.lock_for(key):
            if self.ledger.booking_at(key, room, slot) is not None:
                raise AlreadyBookedConflict(room, slot, key)
            self.ledger.commit(key, room, slot, detail)

        logger.info("Booked %s %s on %s for %s", room, slot, key, batch_name)
        return detail
