from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
import re
from typing import Literal

from classbook.schemas.schedule import BookingDetail, DailySchedule, RoomSlots
from classbook.services.booking_ledger import BookingLedger
from classbook.services.recurring_timetable import RecurringTimetable
from classbook.services.staff_rooms import StaffRoomPolicy
from classbook.services.time_slots import TIME_SLOTS, slot_index

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}(?:[T ].*)?$")

SlotSource = Literal["staff", "ad_hoc", "recurring", "free"]


def parse_schedule_date(value: str | date) -> date:
    """Accept ``YYYY-MM-DD`` or a full ISO timestamp; only the date part is used."""
    if isinstance(value, date):
        return value
    text = value.strip() if isinstance(value, str) else ""
    if not DATE_PATTERN.match(text):
        raise ValueError(f"Invalid date: {value!r}")
    return date.fromisoformat(text[:10])


def is_weekend(day: date) -> bool:
    return day.isoweekday() >= 6


@dataclass(frozen=True)
class SlotStatus:
    room: str
    slot: str
    occupied: bool
    source: SlotSource
    booking: BookingDetail | None
    is_staff_room: bool


@dataclass(frozen=True)
class UpcomingBooking:
    date: str
    room: str
    slot: str
    booking: BookingDetail
    source: Literal["ad_hoc", "recurring"]


class ScheduleResolver:
    def __init__(
        self,
        *,
        recurring: RecurringTimetable,
        ledger: BookingLedger,
        staff_rooms: StaffRoomPolicy,
    ) -> None:
        self.recurring = recurring
        self.ledger = ledger
        self.staff_rooms = staff_rooms

    def effective_schedule(self, day: str | date) -> DailySchedule:
        resolved = parse_schedule_date(day)
        key = resolved.isoformat()
        merged = self.ledger.entry_for(key)
        if is_weekend(resolved):
            return merged

        for room, slots in self.recurring.classes_for(resolved.isoweekday()).items():
            room_slots = merged.setdefault(room, {})
            for slot, detail in slots.items():
                if slot not in room_slots:
                    room_slots[slot] = detail
        return merged

    def has_recurring_conflict(self, day: str | date, room: str, slot: str) -> bool:
        resolved = parse_schedule_date(day)
        if is_weekend(resolved):
            return False
        return self.recurring.has_class(resolved.isoweekday(), room, slot)

    def room_schedule(self, day: str | date, room: str) -> RoomSlots:
        if self.staff_rooms.is_staff_room(room):
            return {slot: self.staff_rooms.synthetic_booking() for slot in TIME_SLOTS}
        room_slots = self.effective_schedule(day).get(room, {})
        return {slot: room_slots.get(slot) for slot in TIME_SLOTS}

    def slot_status(self, day: str | date, room: str, slot: str) -> SlotStatus:
        if self.staff_rooms.is_staff_room(room):
            return SlotStatus(
                room=room,
                slot=slot,
                occupied=True,
                source="staff",
                booking=self.staff_rooms.synthetic_booking(),
                is_staff_room=True,
            )

        resolved = parse_schedule_date(day)
        explicit, value = self.ledger.cell(resolved.isoformat(), room, slot)
        if explicit:
            source: SlotSource = "ad_hoc" if value is not None else "free"
            return SlotStatus(room=room, slot=slot, occupied=value is not None, source=source, booking=value, is_staff_room=False)

        if not is_weekend(resolved):
            recurring = self.recurring.classes_for(resolved.isoweekday()).get(room, {}).get(slot)
            if recurring is not None:
                return SlotStatus(
                    room=room, slot=slot, occupied=True, source="recurring", booking=recurring, is_staff_room=False
                )
        return SlotStatus(room=room, slot=slot, occupied=False, source="free", booking=None, is_staff_room=False)

    def is_room_free(self, day: str | date, room: str, slot: str) -> bool:
        return not self.slot_status(day, room, slot).occupied

    def upcoming_bookings(self, start: str | date, *, weekdays: int = 7, limit: int = 10) -> list[UpcomingBooking]:
        current = parse_schedule_date(start)
        found: list[UpcomingBooking] = []
        visited = 0
        while visited < weekdays:
            if not is_weekend(current):
                visited += 1
                key = current.isoformat()
                for room, slots in self.effective_schedule(current).items():
                    if self.staff_rooms.is_staff_room(room):
                        continue
                    for slot, detail in slots.items():
                        if detail is None:
                            continue
                        booked = self.ledger.booking_at(key, room, slot)
                        found.append(
                            UpcomingBooking(
                                date=key,
                                room=room,
                                slot=slot,
                                booking=detail,
                                source="ad_hoc" if booked is not None else "recurring",
                            )
                        )
            current += timedelta(days=1)

        found.sort(key=lambda item: (item.date, slot_index(item.slot), item.room))
        return found[: max(0, limit)]
