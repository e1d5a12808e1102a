from __future__ import annotations

from datetime import datetime, time

TIME_SLOTS: tuple[str, ...] = (
    "09:00-10:00",
    "10:00-11:00",
    "11:00-12:00",
    "12:00-13:00",
    "14:00-15:00",
    "15:00-16:00",
    "16:00-17:00",
)

_SLOT_POSITIONS = {slot: index for index, slot in enumerate(TIME_SLOTS)}


def is_time_slot(value: object) -> bool:
    return isinstance(value, str) and value in _SLOT_POSITIONS


def slot_index(slot: str) -> int:
    try:
        return _SLOT_POSITIONS[slot]
    except KeyError:
        raise ValueError(f"Unknown time slot: {slot}") from None


def compare_slots(first: str, second: str) -> int:
    return slot_index(first) - slot_index(second)


def _parse_clock(value: str) -> time:
    hours, minutes = value.split(":")
    return time(int(hours), int(minutes))


def slot_bounds(slot: str) -> tuple[time, time]:
    slot_index(slot)
    start, end = slot.split("-")
    return _parse_clock(start), _parse_clock(end)


def current_slot(now: datetime | time) -> str:
    """Map a wall-clock time to a catalog slot.

    Windows include their start and exclude their end. Times outside every
    window resolve to the slot that started most recently, so the lunch gap
    maps to ``12:00-13:00`` and evenings map to the last slot. Times before
    the first window map to the first slot.
    """
    moment = now.time() if isinstance(now, datetime) else now
    moment = moment.replace(second=0, microsecond=0, tzinfo=None)

    resolved = TIME_SLOTS[0]
    for slot in TIME_SLOTS:
        start, end = slot_bounds(slot)
        if start <= moment < end:
            return slot
        if start <= moment:
            resolved = slot
    return resolved
