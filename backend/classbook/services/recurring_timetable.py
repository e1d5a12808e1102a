from __future__ import annotations

from collections.abc import Mapping
import json
import logging
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from classbook.schemas.schedule import BookingDetail
from classbook.services.time_slots import is_time_slot, slot_index

logger = logging.getLogger(__name__)

SCHOOL_DAYS = (1, 2, 3, 4, 5)

DAY_NAME_MAP = {
    "monday": 1,
    "mon": 1,
    "tuesday": 2,
    "tue": 2,
    "wednesday": 3,
    "wed": 3,
    "thursday": 4,
    "thu": 4,
    "friday": 5,
    "fri": 5,
}

WeekdayTimetable = dict[int, dict[str, dict[str, BookingDetail]]]

# Standard department week, ISO weekday (1 = Monday) -> room -> slot -> class.
DEFAULT_REGULAR_CLASSES: dict[int, dict[str, dict[str, dict[str, str]]]] = {
    1: {
        "CSE-101": {
            "09:00-10:00": {"batchName": "CS2024A", "courseName": "CS101"},
            "10:00-11:00": {"batchName": "CS2024B", "courseName": "CS201"},
        },
        "CSE-102": {"11:00-12:00": {"batchName": "DS2024A", "courseName": "DS201"}},
        "CSE-103": {"14:00-15:00": {"batchName": "MATH2024A", "courseName": "MATH101"}},
        "CSE-104": {"15:00-16:00": {"batchName": "WEB2024A", "courseName": "WEB101"}},
        "CSE-201": {"16:00-17:00": {"batchName": "SE2024A", "courseName": "SE101"}},
    },
    2: {
        "CSE-101": {"11:00-12:00": {"batchName": "CS2024C", "courseName": "CS301"}},
        "CSE-102": {"09:00-10:00": {"batchName": "MATH2024A", "courseName": "STAT201"}},
        "CSE-201": {
            "14:00-15:00": {"batchName": "AI2024A", "courseName": "AI101"},
            "15:00-16:00": {"batchName": "AI2024A", "courseName": "ML201"},
        },
        "CSE-202": {"10:00-11:00": {"batchName": "WEB2024B", "courseName": "WEB201"}},
    },
    3: {
        "CSE-103": {
            "09:00-10:00": {"batchName": "DS2024B", "courseName": "DS101"},
            "10:00-11:00": {"batchName": "DS2024B", "courseName": "DS201"},
        },
        "CSE-104": {"14:00-15:00": {"batchName": "SE2024A", "courseName": "SE201"}},
        "CSE-203": {"15:00-16:00": {"batchName": "CSEC2024A", "courseName": "CSEC201"}},
    },
    4: {
        "CSE-101": {"14:00-15:00": {"batchName": "CS2024A", "courseName": "DB201"}},
        "CSE-102": {"15:00-16:00": {"batchName": "CS2024C", "courseName": "CSEC101"}},
        "CSE-201": {"09:00-10:00": {"batchName": "AI2024B", "courseName": "AI301"}},
        "CSE-202": {"11:00-12:00": {"batchName": "WEB2024A", "courseName": "WEB301"}},
    },
    5: {
        "CSE-101": {"09:00-10:00": {"batchName": "CS2024B", "courseName": "ALGO201"}},
        "CSE-103": {"10:00-11:00": {"batchName": "MATH2024B", "courseName": "MATH101"}},
        "CSE-104": {"11:00-12:00": {"batchName": "WEB2024A", "courseName": "WEB201"}},
        "CSE-201": {"14:00-15:00": {"batchName": "DB2024A", "courseName": "DB301"}},
        "CSE-202": {"15:00-16:00": {"batchName": "DB2024A", "courseName": "DB201"}},
    },
}


def _parse_day_key(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value in SCHOOL_DAYS else None
    if isinstance(value, str):
        key = value.strip().lower()
        if key.isdigit():
            day = int(key)
            return day if day in SCHOOL_DAYS else None
        return DAY_NAME_MAP.get(key)
    return None


def normalize_regular_classes(raw: object) -> WeekdayTimetable | None:
    """Coerce an external timetable document into the canonical shape.

    Unknown days, slots outside the catalog and entries without a batch name
    are dropped. Returns ``None`` when nothing usable remains.
    """
    if not isinstance(raw, Mapping):
        return None

    timetable: WeekdayTimetable = {day: {} for day in SCHOOL_DAYS}
    class_count = 0
    for day_key, rooms in raw.items():
        day = _parse_day_key(day_key)
        if day is None or not isinstance(rooms, Mapping):
            continue
        for room, slots in rooms.items():
            if not isinstance(room, str) or not room.strip() or not isinstance(slots, Mapping):
                continue
            for slot, booking in slots.items():
                if not is_time_slot(slot) or not isinstance(booking, Mapping):
                    continue
                try:
                    detail = BookingDetail.model_validate(dict(booking))
                except PydanticValidationError:
                    logger.warning("Dropping regular class with invalid details for day %s %s %s", day, room, slot)
                    continue
                timetable[day].setdefault(room.strip(), {})[slot] = detail
                class_count += 1

    if class_count == 0:
        return None
    return timetable


class RecurringTimetable:
    """Weekly classes keyed by ISO weekday; read-only after construction."""

    def __init__(self, classes: WeekdayTimetable) -> None:
        self._classes: WeekdayTimetable = {
            day: {
                room: dict(sorted(slots.items(), key=lambda item: slot_index(item[0])))
                for room, slots in classes.get(day, {}).items()
            }
            for day in SCHOOL_DAYS
        }

    @classmethod
    def default(cls) -> "RecurringTimetable":
        normalized = normalize_regular_classes(DEFAULT_REGULAR_CLASSES)
        return cls(normalized or {})

    def classes_for(self, weekday: int) -> dict[str, dict[str, BookingDetail]]:
        rooms = self._classes.get(weekday)
        if not rooms:
            return {}
        return {room: dict(slots) for room, slots in rooms.items()}

    def has_class(self, weekday: int, room: str, slot: str) -> bool:
        return slot in self._classes.get(weekday, {}).get(room, {})

    def class_count(self) -> int:
        return sum(len(slots) for rooms in self._classes.values() for slots in rooms.values())


def load_recurring_timetable(path: Path | None) -> RecurringTimetable:
    if path is None:
        return RecurringTimetable.default()

    source = Path(path)
    if not source.is_file():
        logger.info("No regular class override at %s; using built-in timetable", source)
        return RecurringTimetable.default()

    try:
        raw = json.loads(source.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Could not read regular class override %s (%s); using built-in timetable", source, exc)
        return RecurringTimetable.default()

    normalized = normalize_regular_classes(raw)
    if normalized is None:
        logger.warning("Regular class override %s has no usable classes; using built-in timetable", source)
        return RecurringTimetable.default()

    timetable = RecurringTimetable(normalized)
    logger.info("Loaded %d regular classes from %s", timetable.class_count(), source)
    return timetable
