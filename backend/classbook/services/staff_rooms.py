from __future__ import annotations

from collections.abc import Iterable

from classbook.schemas.schedule import BookingDetail

DEFAULT_STAFF_ROOMS = ("CSE-103", "CSE-104", "CSE-203")
DEFAULT_STAFF_ROOM_LABEL = "Teachers Department CSE-AI"


class StaffRoomPolicy:
    """Rooms reserved for departmental staff; never bookable."""

    def __init__(self, rooms: Iterable[str] = DEFAULT_STAFF_ROOMS, *, label: str = DEFAULT_STAFF_ROOM_LABEL) -> None:
        self._rooms = frozenset(room.strip() for room in rooms if room and room.strip())
        self.label = label
        self._synthetic = BookingDetail(batch_name=label, course_name=label)

    @property
    def rooms(self) -> frozenset[str]:
        return self._rooms

    def is_staff_room(self, room: str) -> bool:
        return room in self._rooms

    def synthetic_booking(self) -> BookingDetail:
        return self._synthetic
