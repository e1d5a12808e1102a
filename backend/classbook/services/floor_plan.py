from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from classbook.services.schedule_resolver import ScheduleResolver, SlotStatus


@dataclass(frozen=True)
class FloorStatus:
    number: int
    rooms: tuple["SlotStatus", ...]


class FloorPlan:
    """The department grid: ``{prefix}-{floor}{seq:02d}`` for every floor."""

    def __init__(self, *, prefix: str = "CSE", floor_count: int = 5, rooms_per_floor: int = 6) -> None:
        self.prefix = prefix
        self.floor_count = floor_count
        self.rooms_per_floor = rooms_per_floor

    def room_number(self, floor: int, seq: int) -> str:
        return f"{self.prefix}-{floor}{seq:02d}"

    def rooms_on(self, floor: int) -> list[str]:
        return [self.room_number(floor, seq) for seq in range(1, self.rooms_per_floor + 1)]

    def all_rooms(self) -> list[str]:
        return [room for floor in range(1, self.floor_count + 1) for room in self.rooms_on(floor)]

    def statuses(self, resolver: "ScheduleResolver", day: date, slot: str) -> list[FloorStatus]:
        return [
            FloorStatus(
                number=floor,
                rooms=tuple(resolver.slot_status(day, room, slot) for room in self.rooms_on(floor)),
            )
            for floor in range(1, self.floor_count + 1)
        ]
