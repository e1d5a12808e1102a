from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from classbook.services.time_slots import TIME_SLOTS


class BookingDetail(BaseModel):
    """Who or what occupies one room for one slot."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    batch_name: str = Field(
        min_length=1,
        max_length=100,
        validation_alias=AliasChoices("batchName", "batch_name"),
        serialization_alias="batchName",
    )
    teacher_name: str | None = Field(
        default=None,
        max_length=200,
        validation_alias=AliasChoices("teacherName", "teacher_name", "TeacherName"),
        serialization_alias="teacherName",
    )
    course_name: str | None = Field(
        default=None,
        max_length=200,
        validation_alias=AliasChoices("courseName", "course_name", "course", "Course"),
        serialization_alias="courseName",
    )
    start_time: str | None = Field(
        default=None,
        validation_alias=AliasChoices("startTime", "start_time"),
        serialization_alias="startTime",
    )
    end_time: str | None = Field(
        default=None,
        validation_alias=AliasChoices("endTime", "end_time"),
        serialization_alias="endTime",
    )

    @field_validator("batch_name")
    @classmethod
    def strip_batch_name(cls, value: str) -> str:
        trimmed = value.strip()
        if not trimmed:
            raise ValueError("batchName cannot be blank")
        return trimmed

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


RoomSlots = dict[str, BookingDetail | None]
DailySchedule = dict[str, RoomSlots]


def schedule_to_wire(schedule: DailySchedule) -> dict[str, dict[str, dict | None]]:
    return {
        room: {slot: (detail.to_wire() if detail is not None else None) for slot, detail in slots.items()}
        for room, slots in schedule.items()
    }


class BookingRequest(BaseModel):
    """Raw booking body; field checks happen in the booking service so the
    error order stays fixed."""

    model_config = ConfigDict(populate_by_name=True)

    room_number: str | None = Field(default=None, alias="roomNumber")
    time_slot: str | None = Field(default=None, alias="timeSlot")
    batch_name: str | None = Field(default=None, alias="batchName")
    date: str | None = None
    teacher_name: str | None = Field(default=None, alias="teacherName")
    course_name: str | None = Field(default=None, alias="courseName")


class BookingResponse(BaseModel):
    success: bool = True
    data: dict[str, dict | None]


class TimeSlotCatalogOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    time_slots: list[str] = Field(default_factory=lambda: list(TIME_SLOTS), alias="timeSlots")
    current_slot: str = Field(alias="currentSlot")


class RoomScheduleOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    room_number: str = Field(alias="roomNumber")
    date: str
    is_staff_room: bool = Field(alias="isStaffRoom")
    slots: dict[str, dict | None]


class RoomStatusOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    room_number: str = Field(alias="roomNumber")
    status: Literal["free", "occupied"]
    is_staff_room: bool = Field(alias="isStaffRoom")
    source: Literal["staff", "ad_hoc", "recurring", "free"]
    booking: dict | None = None


class FloorOut(BaseModel):
    number: int
    rooms: list[RoomStatusOut]


class FloorPlanOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    date: str
    time_slot: str = Field(alias="timeSlot")
    floors: list[FloorOut]
    free_rooms: int = Field(alias="freeRooms")
    occupied_rooms: int = Field(alias="occupiedRooms")


class UpcomingBookingOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    date: str
    room_number: str = Field(alias="roomNumber")
    time_slot: str = Field(alias="timeSlot")
    batch_name: str = Field(alias="batchName")
    course_name: str | None = Field(default=None, alias="courseName")
    teacher_name: str | None = Field(default=None, alias="teacherName")
    source: Literal["ad_hoc", "recurring"]
