from datetime import datetime

from pydantic import Field, field_validator

from classbook.models.room import RoomType
from classbook.schemas.common import CamelModel


def _normalize_room_type(value: str | None) -> str | None:
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized not in {item.value for item in RoomType}:
        raise ValueError(f"Room type must be one of: {', '.join(item.value for item in RoomType)}")
    return normalized


class RoomBase(CamelModel):
    name: str = Field(min_length=1, max_length=100)
    number: str = Field(min_length=1, max_length=20)
    floor: str = Field(min_length=1, max_length=20)
    capacity: int = Field(ge=1, le=1000)
    type: str

    @field_validator("type")
    @classmethod
    def validate_type(cls, value: str) -> str:
        return _normalize_room_type(value)


class RoomCreate(RoomBase):
    pass


class RoomUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    number: str | None = Field(default=None, min_length=1, max_length=20)
    floor: str | None = Field(default=None, min_length=1, max_length=20)
    capacity: int | None = Field(default=None, ge=1, le=1000)
    type: str | None = None

    @field_validator("type")
    @classmethod
    def validate_type(cls, value: str | None) -> str | None:
        return _normalize_room_type(value)


class RoomOut(RoomBase):
    id: str
    created_at: datetime | None = None
