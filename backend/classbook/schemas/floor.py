from datetime import datetime

from pydantic import Field

from classbook.schemas.common import CamelModel


class FloorBase(CamelModel):
    name: str = Field(min_length=1, max_length=100)
    number: str = Field(min_length=1, max_length=20)
    building: str = Field(min_length=1, max_length=200)


class FloorCreate(FloorBase):
    pass


class FloorUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    number: str | None = Field(default=None, min_length=1, max_length=20)
    building: str | None = Field(default=None, min_length=1, max_length=200)


class FloorOut(FloorBase):
    id: str
    created_at: datetime | None = None
