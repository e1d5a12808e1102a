from datetime import datetime
from typing import Literal

from pydantic import Field

from classbook.schemas.common import CamelModel


class AnnouncementCreate(CamelModel):
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1, max_length=10_000)
    date: datetime
    teacher_name: str | None = Field(default=None, max_length=200)
    batch_name: str | None = Field(default=None, max_length=100)


class AnnouncementUpdate(CamelModel):
    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, min_length=1, max_length=10_000)
    date: datetime | None = None
    teacher_name: str | None = Field(default=None, max_length=200)
    batch_name: str | None = Field(default=None, max_length=100)


class ReplyCreate(CamelModel):
    content: str = Field(min_length=1, max_length=5_000)
    author: Literal["student", "faculty", "admin"]
    author_name: str = Field(min_length=1, max_length=200)


class ReplyOut(ReplyCreate):
    id: str
    created_at: datetime | None = None


class AnnouncementOut(AnnouncementCreate):
    id: str
    created_at: datetime | None = None
    replies: list[ReplyOut] = Field(default_factory=list)
