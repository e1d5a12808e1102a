from datetime import datetime

from pydantic import Field

from classbook.schemas.common import CamelModel


class StudyMaterialCreate(CamelModel):
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(default="", max_length=5_000)
    file_url: str = Field(default="", max_length=500)
    file_name: str = Field(min_length=1, max_length=255)
    file_type: str = Field(default="application/pdf", max_length=100)
    file_size: int = Field(default=0, ge=0)
    uploaded_by: str = Field(default="", max_length=200)
    subject: str | None = Field(default=None, max_length=200)
    batch: str | None = Field(default=None, max_length=100)


class StudyMaterialUpdate(CamelModel):
    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=5_000)
    subject: str | None = Field(default=None, max_length=200)
    batch: str | None = Field(default=None, max_length=100)


class StudyMaterialOut(StudyMaterialCreate):
    id: str
    uploaded_at: datetime | None = None
