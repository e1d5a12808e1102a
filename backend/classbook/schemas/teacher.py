from datetime import datetime

from pydantic import EmailStr, Field

from classbook.schemas.common import CamelModel


class TeacherBase(CamelModel):
    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    department: str = Field(min_length=1, max_length=200)
    subjects: list[str] = Field(default_factory=list, max_length=50)


class TeacherCreate(TeacherBase):
    pass


class TeacherUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    email: EmailStr | None = None
    department: str | None = Field(default=None, min_length=1, max_length=200)
    subjects: list[str] | None = Field(default=None, max_length=50)


class TeacherOut(TeacherBase):
    id: str
    joined_at: datetime | None = None
