from datetime import datetime

from pydantic import EmailStr, Field

from classbook.schemas.common import CamelModel


class StudentBase(CamelModel):
    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    batch: str = Field(min_length=1, max_length=100)
    enrollment_number: str = Field(min_length=1, max_length=100)


class StudentCreate(StudentBase):
    pass


class StudentUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    email: EmailStr | None = None
    batch: str | None = Field(default=None, min_length=1, max_length=100)
    enrollment_number: str | None = Field(default=None, min_length=1, max_length=100)


class StudentOut(StudentBase):
    id: str
    joined_at: datetime | None = None
