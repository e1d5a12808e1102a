from pydantic import Field

from classbook.schemas.common import CamelModel


class SubjectBase(CamelModel):
    name: str = Field(min_length=1, max_length=200)
    code: str = Field(min_length=1, max_length=50)
    department: str = Field(min_length=1, max_length=200)
    credits: int = Field(ge=1, le=40)
    description: str | None = Field(default=None, max_length=2000)


class SubjectCreate(SubjectBase):
    pass


class SubjectUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    code: str | None = Field(default=None, min_length=1, max_length=50)
    department: str | None = Field(default=None, min_length=1, max_length=200)
    credits: int | None = Field(default=None, ge=1, le=40)
    description: str | None = Field(default=None, max_length=2000)


class SubjectOut(SubjectBase):
    id: str
