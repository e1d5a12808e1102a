from pydantic import Field

from classbook.schemas.common import CamelModel


class FeedbackEntry(CamelModel):
    rating: int = Field(ge=0, le=5)
    comment: str


class FacultyOut(CamelModel):
    id: str
    name: str
    department: str
    email: str
    phone: str
    courses: list[str]
    feedback: list[FeedbackEntry]
    classes_handled: int
    average_rating: float
