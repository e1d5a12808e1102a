from fastapi import APIRouter, Query

from classbook.schemas.faculty import FacultyOut
from classbook.services.faculty_directory import filter_faculty

router = APIRouter()


@router.get("", response_model=list[FacultyOut])
def list_faculty(
    search: str = Query(default="", max_length=200),
    department: str = Query(default="", max_length=100),
) -> list[FacultyOut]:
    return [FacultyOut.model_validate(member) for member in filter_faculty(search, department)]
