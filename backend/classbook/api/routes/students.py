from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from classbook.api.deps import get_db
from classbook.models.student import Student
from classbook.schemas.common import SuccessOut
from classbook.schemas.student import StudentCreate, StudentOut, StudentUpdate
from classbook.services.crud import create_entity, delete_entity, get_or_404, require_id, update_entity

router = APIRouter()


@router.get("", response_model=list[StudentOut] | StudentOut)
def list_students(
    student_id: str | None = Query(default=None, alias="id"),
    db: Session = Depends(get_db),
) -> list[StudentOut] | StudentOut:
    if student_id:
        return StudentOut.model_validate(get_or_404(db, Student, student_id, "Student"))
    students = db.execute(select(Student).order_by(Student.name)).scalars()
    return [StudentOut.model_validate(item) for item in students]


@router.post("", response_model=StudentOut, status_code=status.HTTP_201_CREATED)
def create_student(payload: StudentCreate, db: Session = Depends(get_db)) -> StudentOut:
    return StudentOut.model_validate(create_entity(db, Student, payload))


@router.patch("", response_model=StudentOut)
def update_student(
    payload: StudentUpdate,
    student_id: str | None = Query(default=None, alias="id"),
    db: Session = Depends(get_db),
) -> StudentOut:
    student = get_or_404(db, Student, require_id(student_id, "Student"), "Student")
    return StudentOut.model_validate(update_entity(db, student, payload))


@router.delete("", response_model=SuccessOut)
def delete_student(
    student_id: str | None = Query(default=None, alias="id"),
    db: Session = Depends(get_db),
) -> SuccessOut:
    student = get_or_404(db, Student, require_id(student_id, "Student"), "Student")
    delete_entity(db, student)
    return SuccessOut()
