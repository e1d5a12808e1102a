from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from classbook.api.deps import get_db
from classbook.models.teacher import Teacher
from classbook.schemas.common import SuccessOut
from classbook.schemas.teacher import TeacherCreate, TeacherOut, TeacherUpdate
from classbook.services.crud import create_entity, delete_entity, get_or_404, require_id, update_entity

router = APIRouter()


@router.get("", response_model=list[TeacherOut] | TeacherOut)
def list_teachers(
    teacher_id: str | None = Query(default=None, alias="id"),
    db: Session = Depends(get_db),
) -> list[TeacherOut] | TeacherOut:
    if teacher_id:
        return TeacherOut.model_validate(get_or_404(db, Teacher, teacher_id, "Teacher"))
    teachers = db.execute(select(Teacher).order_by(Teacher.name)).scalars()
    return [TeacherOut.model_validate(item) for item in teachers]


@router.post("", response_model=TeacherOut, status_code=status.HTTP_201_CREATED)
def create_teacher(payload: TeacherCreate, db: Session = Depends(get_db)) -> TeacherOut:
    return TeacherOut.model_validate(create_entity(db, Teacher, payload))


@router.patch("", response_model=TeacherOut)
def update_teacher(
    payload: TeacherUpdate,
    teacher_id: str | None = Query(default=None, alias="id"),
    db: Session = Depends(get_db),
) -> TeacherOut:
    teacher = get_or_404(db, Teacher, require_id(teacher_id, "Teacher"), "Teacher")
    return TeacherOut.model_validate(update_entity(db, teacher, payload))


@router.delete("", response_model=SuccessOut)
def delete_teacher(
    teacher_id: str | None = Query(default=None, alias="id"),
    db: Session = Depends(get_db),
) -> SuccessOut:
    teacher = get_or_404(db, Teacher, require_id(teacher_id, "Teacher"), "Teacher")
    delete_entity(db, teacher)
    return SuccessOut()
