from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from classbook.api.deps import get_db
from classbook.models.subject import Subject
from classbook.schemas.common import SuccessOut
from classbook.schemas.subject import SubjectCreate, SubjectOut, SubjectUpdate
from classbook.services.crud import create_entity, delete_entity, get_or_404, require_id, update_entity

router = APIRouter()


@router.get("", response_model=list[SubjectOut] | SubjectOut)
def list_subjects(
    subject_id: str | None = Query(default=None, alias="id"),
    db: Session = Depends(get_db),
) -> list[SubjectOut] | SubjectOut:
    if subject_id:
        return SubjectOut.model_validate(get_or_404(db, Subject, subject_id, "Subject"))
    subjects = db.execute(select(Subject).order_by(Subject.code)).scalars()
    return [SubjectOut.model_validate(item) for item in subjects]


@router.post("", response_model=SubjectOut, status_code=status.HTTP_201_CREATED)
def create_subject(payload: SubjectCreate, db: Session = Depends(get_db)) -> SubjectOut:
    return SubjectOut.model_validate(create_entity(db, Subject, payload))


@router.patch("", response_model=SubjectOut)
def update_subject(
    payload: SubjectUpdate,
    subject_id: str | None = Query(default=None, alias="id"),
    db: Session = Depends(get_db),
) -> SubjectOut:
    subject = get_or_404(db, Subject, require_id(subject_id, "Subject"), "Subject")
    return SubjectOut.model_validate(update_entity(db, subject, payload))


@router.delete("", response_model=SuccessOut)
def delete_subject(
    subject_id: str | None = Query(default=None, alias="id"),
    db: Session = Depends(get_db),
) -> SuccessOut:
    subject = get_or_404(db, Subject, require_id(subject_id, "Subject"), "Subject")
    delete_entity(db, subject)
    return SuccessOut()
