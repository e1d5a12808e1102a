from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from classbook.api.deps import get_db
from classbook.models.study_material import StudyMaterial
from classbook.schemas.common import SuccessOut
from classbook.schemas.study_material import StudyMaterialCreate, StudyMaterialOut, StudyMaterialUpdate
from classbook.services.crud import create_entity, delete_entity, get_or_404, require_id, update_entity

router = APIRouter()


@router.get("", response_model=list[StudyMaterialOut] | StudyMaterialOut)
def list_study_materials(
    material_id: str | None = Query(default=None, alias="id"),
    subject: str | None = Query(default=None, max_length=200),
    db: Session = Depends(get_db),
) -> list[StudyMaterialOut] | StudyMaterialOut:
    if material_id:
        return StudyMaterialOut.model_validate(get_or_404(db, StudyMaterial, material_id, "Study material"))
    query = select(StudyMaterial).order_by(StudyMaterial.uploaded_at.desc(), StudyMaterial.title)
    if subject:
        query = query.where(StudyMaterial.subject == subject)
    return [StudyMaterialOut.model_validate(item) for item in db.execute(query).scalars()]


@router.post("", response_model=StudyMaterialOut, status_code=status.HTTP_201_CREATED)
def create_study_material(payload: StudyMaterialCreate, db: Session = Depends(get_db)) -> StudyMaterialOut:
    return StudyMaterialOut.model_validate(create_entity(db, StudyMaterial, payload))


@router.patch("", response_model=StudyMaterialOut)
def update_study_material(
    payload: StudyMaterialUpdate,
    material_id: str | None = Query(default=None, alias="id"),
    db: Session = Depends(get_db),
) -> StudyMaterialOut:
    material = get_or_404(db, StudyMaterial, require_id(material_id, "Study material"), "Study material")
    return StudyMaterialOut.model_validate(update_entity(db, material, payload))


@router.delete("", response_model=SuccessOut)
def delete_study_material(
    material_id: str | None = Query(default=None, alias="id"),
    db: Session = Depends(get_db),
) -> SuccessOut:
    material = get_or_404(db, StudyMaterial, require_id(material_id, "Study material"), "Study material")
    delete_entity(db, material)
    return SuccessOut()
