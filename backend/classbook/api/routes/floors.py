from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from classbook.api.deps import get_db
from classbook.models.floor import Floor
from classbook.schemas.common import SuccessOut
from classbook.schemas.floor import FloorCreate, FloorOut, FloorUpdate
from classbook.services.crud import create_entity, delete_entity, get_or_404, require_id, update_entity

router = APIRouter()


@router.get("", response_model=list[FloorOut] | FloorOut)
def list_floors(
    floor_id: str | None = Query(default=None, alias="id"),
    db: Session = Depends(get_db),
) -> list[FloorOut] | FloorOut:
    if floor_id:
        return FloorOut.model_validate(get_or_404(db, Floor, floor_id, "Floor"))
    floors = db.execute(select(Floor).order_by(Floor.number)).scalars()
    return [FloorOut.model_validate(item) for item in floors]


@router.post("", response_model=FloorOut, status_code=status.HTTP_201_CREATED)
def create_floor(payload: FloorCreate, db: Session = Depends(get_db)) -> FloorOut:
    return FloorOut.model_validate(create_entity(db, Floor, payload))


@router.patch("", response_model=FloorOut)
def update_floor(
    payload: FloorUpdate,
    floor_id: str | None = Query(default=None, alias="id"),
    db: Session = Depends(get_db),
) -> FloorOut:
    floor = get_or_404(db, Floor, require_id(floor_id, "Floor"), "Floor")
    return FloorOut.model_validate(update_entity(db, floor, payload))


@router.delete("", response_model=SuccessOut)
def delete_floor(
    floor_id: str | None = Query(default=None, alias="id"),
    db: Session = Depends(get_db),
) -> SuccessOut:
    floor = get_or_404(db, Floor, require_id(floor_id, "Floor"), "Floor")
    delete_entity(db, floor)
    return SuccessOut()
