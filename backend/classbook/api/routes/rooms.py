from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from classbook.api.deps import get_db
from classbook.core.exceptions import AppError
from classbook.models.room import Room
from classbook.schemas.common import SuccessOut
from classbook.schemas.room import RoomCreate, RoomOut, RoomUpdate
from classbook.services.crud import create_entity, delete_entity, get_or_404, require_id, update_entity

router = APIRouter()


@router.get("", response_model=list[RoomOut] | RoomOut)
def list_rooms(
    room_id: str | None = Query(default=None, alias="id"),
    db: Session = Depends(get_db),
) -> list[RoomOut] | RoomOut:
    if room_id:
        return RoomOut.model_validate(get_or_404(db, Room, room_id, "Room"))
    rooms = db.execute(select(Room).order_by(Room.number)).scalars()
    return [RoomOut.model_validate(item) for item in rooms]


@router.post("", response_model=RoomOut, status_code=status.HTTP_201_CREATED)
def create_room(payload: RoomCreate, db: Session = Depends(get_db)) -> RoomOut:
    existing = db.execute(select(Room).where(Room.number == payload.number)).scalar_one_or_none()
    if existing:
        raise AppError("Room number already exists", status_code=status.HTTP_409_CONFLICT)
    return RoomOut.model_validate(create_entity(db, Room, payload))


@router.patch("", response_model=RoomOut)
def update_room(
    payload: RoomUpdate,
    room_id: str | None = Query(default=None, alias="id"),
    db: Session = Depends(get_db),
) -> RoomOut:
    room = get_or_404(db, Room, require_id(room_id, "Room"), "Room")
    return RoomOut.model_validate(update_entity(db, room, payload))


@router.delete("", response_model=SuccessOut)
def delete_room(
    room_id: str | None = Query(default=None, alias="id"),
    db: Session = Depends(get_db),
) -> SuccessOut:
    room = get_or_404(db, Room, require_id(room_id, "Room"), "Room")
    delete_entity(db, room)
    return SuccessOut()
