from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from classbook.api.deps import get_db
from classbook.models.announcement import Announcement, AnnouncementReply
from classbook.schemas.announcement import (
    AnnouncementCreate,
    AnnouncementOut,
    AnnouncementUpdate,
    ReplyCreate,
    ReplyOut,
)
from classbook.schemas.common import SuccessOut
from classbook.services.crud import create_entity, delete_entity, get_or_404, update_entity

router = APIRouter()


@router.get("", response_model=list[AnnouncementOut])
def list_announcements(db: Session = Depends(get_db)) -> list[AnnouncementOut]:
    query = select(Announcement).order_by(Announcement.date.desc(), Announcement.created_at.desc())
    return [AnnouncementOut.model_validate(item) for item in db.execute(query).scalars()]


@router.post("", response_model=AnnouncementOut, status_code=status.HTTP_201_CREATED)
def create_announcement(payload: AnnouncementCreate, db: Session = Depends(get_db)) -> AnnouncementOut:
    return AnnouncementOut.model_validate(create_entity(db, Announcement, payload))


@router.get("/{announcement_id}", response_model=AnnouncementOut)
def get_announcement(announcement_id: str, db: Session = Depends(get_db)) -> AnnouncementOut:
    return AnnouncementOut.model_validate(get_or_404(db, Announcement, announcement_id, "Announcement"))


@router.put("/{announcement_id}", response_model=AnnouncementOut)
def update_announcement(
    announcement_id: str,
    payload: AnnouncementUpdate,
    db: Session = Depends(get_db),
) -> AnnouncementOut:
    announcement = get_or_404(db, Announcement, announcement_id, "Announcement")
    return AnnouncementOut.model_validate(update_entity(db, announcement, payload))


@router.delete("/{announcement_id}", response_model=SuccessOut)
def delete_announcement(announcement_id: str, db: Session = Depends(get_db)) -> SuccessOut:
    delete_entity(db, get_or_404(db, Announcement, announcement_id, "Announcement"))
    return SuccessOut()


@router.post("/{announcement_id}/replies", response_model=ReplyOut, status_code=status.HTTP_201_CREATED)
def add_reply(announcement_id: str, payload: ReplyCreate, db: Session = Depends(get_db)) -> ReplyOut:
    announcement = get_or_404(db, Announcement, announcement_id, "Announcement")
    reply = AnnouncementReply(**payload.model_dump())
    announcement.replies.append(reply)
    db.commit()
    db.refresh(reply)
    return ReplyOut.model_validate(reply)
