from collections.abc import Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from classbook.db.session import SessionLocal
from classbook.services.booking_service import BookingService
from classbook.services.schedule_resolver import ScheduleResolver
from classbook.services.schedule_store import ScheduleStore


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_schedule_store(request: Request) -> ScheduleStore:
    return request.app.state.schedule_store


def get_schedule_resolver(store: ScheduleStore = Depends(get_schedule_store)) -> ScheduleResolver:
    return store.resolver


def get_booking_service(store: ScheduleStore = Depends(get_schedule_store)) -> BookingService:
    return store.booking_service
