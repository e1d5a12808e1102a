from __future__ import annotations

from datetime import date, datetime
import logging

from fastapi import APIRouter, Depends, Query

from classbook.api.deps import get_booking_service, get_schedule_resolver, get_schedule_store
from classbook.core.exceptions import AppError, InternalError, ValidationError
from classbook.schemas.schedule import (
    BookingRequest,
    BookingResponse,
    FloorOut,
    FloorPlanOut,
    RoomScheduleOut,
    RoomStatusOut,
    TimeSlotCatalogOut,
    UpcomingBookingOut,
    schedule_to_wire,
)
from classbook.services.booking_service import BookingService
from classbook.services.schedule_resolver import ScheduleResolver, parse_schedule_date
from classbook.services.schedule_store import ScheduleStore
from classbook.services.time_slots import current_slot, is_time_slot

logger = logging.getLogger(__name__)

router = APIRouter()


def _resolve_date(value: str | None) -> date:
    if not value:
        return date.today()
    try:
        return parse_schedule_date(value)
    except ValueError:
        raise ValidationError("Invalid date. Expected YYYY-MM-DD", details={"date": value}) from None


@router.get("")
def get_schedule(
    date_param: str | None = Query(default=None, alias="date"),
    resolver: ScheduleResolver = Depends(get_schedule_resolver),
) -> dict[str, dict[str, dict | None]]:
    return schedule_to_wire(resolver.effective_schedule(_resolve_date(date_param)))


@router.post("", response_model=BookingResponse)
def create_booking(
    payload: BookingRequest,
    service: BookingService = Depends(get_booking_service),
) -> BookingResponse:
    try:
        service.book(
            date=payload.date,
            room=payload.room_number,
            slot=payload.time_slot,
            batch_name=payload.batch_name,
            teacher_name=payload.teacher_name,
            course_name=payload.course_name,
        )
    except AppError as exc:
        logger.info("Booking rejected (%s): %s", type(exc).__name__, exc.message)
        raise
    except Exception as exc:
        logger.exception("Error processing booking")
        raise InternalError() from exc

    key = parse_schedule_date(payload.date).isoformat()
    room = payload.room_number.strip()
    room_slots = service.ledger.entry_for(key).get(room, {})
    return BookingResponse(data=schedule_to_wire({room: room_slots})[room])


@router.get("/slots", response_model=TimeSlotCatalogOut)
def list_time_slots() -> TimeSlotCatalogOut:
    return TimeSlotCatalogOut(current_slot=current_slot(datetime.now()))


@router.get("/rooms/{room_number}", response_model=RoomScheduleOut)
def get_room_schedule(
    room_number: str,
    date_param: str | None = Query(default=None, alias="date"),
    store: ScheduleStore = Depends(get_schedule_store),
) -> RoomScheduleOut:
    day = _resolve_date(date_param)
    slots = store.resolver.room_schedule(day, room_number)
    return RoomScheduleOut(
        room_number=room_number,
        date=day.isoformat(),
        is_staff_room=store.staff_rooms.is_staff_room(room_number),
        slots=schedule_to_wire({room_number: slots})[room_number],
    )


@router.get("/floors", response_model=FloorPlanOut)
def get_floor_plan(
    date_param: str | None = Query(default=None, alias="date"),
    slot: str | None = Query(default=None),
    store: ScheduleStore = Depends(get_schedule_store),
) -> FloorPlanOut:
    day = _resolve_date(date_param)
    selected = slot or current_slot(datetime.now())
    if not is_time_slot(selected):
        raise ValidationError("Invalid time slot", details={"timeSlot": selected})

    floors: list[FloorOut] = []
    occupied = 0
    total = 0
    for floor in store.floor_plan.statuses(store.resolver, day, selected):
        rooms = []
        for status in floor.rooms:
            total += 1
            occupied += int(status.occupied)
            rooms.append(
                RoomStatusOut(
                    room_number=status.room,
                    status="occupied" if status.occupied else "free",
                    is_staff_room=status.is_staff_room,
                    source=status.source,
                    booking=status.booking.to_wire() if status.booking is not None else None,
                )
            )
        floors.append(FloorOut(number=floor.number, rooms=rooms))

    return FloorPlanOut(
        date=day.isoformat(),
        time_slot=selected,
        floors=floors,
        free_rooms=total - occupied,
        occupied_rooms=occupied,
    )


@router.get("/upcoming", response_model=list[UpcomingBookingOut])
def list_upcoming_bookings(
    date_param: str | None = Query(default=None, alias="date"),
    weekdays: int = Query(default=7, ge=1, le=30),
    limit: int = Query(default=10, ge=1, le=100),
    resolver: ScheduleResolver = Depends(get_schedule_resolver),
) -> list[UpcomingBookingOut]:
    upcoming = resolver.upcoming_bookings(_resolve_date(date_param), weekdays=weekdays, limit=limit)
    return [
        UpcomingBookingOut(
            date=item.date,
            room_number=item.room,
            time_slot=item.slot,
            batch_name=item.booking.batch_name,
            course_name=item.booking.course_name,
            teacher_name=item.booking.teacher_name,
            source=item.source,
        )
        for item in upcoming
    ]
