from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import inspect, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from classbook.api.deps import get_db, get_schedule_store
from classbook.db.base import Base
from classbook.services.schedule_store import ScheduleStore

router = APIRouter()


@router.get("/health")
def health() -> dict:
    return {"status": "ok"}


@router.get("/health/ready")
def health_ready(
    db: Session = Depends(get_db),
    store: ScheduleStore = Depends(get_schedule_store),
) -> JSONResponse:
    db_ok = True
    db_error: str | None = None
    missing_tables: list[str] = []
    try:
        db.execute(text("SELECT 1"))
        existing = set(inspect(db.connection()).get_table_names())
        missing_tables = sorted(set(Base.metadata.tables) - existing)
    except SQLAlchemyError as exc:
        db_ok = False
        db_error = str(exc)

    ready = db_ok and not missing_tables
    payload = {
        "status": "ok" if ready else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": {"ok": db_ok, "missing_tables": missing_tables, "error": db_error},
        "schedule": {
            "regular_classes": store.timetable.class_count(),
            "booked_dates": len(store.ledger.dates()),
        },
    }
    return JSONResponse(status_code=200 if ready else 503, content=payload)
