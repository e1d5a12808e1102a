import uuid
from datetime import datetime

from sqlalchemy import DateTime, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from classbook.db.base import Base


class LedgerEntry(Base):
    """One explicit ad-hoc cell; a NULL batch marks a tombstone."""

    __tablename__ = "ledger_entries"
    __table_args__ = (UniqueConstraint("booking_date", "room_number", "time_slot", name="uq_ledger_cell"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    booking_date: Mapped[str] = mapped_column(String(10), index=True, nullable=False)
    room_number: Mapped[str] = mapped_column(String(50), nullable=False)
    time_slot: Mapped[str] = mapped_column(String(11), nullable=False)
    batch_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    teacher_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    course_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), onupdate=func.now())
