"""SQLAlchemy models — CheckIn and EditRecord event logs."""

from datetime import datetime

from sqlalchemy import JSON, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from plantnurse.models.base import Base


class CheckInRow(Base):
    __tablename__ = "check_ins"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    plant_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    soil_moisture: Mapped[str | None] = mapped_column(String(20), nullable=True)
    leaf_condition: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    actions_taken: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    photo_url: Mapped[str | None] = mapped_column(Text, nullable=True)


class EditRecordRow(Base):
    __tablename__ = "edit_records"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    plant_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    changes: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
