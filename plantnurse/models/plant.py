"""SQLAlchemy models — Plant."""

from datetime import datetime

from sqlalchemy import JSON, Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from plantnurse.models.base import Base


class PlantRow(Base):
    __tablename__ = "plants"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0, index=True)
    species_id: Mapped[str | None] = mapped_column(String(50), nullable=True)
    custom_name: Mapped[str] = mapped_column(String(100), nullable=False)
    room_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    size: Mapped[str] = mapped_column(String(10), nullable=False)
    condition: Mapped[str] = mapped_column(String(20), nullable=False)
    date_added: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    is_custom: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    custom_scientific_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    custom_check_frequency: Mapped[int | None] = mapped_column(Integer, nullable=True)
    custom_light_level: Mapped[str | None] = mapped_column(String(20), nullable=True)
    custom_care_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    custom_leaf_shape: Mapped[str | None] = mapped_column(String(200), nullable=True)
    custom_leaf_size: Mapped[str | None] = mapped_column(String(200), nullable=True)
    custom_growth_pattern: Mapped[str | None] = mapped_column(String(200), nullable=True)
    custom_special_features: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    photo_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Plant {self.custom_name!r} room={self.room_id} position={self.position}>"
