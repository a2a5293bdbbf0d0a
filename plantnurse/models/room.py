"""SQLAlchemy models — Room."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from plantnurse.models.base import Base


class RoomRow(Base):
    __tablename__ = "rooms"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    light_level: Mapped[str] = mapped_column(String(20), nullable=False)
    temperature: Mapped[str] = mapped_column(String(20), nullable=False)
    window_direction: Mapped[str | None] = mapped_column(String(10), nullable=True)
    humidity: Mapped[str | None] = mapped_column(String(10), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Room {self.name!r} id={self.id}>"
