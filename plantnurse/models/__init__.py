"""Models package — imports all models for metadata discovery."""

from plantnurse.models.base import Base, create_session_factory
from plantnurse.models.room import RoomRow
from plantnurse.models.plant import PlantRow
from plantnurse.models.history import CheckInRow, EditRecordRow

__all__ = ["Base", "create_session_factory", "RoomRow", "PlantRow", "CheckInRow", "EditRecordRow"]
