"""Plant Nurse Room Repository."""

import logging
from collections import Counter
from typing import Any

from plantnurse.core.errors import InvariantViolation
from plantnurse.core.store import PlantStore, build_record, diff_update, find_room, require_room, require_text
from plantnurse.core.types import DEFAULT_ROOM_ID, ROOM_IDENTITY_FIELDS, Room

logger = logging.getLogger("plantnurse.rooms")


class RoomRepository:
    """CRUD over rooms.

    Exactly one room carries the reserved id `default-room`. It is created on
    first use and can never be removed. Any other room can be removed once no
    plant lives in it.
    """

    def __init__(self, store: PlantStore, default_room_name: str = "My Room"):
        self.store = store
        self.default_room_name = default_room_name
        self._ensure_default_room()

    def _ensure_default_room(self) -> None:
        if find_room(self.store.state, DEFAULT_ROOM_ID) is not None:
            return
        default_room = Room(
            id=DEFAULT_ROOM_ID,
            name=self.default_room_name,
            notes="Default room - you can edit this or add more rooms",
        )
        with self.store.transaction() as state:
            state.rooms.insert(0, default_room)
        logger.info(f"Created default room {self.default_room_name!r}")

    def add(self, fields: dict[str, Any]) -> Room:
        data = {k: v for k, v in fields.items() if k not in ROOM_IDENTITY_FIELDS}
        require_text(data, "name")
        room = build_record(Room, data)
        with self.store.transaction() as state:
            state.rooms.append(room)
        logger.info(f"Created room: {room.id} ({room.name})")
        return room.model_copy(deep=True)

    def update(self, room_id: str, fields: dict[str, Any]) -> Room:
        if "name" in fields:
            require_text(fields, "name")
        current = require_room(self.store.state, room_id)
        updated, changes = diff_update(current, fields, ROOM_IDENTITY_FIELDS)
        if not changes:
            return current.model_copy(deep=True)
        with self.store.transaction() as state:
            state.rooms = [updated if r.id == room_id else r for r in state.rooms]
        logger.info(f"Updated room {room_id}: {', '.join(c.field for c in changes)}")
        return updated.model_copy(deep=True)

    def remove(self, room_id: str) -> None:
        if room_id == DEFAULT_ROOM_ID:
            logger.warning("Refused to remove the default room")
            raise InvariantViolation("The default room cannot be removed", {"room_id": room_id})
        require_room(self.store.state, room_id)
        plant_count = self.count_plants(room_id)
        if plant_count:
            logger.warning(f"Refused to remove room {room_id}: {plant_count} plant(s) still there")
            raise InvariantViolation(
                f"Cannot remove room: {plant_count} plant(s) are located here. Move them first.",
                {"room_id": room_id, "plant_count": plant_count},
            )
        with self.store.transaction() as state:
            state.rooms = [r for r in state.rooms if r.id != room_id]
        logger.info(f"Removed room {room_id}")

    def get(self, room_id: str) -> Room:
        return require_room(self.store.state, room_id).model_copy(deep=True)

    def all_rooms(self) -> list[Room]:
        return [r.model_copy(deep=True) for r in self.store.state.rooms]

    def count_plants(self, room_id: str) -> int:
        return sum(1 for p in self.store.state.plants if p.room_id == room_id)

    def plant_counts(self) -> dict[str, int]:
        """Number of plants per room id, including empty rooms."""
        counts = Counter(p.room_id for p in self.store.state.plants)
        return {r.id: counts.get(r.id, 0) for r in self.store.state.rooms}
