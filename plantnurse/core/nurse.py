"""Plant Nurse facade — the commands and queries presentation calls into."""

import logging
from datetime import datetime
from typing import Any, Callable

from plantnurse.core.catalog import SpeciesCatalog
from plantnurse.core.config import Settings
from plantnurse.core.errors import ValidationError
from plantnurse.core.history import build_history
from plantnurse.core.issues import get_relevant_issues
from plantnurse.core.logs import CheckInLog, EditHistoryLog
from plantnurse.core.plants import PlantRepository
from plantnurse.core.rooms import RoomRepository
from plantnurse.core.schedule import (
    DEFAULT_CHECK_FREQUENCY,
    days_since,
    get_base_date,
    get_check_frequency,
    get_next_check_date,
    is_due,
)
from plantnurse.core.status import get_plant_status
from plantnurse.core.storage import SqlStorage, Storage
from plantnurse.core.store import PlantStore, require_text
from plantnurse.core.types import (
    CheckIn,
    HistoryEntry,
    Issue,
    Plant,
    PlantCondition,
    PlantStatus,
    Room,
    utcnow,
)

logger = logging.getLogger("plantnurse.nurse")


class PlantNurse:
    """Wires the repositories, event logs, catalog and derived engines together.

    Derived values (status, schedule, history, issues) are recomputed from
    the current state on every call.
    """

    def __init__(
        self,
        storage: Storage,
        catalog: SpeciesCatalog | None = None,
        clock: Callable[[], datetime] = utcnow,
        default_check_frequency: int = DEFAULT_CHECK_FREQUENCY,
        default_room_name: str = "My Room",
    ):
        self.clock = clock
        self.catalog = catalog or SpeciesCatalog()
        self.default_check_frequency = default_check_frequency
        self.store = PlantStore(storage, clock=clock)
        self.check_ins = CheckInLog(self.store)
        self.edit_history = EditHistoryLog(self.store)
        self.rooms = RoomRepository(self.store, default_room_name=default_room_name)
        self.plants = PlantRepository(self.store, self.edit_history, catalog=self.catalog)
        logger.info("Plant Nurse initialized")

    @classmethod
    def from_settings(cls, settings: Settings, session_factory) -> "PlantNurse":
        return cls(
            SqlStorage(session_factory),
            catalog=SpeciesCatalog(settings.knowledge_dir),
            default_check_frequency=settings.default_check_frequency,
            default_room_name=settings.default_room_name,
        )

    # ── Commands ──────────────────────────────────────────────────────────────

    def add_plant(self, fields: dict[str, Any]) -> Plant:
        return self.plants.add(fields)

    def update_plant(self, plant_id: str, fields: dict[str, Any]) -> Plant:
        return self.plants.update(plant_id, fields)

    def remove_plant(self, plant_id: str) -> None:
        self.plants.remove(plant_id)

    def remove_all_plants(self) -> int:
        return self.plants.remove_all()

    def reorder_plants(self, plant_ids: list[str]) -> list[Plant]:
        return self.plants.reorder(plant_ids)

    def add_check_in(self, fields: dict[str, Any], condition: PlantCondition | str | None = None) -> CheckIn:
        """Record a check-in, optionally updating the plant's condition.

        A check-in needs at least one observation unless it changes the
        plant's condition. The check-in and the condition edit are written
        in one transaction.
        """
        require_text(fields, "plant_id")
        plant_id = fields["plant_id"]
        check_in = self.check_ins.build(fields)
        changes = []
        if condition is not None:
            updated, changes = self.plants.prepare_update(plant_id, {"condition": condition})
        else:
            self.plants.get(plant_id)
        if not check_in.has_observation() and not changes:
            logger.warning(f"Rejected empty check-in for plant {plant_id}")
            raise ValidationError("Update the plant condition or add at least one observation")

        with self.store.transaction() as state:
            CheckInLog.stage(state, check_in)
            if changes:
                self.plants.stage_update(state, updated, changes)
        logger.info(f"Check-in {check_in.id} recorded for plant {plant_id}")
        if changes:
            logger.info(f"Plant {plant_id} condition changed to {updated.condition.value}")
        return check_in.model_copy(deep=True)

    def add_room(self, fields: dict[str, Any]) -> Room:
        return self.rooms.add(fields)

    def update_room(self, room_id: str, fields: dict[str, Any]) -> Room:
        return self.rooms.update(room_id, fields)

    def remove_room(self, room_id: str) -> None:
        self.rooms.remove(room_id)

    # ── Queries ───────────────────────────────────────────────────────────────

    def get_plant(self, plant_id: str) -> Plant:
        return self.plants.get(plant_id)

    def list_plants(self) -> list[Plant]:
        return self.plants.all_plants()

    def get_room(self, room_id: str) -> Room:
        return self.rooms.get(room_id)

    def list_rooms(self) -> list[Room]:
        return self.rooms.all_rooms()

    def get_room_plant_counts(self) -> dict[str, int]:
        return self.rooms.plant_counts()

    def get_plant_check_ins(self, plant_id: str) -> list[CheckIn]:
        """Check-ins of a plant, most recent first."""
        self.plants.get(plant_id)
        return self.check_ins.for_plant(plant_id)

    def get_last_check_in(self, plant_id: str) -> CheckIn | None:
        self.plants.get(plant_id)
        return self.check_ins.latest(plant_id)

    def get_check_frequency(self, plant_id: str) -> int:
        plant = self.plants.get(plant_id)
        return get_check_frequency(plant, self.catalog, default=self.default_check_frequency)

    def get_days_since_last_check_in(self, plant_id: str, now: datetime | None = None) -> int:
        plant = self.plants.get(plant_id)
        base = get_base_date(plant, self.check_ins.for_plant(plant_id))
        return days_since(base, now or self.clock())

    def get_next_check_date(self, plant_id: str) -> datetime:
        plant = self.plants.get(plant_id)
        frequency = get_check_frequency(plant, self.catalog, default=self.default_check_frequency)
        return get_next_check_date(plant, self.check_ins.for_plant(plant_id), frequency)

    def is_due(self, plant_id: str, now: datetime | None = None) -> bool:
        plant = self.plants.get(plant_id)
        frequency = get_check_frequency(plant, self.catalog, default=self.default_check_frequency)
        return is_due(plant, self.check_ins.for_plant(plant_id), frequency, now or self.clock())

    def get_plant_status(
        self,
        plant_id: str,
        frequency: int | None = None,
        now: datetime | None = None,
    ) -> PlantStatus:
        """Urgency label; `frequency` defaults to the plant's own check frequency."""
        plant = self.plants.get(plant_id)
        if frequency is None:
            frequency = get_check_frequency(plant, self.catalog, default=self.default_check_frequency)
        return get_plant_status(plant, self.check_ins.for_plant(plant_id), frequency, now or self.clock())

    def get_plant_history(self, plant_id: str) -> list[HistoryEntry]:
        plant = self.plants.get(plant_id)
        return build_history(
            plant,
            self.check_ins.for_plant(plant_id),
            self.edit_history.for_plant(plant_id),
        )

    def get_relevant_issues(self, plant_id: str) -> list[Issue]:
        plant = self.plants.get(plant_id)
        return get_relevant_issues(plant, self.check_ins.for_plant(plant_id), self.catalog)

    def get_species(self, species_id: str) -> dict | None:
        return self.catalog.get_species(species_id)

    def search_species(self, query: str) -> list[dict]:
        return self.catalog.search(query)
