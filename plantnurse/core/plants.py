"""Plant Nurse Plant Repository."""

import logging
from typing import Any

from plantnurse.core.catalog import SpeciesCatalog
from plantnurse.core.errors import ValidationError
from plantnurse.core.logs import CheckInLog, EditHistoryLog
from plantnurse.core.store import PlantStore, build_record, diff_update, require_plant, require_room, require_text
from plantnurse.core.types import PLANT_IDENTITY_FIELDS, FieldChange, Plant, Snapshot

logger = logging.getLogger("plantnurse.plants")


class PlantRepository:
    """CRUD and ordering over plants.

    Owns the dependent records of a plant: updates write an edit record in
    the same transaction, removal cascades into both event logs.
    """

    def __init__(
        self,
        store: PlantStore,
        edit_log: EditHistoryLog,
        catalog: SpeciesCatalog | None = None,
    ):
        self.store = store
        self.edit_log = edit_log
        self.catalog = catalog

    def _check_species(self, plant: Plant) -> None:
        if plant.is_custom:
            return
        if not plant.species_id:
            raise ValidationError("species_id is required unless the plant is custom", {"field": "species_id"})
        if self.catalog is not None and not self.catalog.has_species(plant.species_id):
            raise ValidationError(f"Unknown species {plant.species_id!r}", {"field": "species_id"})

    def add(self, fields: dict[str, Any]) -> Plant:
        """Create a plant with a fresh id and creation timestamp."""
        data = {k: v for k, v in fields.items() if k not in PLANT_IDENTITY_FIELDS}
        require_text(data, "custom_name")
        require_text(data, "room_id")
        data["date_added"] = self.store.clock()
        plant = build_record(Plant, data)
        self._check_species(plant)
        with self.store.transaction() as state:
            require_room(state, plant.room_id)
            state.plants.append(plant)
        logger.info(f"Created plant: {plant.id} ({plant.custom_name})")
        return plant.model_copy(deep=True)

    def prepare_update(self, plant_id: str, fields: dict[str, Any]) -> tuple[Plant, list[FieldChange]]:
        """Validate a partial update against the current plant without applying it."""
        for name in ("custom_name", "room_id"):
            if name in fields:
                require_text(fields, name)
        current = require_plant(self.store.state, plant_id)
        updated, changes = diff_update(current, fields, PLANT_IDENTITY_FIELDS)
        if changes:
            self._check_species(updated)
        return updated, changes

    def stage_update(self, state: Snapshot, updated: Plant, changes: list[FieldChange]) -> None:
        """Replace the plant and record its edit inside the caller's transaction."""
        current = require_plant(state, updated.id)
        if updated.room_id != current.room_id:
            require_room(state, updated.room_id)
        self.edit_log.stage(state, updated.id, changes)
        state.plants = [updated if p.id == updated.id else p for p in state.plants]

    def update(self, plant_id: str, fields: dict[str, Any]) -> Plant:
        """Apply a partial update, recording an edit record when anything changed."""
        updated, changes = self.prepare_update(plant_id, fields)
        if not changes:
            logger.debug(f"Update of plant {plant_id} changed nothing")
            return updated.model_copy(deep=True)

        with self.store.transaction() as state:
            self.stage_update(state, updated, changes)
        logger.info(f"Updated plant {plant_id}: {', '.join(c.field for c in changes)}")
        return updated.model_copy(deep=True)

    def remove(self, plant_id: str) -> None:
        """Delete a plant together with all of its check-ins and edit records."""
        with self.store.transaction() as state:
            require_plant(state, plant_id)
            state.plants = [p for p in state.plants if p.id != plant_id]
            check_ins = CheckInLog.purge(state, plant_id)
            edits = EditHistoryLog.purge(state, plant_id)
        logger.info(f"Removed plant {plant_id} ({check_ins} check-ins, {edits} edit records)")

    def remove_all(self) -> int:
        """Delete every plant and all dependent records."""
        with self.store.transaction() as state:
            count = len(state.plants)
            state.plants = []
            state.check_ins = []
            state.edit_records = []
        logger.warning(f"Removed all plants ({count})")
        return count

    def reorder(self, plant_ids: list[str]) -> list[Plant]:
        """Put the given plants first, in the given order.

        Unknown ids are dropped and repeated ids count once. Plants not named
        keep their relative order after the named ones.
        """
        plants = self.store.state.plants
        by_id = {p.id: p for p in plants}
        ordered_ids = [pid for pid in dict.fromkeys(plant_ids) if pid in by_id]
        named = set(ordered_ids)
        new_order = ordered_ids + [p.id for p in plants if p.id not in named]

        if new_order != [p.id for p in plants]:
            with self.store.transaction() as state:
                staged = {p.id: p for p in state.plants}
                state.plants = [staged[pid] for pid in new_order]
            logger.info(f"Reordered {len(ordered_ids)} plants")
        return self.all_plants()

    def get(self, plant_id: str) -> Plant:
        return require_plant(self.store.state, plant_id).model_copy(deep=True)

    def all_plants(self) -> list[Plant]:
        """All plants in their canonical order."""
        return [p.model_copy(deep=True) for p in self.store.state.plants]
