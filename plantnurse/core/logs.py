"""Plant Nurse event logs — append-only check-ins and edit history."""

import logging
from typing import Any

from plantnurse.core.store import PlantStore, build_record, require_plant
from plantnurse.core.types import CheckIn, EditRecord, FieldChange, Snapshot

logger = logging.getLogger("plantnurse.logs")


class CheckInLog:
    """Append-only store of check-in observations keyed by plant.

    Entries are never edited or individually deleted; they only go away
    together with their plant (see `purge`).
    """

    def __init__(self, store: PlantStore):
        self.store = store

    def build(self, fields: dict[str, Any]) -> CheckIn:
        """Validate a new check-in dated now. Nothing is stored."""
        data = {k: v for k, v in fields.items() if k not in ("id", "date")}
        data["date"] = self.store.clock()
        return build_record(CheckIn, data)

    @staticmethod
    def stage(state: Snapshot, check_in: CheckIn) -> None:
        """Append a check-in to a staged state inside the caller's transaction."""
        require_plant(state, check_in.plant_id)
        state.check_ins.append(check_in)
        logger.debug(f"Staged check-in {check_in.id} for plant {check_in.plant_id}")

    def for_plant(self, plant_id: str) -> list[CheckIn]:
        """Check-ins of one plant, most recent first."""
        check_ins = [c for c in self.store.state.check_ins if c.plant_id == plant_id]
        check_ins.sort(key=lambda c: c.date, reverse=True)
        return [c.model_copy(deep=True) for c in check_ins]

    def latest(self, plant_id: str) -> CheckIn | None:
        check_ins = self.for_plant(plant_id)
        return check_ins[0] if check_ins else None

    @staticmethod
    def purge(state: Snapshot, plant_id: str) -> int:
        """Drop every check-in of a plant from a staged state."""
        before = len(state.check_ins)
        state.check_ins = [c for c in state.check_ins if c.plant_id != plant_id]
        return before - len(state.check_ins)


class EditHistoryLog:
    """Append-only store of field diffs, written as a side effect of plant updates."""

    def __init__(self, store: PlantStore):
        self.store = store

    def stage(self, state: Snapshot, plant_id: str, changes: list[FieldChange]) -> EditRecord:
        """Append an edit record to a staged state inside the caller's transaction."""
        record = EditRecord(plant_id=plant_id, date=self.store.clock(), changes=changes)
        state.edit_records.append(record)
        return record

    def for_plant(self, plant_id: str) -> list[EditRecord]:
        """Edit records of one plant in the order they were made."""
        return [e.model_copy(deep=True) for e in self.store.state.edit_records if e.plant_id == plant_id]

    @staticmethod
    def purge(state: Snapshot, plant_id: str) -> int:
        before = len(state.edit_records)
        state.edit_records = [e for e in state.edit_records if e.plant_id != plant_id]
        return before - len(state.edit_records)
