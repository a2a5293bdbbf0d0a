"""Plant Nurse state store — canonical in-memory state with write-through commits."""

import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Callable, Iterator, TypeVar

import pydantic
from pydantic import BaseModel

from plantnurse.core.errors import NotFoundError, ValidationError
from plantnurse.core.storage import Storage
from plantnurse.core.types import FieldChange, Plant, Room, Snapshot, utcnow

logger = logging.getLogger("plantnurse.store")

RecordT = TypeVar("RecordT", bound=BaseModel)


class PlantStore:
    """Holds the canonical state shared by all repositories.

    Mutations go through `transaction()`: the caller edits a staged deep copy,
    the copy is handed to the storage adapter, and it only replaces the
    canonical state once the durable write succeeded. Any exception raised
    inside the block, or by the adapter, leaves the canonical state untouched.
    """

    def __init__(self, storage: Storage, clock: Callable[[], datetime] = utcnow):
        self.storage = storage
        self.clock = clock
        self._state = storage.load()

    @property
    def state(self) -> Snapshot:
        """Current committed state. Treat as read-only."""
        return self._state

    @contextmanager
    def transaction(self) -> Iterator[Snapshot]:
        staged = self._state.model_copy(deep=True)
        yield staged
        self.storage.save(staged)
        self._state = staged


# ── Lookups ───────────────────────────────────────────────────────────────────

def find_plant(state: Snapshot, plant_id: str) -> Plant | None:
    for plant in state.plants:
        if plant.id == plant_id:
            return plant
    return None


def find_room(state: Snapshot, room_id: str) -> Room | None:
    for room in state.rooms:
        if room.id == room_id:
            return room
    return None


def require_plant(state: Snapshot, plant_id: str) -> Plant:
    plant = find_plant(state, plant_id)
    if plant is None:
        raise NotFoundError("plant", plant_id)
    return plant


def require_room(state: Snapshot, room_id: str) -> Room:
    room = find_room(state, room_id)
    if room is None:
        raise NotFoundError("room", room_id)
    return room


# ── Validation helpers ────────────────────────────────────────────────────────

def require_text(fields: dict[str, Any], name: str) -> None:
    """Reject a missing or blank required text field."""
    value = fields.get(name)
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{name} is required", {"field": name})


def build_record(model: type[RecordT], data: dict[str, Any]) -> RecordT:
    """Validate `data` into a record, translating schema errors."""
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as e:
        fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
        raise ValidationError(
            f"Invalid {model.__name__.lower()} fields: {', '.join(fields)}",
            {"fields": fields},
        ) from e


def diff_update(
    current: RecordT,
    fields: dict[str, Any],
    identity: frozenset[str],
) -> tuple[RecordT, list[FieldChange]]:
    """Apply `fields` to a copy of `current` and report what actually changed.

    Identity fields are ignored. Changes are listed in the caller's field order
    with values in their JSON form.
    """
    model = type(current)
    updates = {k: v for k, v in fields.items() if k not in identity}
    unknown = sorted(set(updates) - set(model.model_fields))
    if unknown:
        raise ValidationError(f"Unknown {model.__name__.lower()} fields: {', '.join(unknown)}", {"fields": unknown})

    updated = build_record(model, {**current.model_dump(), **updates})
    changes = []
    for name in updates:
        old = current.model_dump(mode="json", include={name})[name]
        new = updated.model_dump(mode="json", include={name})[name]
        if old != new:
            changes.append(FieldChange(field=name, old_value=old, new_value=new))
    return updated, changes
