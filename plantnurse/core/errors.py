"""Plant Nurse error taxonomy."""

from typing import Any


class PlantNurseError(Exception):
    """Base class for every error raised by the core."""

    code = "PLANT_NURSE_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "details": self.details}


class ValidationError(PlantNurseError):
    """A required field is missing or blank, or a value is out of range."""

    code = "VALIDATION_ERROR"


class NotFoundError(PlantNurseError):
    """A command referenced a plant or room id that does not exist."""

    code = "NOT_FOUND"

    def __init__(self, kind: str, entity_id: str):
        super().__init__(f"{kind.capitalize()} not found: {entity_id}", {"kind": kind, "id": entity_id})
        self.kind = kind
        self.entity_id = entity_id


class InvariantViolation(PlantNurseError):
    """The command would break a multi-entity consistency rule."""

    code = "INVARIANT_VIOLATION"


class StorageWriteError(PlantNurseError):
    """The durable write failed; in-memory state was left untouched."""

    code = "STORAGE_WRITE_ERROR"
