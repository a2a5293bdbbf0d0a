"""Plant Nurse shared types — enums and domain records."""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


def new_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PlantSize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class PlantCondition(str, Enum):
    HEALTHY = "healthy"
    NEEDS_ATTENTION = "needs-attention"
    STRUGGLING = "struggling"
    JUST_ADDED = "just-added"  # legacy


class LightLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    BRIGHT_INDIRECT = "bright-indirect"
    DIRECT = "direct"


class RoomTemperature(str, Enum):
    COLD = "cold"
    COOL = "cool"
    MODERATE = "moderate"
    WARM = "warm"
    HOT = "hot"


class WindowDirection(str, Enum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    NONE = "none"


class Humidity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SoilMoisture(str, Enum):
    BONE_DRY = "bone-dry"
    DRY = "dry"
    SLIGHTLY_MOIST = "slightly-moist"
    MOIST = "moist"
    WET = "wet"
    SOGGY = "soggy"


class LeafCondition(str, Enum):
    HEALTHY = "healthy"
    DROOPING = "drooping"
    YELLOWING = "yellowing"
    BROWN_TIPS = "brown-tips"
    BROWN_EDGES = "brown-edges"
    SPOTTED = "spotted"
    CRISPY = "crispy"
    WILTING = "wilting"


class CheckInAction(str, Enum):
    WATERED = "watered"
    FERTILIZED = "fertilized"
    ROTATED = "rotated"
    MISTED = "misted"
    PRUNED = "pruned"
    REPOTTED = "repotted"
    NOTHING = "nothing"


class PlantStatus(str, Enum):
    NEEDS_ATTENTION = "needs-attention"  # overdue
    CHECK_SOON = "check-soon"
    RECENTLY_CHECKED = "recently-checked"
    MAY_HAVE_ISSUE = "may-have-issue"


# Leaf conditions that count towards the "may have an issue" pattern
CONCERNING_LEAF_CONDITIONS = frozenset({
    LeafCondition.YELLOWING,
    LeafCondition.BROWN_TIPS,
    LeafCondition.BROWN_EDGES,
    LeafCondition.SPOTTED,
    LeafCondition.CRISPY,
    LeafCondition.WILTING,
})

DEFAULT_ROOM_ID = "default-room"


# ── Records ───────────────────────────────────────────────────────────────────

class _Record(BaseModel):
    model_config = ConfigDict(validate_assignment=True, extra="forbid")


class Room(_Record):
    id: str = Field(default_factory=new_id)
    name: str
    light_level: LightLevel = LightLevel.MEDIUM
    temperature: RoomTemperature = RoomTemperature.MODERATE
    window_direction: WindowDirection | None = None
    humidity: Humidity | None = None
    notes: str | None = None


class Plant(_Record):
    id: str = Field(default_factory=new_id)
    species_id: str | None = None
    custom_name: str
    room_id: str
    size: PlantSize = PlantSize.MEDIUM
    condition: PlantCondition = PlantCondition.HEALTHY
    date_added: datetime = Field(default_factory=utcnow)

    # Custom plant care fields (is_custom=True)
    is_custom: bool = False
    custom_scientific_name: str | None = None
    custom_check_frequency: int | None = Field(None, ge=1)
    custom_light_level: LightLevel | None = None
    custom_care_notes: str | None = None
    custom_leaf_shape: str | None = None
    custom_leaf_size: str | None = None
    custom_growth_pattern: str | None = None
    custom_special_features: list[str] = Field(default_factory=list)

    notes: str | None = None
    photo_url: str | None = None


# Fields an update may never touch
PLANT_IDENTITY_FIELDS = frozenset({"id", "date_added"})
ROOM_IDENTITY_FIELDS = frozenset({"id"})


class CheckIn(_Record):
    id: str = Field(default_factory=new_id)
    plant_id: str
    date: datetime = Field(default_factory=utcnow)
    soil_moisture: SoilMoisture | None = None
    leaf_condition: list[LeafCondition] = Field(default_factory=list)
    actions_taken: list[CheckInAction] = Field(default_factory=list)
    notes: str | None = None
    photo_url: str | None = None

    @field_validator("leaf_condition", "actions_taken")
    @classmethod
    def _unique(cls, values: list) -> list:
        # Sets of values; first occurrence wins
        return list(dict.fromkeys(values))

    def has_observation(self) -> bool:
        """True if anything at all was recorded."""
        return bool(
            self.soil_moisture
            or self.leaf_condition
            or self.actions_taken
            or (self.notes and self.notes.strip())
            or self.photo_url
        )


class FieldChange(_Record):
    field: str
    old_value: Any = None
    new_value: Any = None


class EditRecord(_Record):
    id: str = Field(default_factory=new_id)
    plant_id: str
    date: datetime = Field(default_factory=utcnow)
    changes: list[FieldChange]


class HistoryEntry(BaseModel):
    """One item of the merged plant timeline."""

    type: Literal["created", "check-in", "edit"]
    date: datetime
    data: CheckIn | EditRecord | None = None


class Issue(BaseModel):
    """A row of a species' common-issues table."""

    model_config = ConfigDict(frozen=True)

    symptom: str
    cause: str
    solution: str


class Snapshot(BaseModel):
    """The four persisted collections. Plant order is list order."""

    plants: list[Plant] = Field(default_factory=list)
    rooms: list[Room] = Field(default_factory=list)
    check_ins: list[CheckIn] = Field(default_factory=list)
    edit_records: list[EditRecord] = Field(default_factory=list)
