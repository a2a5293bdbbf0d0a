"""Plant Nurse API — Pydantic request/response schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from plantnurse.core.types import (
    CheckInAction,
    Humidity,
    LeafCondition,
    LightLevel,
    Plant,
    PlantCondition,
    PlantSize,
    PlantStatus,
    Room,
    RoomTemperature,
    SoilMoisture,
    WindowDirection,
)


# ── Plant schemas ─────────────────────────────────────────────────────────────

class PlantCreate(BaseModel):
    custom_name: str = Field(..., description="User's nickname for the plant")
    room_id: str
    species_id: str | None = Field(None, description="Catalog species id; omit for custom plants")
    is_custom: bool = False
    size: PlantSize = PlantSize.MEDIUM
    condition: PlantCondition = PlantCondition.HEALTHY
    custom_scientific_name: str | None = None
    custom_check_frequency: int | None = Field(None, ge=1)
    custom_light_level: LightLevel | None = None
    custom_care_notes: str | None = None
    custom_leaf_shape: str | None = None
    custom_leaf_size: str | None = None
    custom_growth_pattern: str | None = None
    custom_special_features: list[str] = []
    notes: str | None = None
    photo_url: str | None = None


class PlantUpdate(BaseModel):
    custom_name: str | None = None
    room_id: str | None = None
    species_id: str | None = None
    is_custom: bool | None = None
    size: PlantSize | None = None
    condition: PlantCondition | None = None
    custom_scientific_name: str | None = None
    custom_check_frequency: int | None = Field(None, ge=1)
    custom_light_level: LightLevel | None = None
    custom_care_notes: str | None = None
    custom_leaf_shape: str | None = None
    custom_leaf_size: str | None = None
    custom_growth_pattern: str | None = None
    custom_special_features: list[str] | None = None
    notes: str | None = None
    photo_url: str | None = None


class PlantResponse(Plant):
    status: PlantStatus
    check_frequency: int
    days_since_last_check_in: int
    next_check_date: datetime


class ReorderRequest(BaseModel):
    plant_ids: list[str]


# ── Check-in schemas ──────────────────────────────────────────────────────────

class CheckInCreate(BaseModel):
    soil_moisture: SoilMoisture | None = None
    leaf_condition: list[LeafCondition] = []
    actions_taken: list[CheckInAction] = []
    notes: str | None = None
    photo_url: str | None = None
    condition: PlantCondition | None = Field(None, description="New plant condition, if it changed")


class ScheduleResponse(BaseModel):
    plant_id: str
    check_frequency: int
    days_since_last_check_in: int
    next_check_date: datetime
    is_due: bool


class StatusView(BaseModel):
    plant_id: str
    status: PlantStatus
    check_frequency: int


# ── Room schemas ──────────────────────────────────────────────────────────────

class RoomCreate(BaseModel):
    name: str
    light_level: LightLevel = LightLevel.MEDIUM
    temperature: RoomTemperature = RoomTemperature.MODERATE
    window_direction: WindowDirection | None = None
    humidity: Humidity | None = None
    notes: str | None = None


class RoomUpdate(BaseModel):
    name: str | None = None
    light_level: LightLevel | None = None
    temperature: RoomTemperature | None = None
    window_direction: WindowDirection | None = None
    humidity: Humidity | None = None
    notes: str | None = None


class RoomResponse(Room):
    plant_count: int


# ── Species schemas ───────────────────────────────────────────────────────────

class SpeciesSummary(BaseModel):
    species_id: str
    common_name: str
    scientific_name: str
    aliases: list[str] = []
    care_level: str | None = None
    check_frequency: int | None = None


# ── Generic response ──────────────────────────────────────────────────────────

class ErrorResponse(BaseModel):
    error: dict[str, Any]


# Documented on every router; request-body errors keep FastAPI's own 422 shape
ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    404: {"model": ErrorResponse, "description": "Plant, room or species not found"},
    409: {"model": ErrorResponse, "description": "Would break a room or plant invariant"},
    507: {"model": ErrorResponse, "description": "Durable write failed, nothing was changed"},
}


class StatusResponse(BaseModel):
    status: str
    message: str | None = None
