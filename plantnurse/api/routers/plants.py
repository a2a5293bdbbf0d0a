"""Plants router — CRUD, check-ins and derived views."""

from fastapi import APIRouter, Depends

from plantnurse.api.deps import get_nurse
from plantnurse.api.schemas import (
    CheckInCreate,
    PlantCreate,
    PlantResponse,
    PlantUpdate,
    ReorderRequest,
    ScheduleResponse,
    StatusResponse,
    StatusView,
)
from plantnurse.core.nurse import PlantNurse
from plantnurse.core.types import CheckIn, HistoryEntry, Issue, Plant

router = APIRouter()


def _plant_response(plant: Plant, nurse: PlantNurse) -> PlantResponse:
    """Attach the derived care signals to a plant."""
    return PlantResponse(
        **plant.model_dump(),
        status=nurse.get_plant_status(plant.id),
        check_frequency=nurse.get_check_frequency(plant.id),
        days_since_last_check_in=nurse.get_days_since_last_check_in(plant.id),
        next_check_date=nurse.get_next_check_date(plant.id),
    )


@router.post("", response_model=PlantResponse, status_code=201)
async def create_plant(body: PlantCreate, nurse: PlantNurse = Depends(get_nurse)):
    """Add a plant to the collection."""
    plant = nurse.add_plant(body.model_dump())
    return _plant_response(plant, nurse)


@router.get("", response_model=list[PlantResponse])
async def list_plants(nurse: PlantNurse = Depends(get_nurse)):
    """List plants in their saved order."""
    return [_plant_response(p, nurse) for p in nurse.list_plants()]


@router.put("/order", response_model=list[PlantResponse])
async def reorder_plants(body: ReorderRequest, nurse: PlantNurse = Depends(get_nurse)):
    plants = nurse.reorder_plants(body.plant_ids)
    return [_plant_response(p, nurse) for p in plants]


@router.get("/{plant_id}", response_model=PlantResponse)
async def get_plant(plant_id: str, nurse: PlantNurse = Depends(get_nurse)):
    return _plant_response(nurse.get_plant(plant_id), nurse)


@router.patch("/{plant_id}", response_model=PlantResponse)
async def update_plant(plant_id: str, body: PlantUpdate, nurse: PlantNurse = Depends(get_nurse)):
    """Update plant details. Only the fields sent are changed."""
    plant = nurse.update_plant(plant_id, body.model_dump(exclude_unset=True))
    return _plant_response(plant, nurse)


@router.delete("/{plant_id}", response_model=StatusResponse)
async def remove_plant(plant_id: str, nurse: PlantNurse = Depends(get_nurse)):
    """Delete a plant with its check-ins and edit history."""
    nurse.remove_plant(plant_id)
    return StatusResponse(status="ok", message="Plant removed")


@router.get("/{plant_id}/status", response_model=StatusView)
async def get_plant_status(plant_id: str, frequency: int | None = None, nurse: PlantNurse = Depends(get_nurse)):
    check_frequency = frequency or nurse.get_check_frequency(plant_id)
    return StatusView(
        plant_id=plant_id,
        status=nurse.get_plant_status(plant_id, check_frequency),
        check_frequency=check_frequency,
    )


@router.get("/{plant_id}/schedule", response_model=ScheduleResponse)
async def get_plant_schedule(plant_id: str, nurse: PlantNurse = Depends(get_nurse)):
    return ScheduleResponse(
        plant_id=plant_id,
        check_frequency=nurse.get_check_frequency(plant_id),
        days_since_last_check_in=nurse.get_days_since_last_check_in(plant_id),
        next_check_date=nurse.get_next_check_date(plant_id),
        is_due=nurse.is_due(plant_id),
    )


@router.get("/{plant_id}/check-ins", response_model=list[CheckIn])
async def list_check_ins(plant_id: str, nurse: PlantNurse = Depends(get_nurse)):
    """Check-ins, most recent first."""
    return nurse.get_plant_check_ins(plant_id)


@router.post("/{plant_id}/check-ins", response_model=CheckIn, status_code=201)
async def create_check_in(plant_id: str, body: CheckInCreate, nurse: PlantNurse = Depends(get_nurse)):
    fields = body.model_dump(exclude={"condition"})
    fields["plant_id"] = plant_id
    return nurse.add_check_in(fields, condition=body.condition)


@router.get("/{plant_id}/history", response_model=list[HistoryEntry])
async def get_plant_history(plant_id: str, nurse: PlantNurse = Depends(get_nurse)):
    """Creation, check-ins and edits merged, newest first."""
    return nurse.get_plant_history(plant_id)


@router.get("/{plant_id}/issues", response_model=list[Issue])
async def get_relevant_issues(plant_id: str, nurse: PlantNurse = Depends(get_nurse)):
    """Common issues of the species that match the latest check-in."""
    return nurse.get_relevant_issues(plant_id)
