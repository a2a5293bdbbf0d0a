"""Rooms router — CRUD endpoints."""

from fastapi import APIRouter, Depends

from plantnurse.api.deps import get_nurse
from plantnurse.api.schemas import RoomCreate, RoomResponse, RoomUpdate, StatusResponse
from plantnurse.core.nurse import PlantNurse
from plantnurse.core.types import Room

router = APIRouter()


def _room_response(room: Room, nurse: PlantNurse) -> RoomResponse:
    return RoomResponse(**room.model_dump(), plant_count=nurse.rooms.count_plants(room.id))


@router.post("", response_model=RoomResponse, status_code=201)
async def create_room(body: RoomCreate, nurse: PlantNurse = Depends(get_nurse)):
    return _room_response(nurse.add_room(body.model_dump()), nurse)


@router.get("", response_model=list[RoomResponse])
async def list_rooms(nurse: PlantNurse = Depends(get_nurse)):
    """List rooms with how many plants live in each."""
    counts = nurse.get_room_plant_counts()
    return [RoomResponse(**r.model_dump(), plant_count=counts.get(r.id, 0)) for r in nurse.list_rooms()]


@router.get("/{room_id}", response_model=RoomResponse)
async def get_room(room_id: str, nurse: PlantNurse = Depends(get_nurse)):
    return _room_response(nurse.get_room(room_id), nurse)


@router.patch("/{room_id}", response_model=RoomResponse)
async def update_room(room_id: str, body: RoomUpdate, nurse: PlantNurse = Depends(get_nurse)):
    room = nurse.update_room(room_id, body.model_dump(exclude_unset=True))
    return _room_response(room, nurse)


@router.delete("/{room_id}", response_model=StatusResponse)
async def remove_room(room_id: str, nurse: PlantNurse = Depends(get_nurse)):
    """Remove an empty, non-default room."""
    nurse.remove_room(room_id)
    return StatusResponse(status="ok", message="Room removed")
