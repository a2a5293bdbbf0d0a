"""Plant Nurse API — dependency injection."""

from fastapi import Request

from plantnurse.core.nurse import PlantNurse


def get_nurse(request: Request) -> PlantNurse:
    """Get the PlantNurse facade from app state."""
    return request.app.state.nurse
