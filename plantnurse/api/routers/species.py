"""Species router — read-only catalog lookups."""

from typing import Any

from fastapi import APIRouter, Depends

from plantnurse.api.deps import get_nurse
from plantnurse.api.schemas import SpeciesSummary
from plantnurse.core.errors import NotFoundError
from plantnurse.core.nurse import PlantNurse

router = APIRouter()


def _summary(species: dict) -> SpeciesSummary:
    return SpeciesSummary(
        species_id=species["species_id"],
        common_name=species.get("common_name", species["species_id"]),
        scientific_name=species.get("scientific_name", ""),
        aliases=species.get("aliases", []),
        care_level=species.get("care_level"),
        check_frequency=species.get("watering", {}).get("check_frequency"),
    )


@router.get("", response_model=list[SpeciesSummary])
async def search_species(q: str = "", nurse: PlantNurse = Depends(get_nurse)):
    """Search by common name, scientific name or alias."""
    return [_summary(s) for s in nurse.search_species(q)]


@router.get("/{species_id}")
async def get_species(species_id: str, nurse: PlantNurse = Depends(get_nurse)) -> dict[str, Any]:
    """Full catalog entry."""
    species = nurse.get_species(species_id)
    if species is None:
        raise NotFoundError("species", species_id)
    return species
