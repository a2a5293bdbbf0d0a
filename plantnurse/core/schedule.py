"""Plant Nurse Schedule Calculator — when is the next check due."""

import logging
from datetime import datetime, timedelta

from plantnurse.core.catalog import SpeciesCatalog
from plantnurse.core.types import CheckIn, Plant, utcnow

logger = logging.getLogger("plantnurse.schedule")

DEFAULT_CHECK_FREQUENCY = 7


def get_check_frequency(
    plant: Plant,
    catalog: SpeciesCatalog | None = None,
    default: int = DEFAULT_CHECK_FREQUENCY,
) -> int:
    """Days between checks: the plant's own value for custom plants, the catalog's otherwise."""
    if plant.is_custom:
        return plant.custom_check_frequency or default
    frequency = catalog.get_check_frequency(plant.species_id) if catalog and plant.species_id else None
    if frequency is None:
        logger.warning(f"No check frequency for species {plant.species_id!r}; using {default} days")
        return default
    return frequency


def get_base_date(plant: Plant, check_ins: list[CheckIn]) -> datetime:
    """Date of the most recent check-in, or when the plant was added."""
    if check_ins:
        return max(c.date for c in check_ins)
    return plant.date_added


def days_since(base: datetime, now: datetime) -> int:
    """Whole days elapsed since `base`, never negative."""
    return max(0, (now - base).days)


def get_next_check_date(plant: Plant, check_ins: list[CheckIn], frequency: int) -> datetime:
    return get_base_date(plant, check_ins) + timedelta(days=frequency)


def is_due(plant: Plant, check_ins: list[CheckIn], frequency: int, now: datetime | None = None) -> bool:
    return get_next_check_date(plant, check_ins, frequency) <= (now or utcnow())
