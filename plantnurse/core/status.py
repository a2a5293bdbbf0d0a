"""Plant Nurse Status Engine — classifies how urgently a plant needs a look.

Rules are evaluated in order, first match wins:

1. More than 1.5x the check frequency since the last check → needs-attention
2. At least the check frequency → check-soon
3. Less than a day → recently-checked
4. The last two check-ins both reported a concerning leaf condition → may-have-issue
5. Otherwise → recently-checked

Overdue and due thresholds always take precedence over the leaf pattern.
"""

import logging
from datetime import datetime

from plantnurse.core.schedule import days_since, get_base_date
from plantnurse.core.types import CONCERNING_LEAF_CONDITIONS, CheckIn, Plant, PlantStatus, utcnow

logger = logging.getLogger("plantnurse.status")

OVERDUE_FACTOR = 1.5


def has_concerning_leaves(check_in: CheckIn) -> bool:
    return any(condition in CONCERNING_LEAF_CONDITIONS for condition in check_in.leaf_condition)


def classify_status(days: int, frequency: int, check_ins: list[CheckIn]) -> PlantStatus:
    """Classify from elapsed days; `check_ins` must be most recent first."""
    if days > frequency * OVERDUE_FACTOR:
        return PlantStatus.NEEDS_ATTENTION
    if days >= frequency:
        return PlantStatus.CHECK_SOON
    if days < 1:
        return PlantStatus.RECENTLY_CHECKED

    last_two = check_ins[:2]
    if len(last_two) == 2 and all(has_concerning_leaves(c) for c in last_two):
        return PlantStatus.MAY_HAVE_ISSUE
    return PlantStatus.RECENTLY_CHECKED


def get_plant_status(
    plant: Plant,
    check_ins: list[CheckIn],
    frequency: int,
    now: datetime | None = None,
) -> PlantStatus:
    """Status of a plant given its check-ins in any order."""
    recent_first = sorted(check_ins, key=lambda c: c.date, reverse=True)
    days = days_since(get_base_date(plant, recent_first), now or utcnow())
    status = classify_status(days, frequency, recent_first)
    logger.debug(f"Plant {plant.id}: {days} days since last check (every {frequency}) → {status.value}")
    return status
