"""Plant Nurse Issue Matcher — maps the latest check-in onto a species' common issues."""

import logging
from typing import Callable

from plantnurse.core.catalog import SpeciesCatalog
from plantnurse.core.types import CheckIn, Issue, LeafCondition, Plant, SoilMoisture

logger = logging.getLogger("plantnurse.issues")

WATERLOGGED = {SoilMoisture.SOGGY, SoilMoisture.WET}
WATERLOGGED_KEYWORDS = ("yellow", "mushy", "rot")

# Leaf condition → test on the lower-cased symptom text
LEAF_SYMPTOM_MATCHERS: dict[LeafCondition, Callable[[str], bool]] = {
    LeafCondition.YELLOWING: lambda s: "yellow" in s,
    LeafCondition.BROWN_TIPS: lambda s: "brown" in s and "tip" in s,
    LeafCondition.BROWN_EDGES: lambda s: "brown" in s and "edge" in s,
    LeafCondition.DROOPING: lambda s: "droop" in s,
    LeafCondition.WILTING: lambda s: "wilt" in s,
    LeafCondition.SPOTTED: lambda s: "spot" in s,
    LeafCondition.CRISPY: lambda s: "crisp" in s or "dry" in s,
}


def symptom_matches(symptom: str, check_in: CheckIn) -> bool:
    text = symptom.lower()
    if check_in.soil_moisture in WATERLOGGED and any(k in text for k in WATERLOGGED_KEYWORDS):
        return True
    for condition in check_in.leaf_condition:
        matcher = LEAF_SYMPTOM_MATCHERS.get(condition)
        if matcher and matcher(text):
            return True
    return False


def match_issues(issues: list[Issue], check_in: CheckIn | None) -> list[Issue]:
    """Issues from the table that fit the check-in, in table order, each at most once."""
    if check_in is None:
        return []
    return [issue for issue in issues if symptom_matches(issue.symptom, check_in)]


def get_relevant_issues(
    plant: Plant,
    check_ins: list[CheckIn],
    catalog: SpeciesCatalog,
) -> list[Issue]:
    """Catalog issues suggested by the plant's most recent check-in.

    Custom plants have no catalog table and never match.
    """
    if plant.is_custom or not plant.species_id or not check_ins:
        return []
    latest = max(check_ins, key=lambda c: c.date)
    matched = match_issues(catalog.get_common_issues(plant.species_id), latest)
    if matched:
        logger.debug(f"Plant {plant.id}: {len(matched)} matching issue(s) for check-in {latest.id}")
    return matched
