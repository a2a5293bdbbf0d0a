"""Plant Nurse Species Catalog — loads species YAML files."""

import logging
from pathlib import Path

import yaml

from plantnurse.core.types import Issue

logger = logging.getLogger("plantnurse.catalog")

_DEFAULT_KNOWLEDGE_DIR = Path(__file__).parent.parent / "knowledge"


class SpeciesCatalog:
    """Loads and queries the static species reference table."""

    def __init__(self, knowledge_dir: str | Path | None = None):
        self.knowledge_dir = Path(knowledge_dir) if knowledge_dir else _DEFAULT_KNOWLEDGE_DIR
        self._species: dict[str, dict] = {}
        self._load_all()

    def _load_all(self) -> None:
        """Load all species YAML files."""
        species_dir = self.knowledge_dir / "species"
        if species_dir.exists():
            for path in sorted(species_dir.glob("*.yaml")):
                try:
                    data = yaml.safe_load(path.read_text(encoding="utf-8"))
                except yaml.YAMLError as e:
                    logger.error(f"Failed to load species {path}: {e}")
                    continue
                if data and "species_id" in data:
                    self._species[data["species_id"]] = data
                    logger.debug(f"Loaded species: {data['species_id']}")

        logger.info(f"Species catalog loaded: {len(self._species)} species")

    def has_species(self, species_id: str | None) -> bool:
        return species_id in self._species

    def get_species_ids(self) -> list[str]:
        """Return ids of all known species."""
        return list(self._species.keys())

    def get_species(self, species_id: str) -> dict | None:
        """Get full catalog entry for a species."""
        return self._species.get(species_id)

    def search(self, query: str) -> list[dict]:
        """Find species by common name, scientific name or alias (case-insensitive)."""
        needle = query.strip().lower()
        if not needle:
            return list(self._species.values())
        results = []
        for species in self._species.values():
            names = [species.get("common_name", ""), species.get("scientific_name", "")]
            names.extend(species.get("aliases", []))
            if any(needle in name.lower() for name in names):
                results.append(species)
        return results

    def get_check_frequency(self, species_id: str) -> int | None:
        """Days between expected check-ins, or None if the species is unknown."""
        species = self._species.get(species_id)
        if not species:
            return None
        return species.get("watering", {}).get("check_frequency")

    def get_common_issues(self, species_id: str) -> list[Issue]:
        """Get the symptom/cause/solution table for a species."""
        species = self._species.get(species_id)
        if not species:
            return []
        return [Issue(**entry) for entry in species.get("common_issues", [])]
