"""
Issue Matcher Tests
===================
Matching the latest check-in against each species' common issues.
"""

import pytest

from plantnurse.core.issues import match_issues, symptom_matches
from plantnurse.core.types import DEFAULT_ROOM_ID, CheckIn, Issue


def _add(nurse, species_id):
    return nurse.add_plant({"species_id": species_id, "custom_name": species_id, "room_id": DEFAULT_ROOM_ID})


def _symptoms(issues):
    return [issue.symptom for issue in issues]


class TestRelevantIssues:
    @pytest.mark.parametrize(
        "species_id",
        ["snake-plant", "pothos", "zz-plant", "spider-plant", "aloe-vera",
         "monstera", "rubber-plant", "dracaena", "peace-lily", "philodendron",
         "fiddle-leaf-fig", "succulent", "cactus", "fern", "money-tree"],
    )
    def test_yellowing_matches_every_yellow_symptom(self, nurse, catalog, species_id):
        plant = _add(nurse, species_id)
        nurse.add_check_in({"plant_id": plant.id, "leaf_condition": ["yellowing"]})

        expected = [i for i in catalog.get_common_issues(species_id) if "yellow" in i.symptom.lower()]
        assert nurse.get_relevant_issues(plant.id) == expected

    def test_soggy_soil_suggests_rot(self, nurse):
        plant = _add(nurse, "aloe-vera")
        nurse.add_check_in({"plant_id": plant.id, "soil_moisture": "soggy"})
        assert _symptoms(nurse.get_relevant_issues(plant.id)) == ["Brown, mushy leaves"]

    def test_wet_soil_and_yellow_symptom(self, nurse):
        plant = _add(nurse, "snake-plant")
        nurse.add_check_in({"plant_id": plant.id, "soil_moisture": "wet"})
        assert _symptoms(nurse.get_relevant_issues(plant.id)) == ["Yellow, mushy leaves"]

    def test_moist_soil_alone_matches_nothing(self, nurse):
        plant = _add(nurse, "snake-plant")
        nurse.add_check_in({"plant_id": plant.id, "soil_moisture": "moist"})
        assert nurse.get_relevant_issues(plant.id) == []

    def test_brown_edges_and_drooping(self, nurse):
        plant = _add(nurse, "monstera")
        nurse.add_check_in({"plant_id": plant.id, "leaf_condition": ["brown-edges", "drooping"]})
        assert _symptoms(nurse.get_relevant_issues(plant.id)) == ["Brown, crispy edges", "Drooping leaves"]

    def test_brown_tips(self, nurse):
        plant = _add(nurse, "spider-plant")
        nurse.add_check_in({"plant_id": plant.id, "leaf_condition": ["brown-tips"]})
        assert _symptoms(nurse.get_relevant_issues(plant.id)) == ["Brown leaf tips"]

    def test_spotted(self, nurse):
        plant = _add(nurse, "rubber-plant")
        nurse.add_check_in({"plant_id": plant.id, "leaf_condition": ["spotted"]})
        assert _symptoms(nurse.get_relevant_issues(plant.id)) == ["Brown spots on leaves"]

    def test_soggy_cactus(self, nurse):
        plant = _add(nurse, "cactus")
        nurse.add_check_in({"plant_id": plant.id, "soil_moisture": "soggy"})
        assert _symptoms(nurse.get_relevant_issues(plant.id)) == ["Soft, mushy base"]

    def test_crispy_fern_fronds(self, nurse):
        plant = _add(nurse, "fern")
        nurse.add_check_in({"plant_id": plant.id, "leaf_condition": ["crispy"]})
        assert _symptoms(nurse.get_relevant_issues(plant.id)) == ["Brown, crispy fronds"]

    def test_issue_listed_once_when_several_rules_match(self, nurse):
        plant = _add(nurse, "snake-plant")
        nurse.add_check_in({
            "plant_id": plant.id,
            "soil_moisture": "soggy",
            "leaf_condition": ["yellowing", "crispy", "brown-tips"],
        })
        assert _symptoms(nurse.get_relevant_issues(plant.id)) == ["Yellow, mushy leaves", "Brown, crispy tips"]

    def test_only_latest_check_in_is_used(self, nurse, pothos, clock):
        nurse.add_check_in({"plant_id": pothos.id, "leaf_condition": ["drooping"]})
        clock.advance(days=1)
        nurse.add_check_in({"plant_id": pothos.id, "leaf_condition": ["yellowing"]})
        assert _symptoms(nurse.get_relevant_issues(pothos.id)) == ["Yellow leaves"]

    def test_no_check_ins(self, nurse, pothos):
        assert nurse.get_relevant_issues(pothos.id) == []

    def test_custom_plant_never_matches(self, nurse, fern):
        nurse.add_check_in({"plant_id": fern.id, "soil_moisture": "soggy", "leaf_condition": ["yellowing"]})
        assert nurse.get_relevant_issues(fern.id) == []


class TestSymptomMatching:
    @pytest.fixture()
    def table(self):
        return [
            Issue(symptom="Dry, papery leaves", cause="Low humidity", solution="Mist"),
            Issue(symptom="Wilted stems", cause="Heat", solution="Shade"),
            Issue(symptom="Root rot", cause="Overwatering", solution="Repot"),
        ]

    def test_crispy_matches_dry(self, table):
        check_in = CheckIn(plant_id="p", leaf_condition=["crispy"])
        assert _symptoms(match_issues(table, check_in)) == ["Dry, papery leaves"]

    def test_wilting(self, table):
        check_in = CheckIn(plant_id="p", leaf_condition=["wilting"])
        assert _symptoms(match_issues(table, check_in)) == ["Wilted stems"]

    def test_rot_needs_waterlogged_soil(self, table):
        assert match_issues(table, CheckIn(plant_id="p", soil_moisture="dry")) == []
        assert _symptoms(match_issues(table, CheckIn(plant_id="p", soil_moisture="soggy"))) == ["Root rot"]

    def test_healthy_matches_nothing(self, table):
        assert match_issues(table, CheckIn(plant_id="p", leaf_condition=["healthy"])) == []

    def test_no_check_in(self, table):
        assert match_issues(table, None) == []

    def test_case_insensitive(self):
        assert symptom_matches("YELLOWED FOLIAGE", CheckIn(plant_id="p", leaf_condition=["yellowing"]))
