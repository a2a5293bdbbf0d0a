"""
Shared test fixtures for the Plant Nurse test suite.

Provides:
- A frozen, manually advanced clock
- In-memory storage (fresh per test)
- The species catalog shipped with the package
- A PlantNurse facade wired to all of the above
"""

import logging
from datetime import datetime, timedelta, timezone

import pytest

from plantnurse.core.catalog import SpeciesCatalog
from plantnurse.core.errors import StorageWriteError
from plantnurse.core.nurse import PlantNurse
from plantnurse.core.storage import InMemoryStorage
from plantnurse.core.types import DEFAULT_ROOM_ID

logging.getLogger("plantnurse").setLevel(logging.WARNING)

START = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)


class FrozenClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime = START):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


class FlakyStorage(InMemoryStorage):
    """In-memory storage whose writes can be switched to fail."""

    def __init__(self):
        super().__init__()
        self.fail = False

    def save(self, snapshot):
        if self.fail:
            raise StorageWriteError("Storage quota exceeded")
        super().save(snapshot)


@pytest.fixture()
def clock():
    return FrozenClock()


@pytest.fixture(scope="session")
def catalog():
    return SpeciesCatalog()


@pytest.fixture()
def storage():
    return FlakyStorage()


@pytest.fixture()
def nurse(storage, catalog, clock):
    return PlantNurse(storage, catalog=catalog, clock=clock)


@pytest.fixture()
def living_room(nurse):
    return nurse.add_room({"name": "Living Room", "light_level": "bright-indirect", "temperature": "warm"})


@pytest.fixture()
def pothos(nurse):
    """A catalog plant checked every 7 days, in the default room."""
    return nurse.add_plant({"species_id": "pothos", "custom_name": "Fred", "room_id": DEFAULT_ROOM_ID})


@pytest.fixture()
def fern(nurse):
    """A custom plant checked every 4 days."""
    return nurse.add_plant({
        "is_custom": True,
        "custom_name": "Boston",
        "room_id": DEFAULT_ROOM_ID,
        "custom_scientific_name": "Nephrolepis exaltata",
        "custom_check_frequency": 4,
    })
