from __future__ import annotations

import pytest

from demerits.config import config_for_dir
from demerits.services.person import Person

VALID_ID = "23#@abABXY"
VALID_ADDRESS = "12|Main St|Melbourne|Victoria|Australia"
ADULT_BIRTHDATE = "01-01-1990"


@pytest.fixture
def config(tmp_path):
    return config_for_dir(tmp_path)


@pytest.fixture
def make_person(config):
    def factory(
        person_id: str = VALID_ID,
        first_name: str = "Alice",
        last_name: str = "Nguyen",
        address: str = VALID_ADDRESS,
        birthdate: str = ADULT_BIRTHDATE,
    ) -> Person:
        return Person(person_id, first_name, last_name, address, birthdate, config=config)

    return factory
