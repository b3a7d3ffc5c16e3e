"""Common fixtures for entity_model tests."""

import pytest

from entity_model import Translation
from tests.sample_entities import City


@pytest.fixture
def fr_translation():
    """French overlay for a City."""
    return Translation(language_code="fr", attribute_translations={"name": "Londres"})


@pytest.fixture
def nl_translation():
    """Dutch overlay for a City."""
    return Translation(language_code="nl", attribute_translations={"name": "Londen"})


@pytest.fixture
def city():
    """A neutral City authored in English, without overlays."""
    return City(id=1, default_language_code="EN", name="London", language="English", population=100)


@pytest.fixture
def translated_city(city, fr_translation, nl_translation):
    """The City fixture with French and Dutch overlays registered."""
    city.set_translation(fr_translation)
    city.set_translation(nl_translation)
    return city
