"""Sample entities shared by the entity_model tests."""

from entity_model import (
    TranslatableEntity,
    TranslatableEntityWithCreationDate,
    TranslatableEntityWithCreationDateAndUpdateDate,
)


class City(TranslatableEntity):
    """Sample translatable entity."""

    name: str | None = None
    language: str | None = None
    population: int | None = None


class DatedCity(TranslatableEntityWithCreationDate):
    """Sample translatable entity with a creation date."""

    name: str | None = None
    population: int | None = None


class FullyDatedCity(TranslatableEntityWithCreationDateAndUpdateDate):
    """Sample translatable entity with creation and update dates."""

    name: str | None = None
    population: int | None = None
