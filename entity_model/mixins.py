"""Timestamp and metadata mixins, and the entity bases combining them."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import Field, JsonValue

from .entity_base import Entity, EntityModel


def utcnow() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(UTC)


class CreationDateMixin(EntityModel):
    """Adds a ``creation_date`` to an entity."""

    creation_date: datetime | None = Field(default=None, description="When the entity was created")

    def mark_created(self, when: datetime | None = None) -> None:
        """Set ``creation_date`` unless the entity already has one."""
        if self.creation_date is None:
            self.creation_date = when or utcnow()


class UpdateDateMixin(EntityModel):
    """Adds an ``update_date`` to an entity."""

    update_date: datetime | None = Field(default=None, description="When the entity was last updated")

    def touch(self, when: datetime | None = None) -> None:
        """Set ``update_date`` to ``when``, or to now."""
        self.update_date = when or utcnow()


class MetadataMixin(EntityModel):
    """Adds a JSON object valued ``metadata`` container to an entity.

    Values must be representable as JSON; anything else is rejected by
    validation when assigned.
    """

    metadata: dict[str, JsonValue] | None = Field(default=None, description="Free form JSON metadata")

    def get_metadata_value(self, key: str, default: Any = None) -> Any:
        """Return metadata ``key``, or ``default`` when missing."""
        if self.metadata is None:
            return default
        return self.metadata.get(key, default)

    def set_metadata_value(self, key: str, value: JsonValue) -> None:
        """Set metadata ``key``, creating the container if needed.

        The whole mapping is reassigned so the new value is validated.
        """
        self.metadata = {**(self.metadata or {}), key: value}


class EntityWithCreationDate(CreationDateMixin, Entity):
    """Entity with a creation date."""


class EntityWithCreationDateAndUpdateDate(UpdateDateMixin, CreationDateMixin, Entity):
    """Entity with creation and update dates."""
