"""Base entity model for all entity_model entities.

Provides the shared pydantic configuration, the ``id`` field and the generic
name based accessor (``get``/``set``) used by translatable entities to swap
live field values.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from .constants import GET_PROPERTY_FAILED, SET_PROPERTY_FAILED, FieldKind
from .entities.registry import FieldRegistry, registry_for
from .infrastructure.errors import AttributeNotFoundError

EntityId = int | str | UUID


# Base model for all entity_model data structures
class EntityModel(BaseModel):
    """Base model for all entity_model data structures.

    Assignments are validated, and fields accept either their Python name or
    their camelCase alias on construction.
    """

    model_config = {
        "validate_assignment": True,
        "populate_by_name": True,
        "alias_generator": to_camel,
    }


class Entity(EntityModel):
    """An object with identity and name based field access.

    Subclasses declare their fields as ordinary pydantic fields. The set of
    declared fields is captured once per class in a FieldRegistry, which
    ``get``, ``set`` and ``field_kind`` consult instead of inspecting the
    instance.

    Example:
        >>> class Country(Entity):
        ...     name: str | None = None
        >>> country = Country(id=1, name="France")
        >>> country.get("name")
        'France'
        >>> country.set("name", "Belgium")
        >>> country.name
        'Belgium'
    """

    id: EntityId | None = Field(default=None, description="Entity identifier")

    @classmethod
    def field_registry(cls) -> FieldRegistry:
        """Return the field registry of this entity class."""
        return registry_for(cls)

    @classmethod
    def has_field(cls, name: str) -> bool:
        """Return True if the entity class declares a field named ``name``."""
        return name in cls.field_registry()

    @classmethod
    def field_kind(cls, name: str) -> FieldKind:
        """Return the declared kind of field ``name``.

        Raises:
            AttributeNotFoundError: If the class declares no such field.
        """
        definition = cls.field_registry().lookup(name)
        if definition is None:
            raise AttributeNotFoundError(GET_PROPERTY_FAILED.format(name=name))
        return definition.kind

    def get(self, name: str) -> Any:
        """Return the live value of field ``name``.

        Raises:
            AttributeNotFoundError: If the entity declares no such field.
        """
        if name not in self.field_registry():
            raise AttributeNotFoundError(GET_PROPERTY_FAILED.format(name=name))
        return getattr(self, name)

    def set(self, name: str, value: Any) -> None:
        """Assign ``value`` to field ``name``.

        The assignment goes through pydantic validation, so a value of the
        wrong type raises ``pydantic.ValidationError``.

        Raises:
            AttributeNotFoundError: If the entity declares no such field.
        """
        if name not in self.field_registry():
            raise AttributeNotFoundError(SET_PROPERTY_FAILED.format(name=name))
        setattr(self, name, value)
