"""Per-class field registries.

A registry is derived once from the fields a pydantic model class declares and
cached by class. Entities use it to resolve ``get``/``set`` by name and to check
the declared kind of a field without inspecting values at runtime.
"""

from __future__ import annotations

import functools
import logging
import types
from enum import Enum
from typing import Annotated, Any, Union, get_args, get_origin

from pydantic import BaseModel, Field

from ..constants import FieldKind
from .base import FieldDefinition

_LOGGER = logging.getLogger(__name__)


def _unwrap_annotated(annotation: Any) -> Any:
    """Return the type inside any ``Annotated[...]`` wrappers."""
    while get_origin(annotation) is Annotated:
        annotation = get_args(annotation)[0]
    return annotation


def _is_string_type(annotation: Any) -> bool:
    annotation = _unwrap_annotated(annotation)
    return isinstance(annotation, type) and issubclass(annotation, str) and not issubclass(annotation, Enum)


def field_kind_for(annotation: Any) -> FieldKind:
    """Classify a field annotation.

    ``str``, its subclasses and constrained forms such as ``StrictStr`` or
    ``constr(...)``, each optionally unioned with None, are STRING. Enums and
    everything else are OTHER.

    Example:
        >>> field_kind_for(str)
        <FieldKind.STRING: 'string'>
        >>> field_kind_for(StrictStr | None)
        <FieldKind.STRING: 'string'>
        >>> field_kind_for(int)
        <FieldKind.OTHER: 'other'>
    """
    if _is_string_type(annotation):
        return FieldKind.STRING

    if get_origin(annotation) in (Union, types.UnionType):
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(members) == 1 and _is_string_type(members[0]):
            return FieldKind.STRING

    return FieldKind.OTHER


class FieldRegistry(BaseModel):
    """Immutable name -> FieldDefinition table for one model class."""

    model_config = {"frozen": True}

    entity_name: str = Field(..., description="Name of the class the registry describes")
    definitions: dict[str, FieldDefinition] = Field(default_factory=dict)

    @classmethod
    def from_model(cls, model_cls: type[BaseModel]) -> FieldRegistry:
        """Build a registry from the fields declared on a pydantic model class."""
        definitions = {
            name: FieldDefinition(
                name=name,
                alias=info.alias,
                kind=field_kind_for(info.annotation),
            )
            for name, info in model_cls.model_fields.items()
        }
        return cls(entity_name=model_cls.__name__, definitions=definitions)

    def __contains__(self, name: object) -> bool:
        return name in self.definitions

    def __len__(self) -> int:
        return len(self.definitions)

    def names(self) -> list[str]:
        """Return the registered field names in declaration order."""
        return list(self.definitions)

    def lookup(self, name: str) -> FieldDefinition | None:
        """Return the definition for ``name`` or None if it is not declared."""
        return self.definitions.get(name)

    def string_fields(self) -> list[str]:
        """Return the names of all STRING fields."""
        return [name for name, definition in self.definitions.items() if definition.is_string]


@functools.cache
def registry_for(model_cls: type[BaseModel]) -> FieldRegistry:
    """Return the cached registry for ``model_cls``, building it on first use."""
    registry = FieldRegistry.from_model(model_cls)
    _LOGGER.debug(
        "Built field registry for %s (%d fields, %d string)",
        model_cls.__name__,
        len(registry),
        len(registry.string_fields()),
    )
    return registry
