"""Field definitions and registries for entity classes."""

from .base import FieldDefinition
from .registry import FieldRegistry, field_kind_for, registry_for

__all__ = [
    "FieldDefinition",
    "FieldRegistry",
    "field_kind_for",
    "registry_for",
]
