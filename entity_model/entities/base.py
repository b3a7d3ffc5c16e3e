"""Base classes for field definitions."""

from __future__ import annotations

from pydantic import BaseModel, Field

from ..constants import FieldKind


class FieldDefinition(BaseModel):
    """Static description of one field declared on an entity class.

    Attributes:
        name: Python attribute name of the field.
        alias: camelCase alias accepted on construction.
        kind: Declared value kind, decides whether the field is translatable.
    """

    model_config = {"frozen": True}

    name: str = Field(..., min_length=1, description="Python attribute name of the field")
    alias: str | None = Field(default=None, description="camelCase alias accepted on construction")
    kind: FieldKind = Field(default=FieldKind.OTHER, description="Declared value kind of the field")

    @property
    def is_string(self) -> bool:
        """Return True when the field holds string values."""
        return self.kind is FieldKind.STRING
