"""Base entity types for domain objects with multi-language string fields."""

from .constants import FieldKind
from .entities import FieldDefinition, FieldRegistry
from .entity_base import Entity, EntityId, EntityModel
from .infrastructure.errors import (
    AttributeNotFoundError,
    AttributeTranslationNotFoundError,
    EntityModelError,
    InvalidStateError,
    NotFoundError,
    TranslationModeError,
    TranslationNotFoundError,
    TranslationTypeError,
)
from .mixins import (
    CreationDateMixin,
    EntityWithCreationDate,
    EntityWithCreationDateAndUpdateDate,
    MetadataMixin,
    UpdateDateMixin,
)
from .models import Action, State
from .translatable import (
    TranslatableEntity,
    TranslatableEntityWithCreationDate,
    TranslatableEntityWithCreationDateAndUpdateDate,
)
from .translation import Translation

__all__ = [
    # Entities
    "EntityModel",
    "Entity",
    "EntityId",
    "EntityWithCreationDate",
    "EntityWithCreationDateAndUpdateDate",
    "CreationDateMixin",
    "UpdateDateMixin",
    "MetadataMixin",
    "Action",
    "State",
    # Translation
    "Translation",
    "TranslatableEntity",
    "TranslatableEntityWithCreationDate",
    "TranslatableEntityWithCreationDateAndUpdateDate",
    # Field registry
    "FieldKind",
    "FieldDefinition",
    "FieldRegistry",
    # Errors
    "EntityModelError",
    "NotFoundError",
    "AttributeNotFoundError",
    "AttributeTranslationNotFoundError",
    "TranslationNotFoundError",
    "InvalidStateError",
    "TranslationModeError",
    "TranslationTypeError",
]
