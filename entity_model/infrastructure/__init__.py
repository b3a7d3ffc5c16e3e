"""Infrastructure layer for the entity model library.

This package contains core infrastructure components:
- Error definitions
- Normalization helpers
"""

from .errors import (
    AttributeNotFoundError,
    AttributeTranslationNotFoundError,
    EntityModelError,
    InvalidStateError,
    NotFoundError,
    TranslationModeError,
    TranslationNotFoundError,
    TranslationTypeError,
)
from .validation import normalize_language_code

__all__ = [
    # Errors
    "EntityModelError",
    "NotFoundError",
    "AttributeNotFoundError",
    "AttributeTranslationNotFoundError",
    "TranslationNotFoundError",
    "InvalidStateError",
    "TranslationModeError",
    "TranslationTypeError",
    # Validation
    "normalize_language_code",
]
