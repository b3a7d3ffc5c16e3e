"""Custom exceptions for the entity model library."""


class EntityModelError(Exception):
    """Base exception for entity_model."""


class NotFoundError(EntityModelError, LookupError):
    """Raised when a lookup by name or language code fails."""


class AttributeNotFoundError(NotFoundError):
    """Raised when an entity does not declare the requested field."""


class AttributeTranslationNotFoundError(NotFoundError):
    """Raised when a translation does not hold the requested attribute."""


class TranslationNotFoundError(NotFoundError):
    """Raised when no translation is registered for a language code."""


class InvalidStateError(EntityModelError):
    """Raised when an operation's precondition on entity state is violated."""


class TranslationModeError(InvalidStateError):
    """Raised when adding a translation to an entity in single language mode."""


class TranslationTypeError(InvalidStateError):
    """Raised when a translation targets a field which is not string typed."""
