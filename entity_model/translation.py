"""Translation record: one language's values for an entity's string fields."""

from __future__ import annotations

from pydantic import Field, field_validator

from .constants import ATTRIBUTE_TRANSLATION_NOT_FOUND
from .entity_base import EntityModel
from .infrastructure.errors import AttributeTranslationNotFoundError
from .infrastructure.validation import normalize_language_code


class Translation(EntityModel):
    """Attribute values of an entity in one language.

    The language code is stored upper cased, whatever case it is given in,
    both on construction and on assignment.

    Attributes:
        language_code: Language of the translated values.
        attribute_translations: Field name -> translated string value, None
            for a field that was unset in this language.

    Example:
        >>> translation = Translation(language_code="fr")
        >>> translation.set_attribute_translation("name", "Londres")
        >>> translation.language_code
        'FR'
        >>> translation.get_attribute_translation("name")
        'Londres'
    """

    language_code: str | None = Field(default=None, description="Language of the translated values")
    attribute_translations: dict[str, str | None] = Field(
        default_factory=dict,
        description="Field name -> translated string value, None for an unset field",
    )

    @field_validator("language_code")
    @classmethod
    def _normalize_language_code(cls, value: str | None) -> str | None:
        return normalize_language_code(value)

    def get_attribute_translation(self, attribute_name: str) -> str | None:
        """Return the translated value of ``attribute_name``.

        None is returned when the field was unset in that language, which is
        how an overlay records a displaced ``None`` value.

        Raises:
            AttributeTranslationNotFoundError: If no value is held for the attribute.
        """
        if attribute_name not in self.attribute_translations:
            raise AttributeTranslationNotFoundError(ATTRIBUTE_TRANSLATION_NOT_FOUND.format(name=attribute_name))
        return self.attribute_translations[attribute_name]

    def set_attribute_translation(self, attribute_name: str, attribute_value: str | None) -> None:
        """Set (or replace) the translated value of ``attribute_name``.

        The mapping is reassigned so the value is validated like any other
        field assignment.
        """
        self.attribute_translations = {**self.attribute_translations, attribute_name: attribute_value}
