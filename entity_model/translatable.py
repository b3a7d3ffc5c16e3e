"""Translatable entities.

A translatable entity displays its string fields in one language at a time.
Values in other languages are kept as Translation overlays keyed by upper case
language code. Applying a translation swaps the overlay's values into the live
fields and stores the values it displaced as an overlay of the language that
was displayed before, so no language's content is ever lost.

The entity is in one of two states:

- neutral: ``translation_language_code`` is None and the live fields hold the
  default language. Overlays may be added with ``set_translation``.
- single language mode: ``translation_language_code`` names the non default
  language currently displayed. Overlays may not be added.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pydantic import Field

from .constants import (
    NO_LANGUAGE_TO_DISPLACE,
    NO_TRANSLATIONS,
    SINGLE_LANGUAGE_MODE,
    TRANSLATION_NOT_REGISTERED,
    TRANSLATION_NOT_STRING,
    FieldKind,
)
from .entity_base import Entity
from .infrastructure.errors import (
    InvalidStateError,
    TranslationModeError,
    TranslationNotFoundError,
    TranslationTypeError,
)
from .infrastructure.validation import normalize_language_code
from .mixins import CreationDateMixin, UpdateDateMixin
from .translation import Translation

_LOGGER = logging.getLogger(__name__)


class TranslatableEntity(Entity):
    """Entity whose string fields can be displayed in several languages.

    ``default_language_code`` and ``translation_language_code`` are stored as
    given. Unlike ``Translation.language_code`` they are not upper cased, so
    callers are expected to pass upper case codes.

    Example:
        >>> class City(TranslatableEntity):
        ...     name: str | None = None
        >>> city = City(id=1, default_language_code="EN", name="London")
        >>> city.set_translation(
        ...     Translation(language_code="fr", attribute_translations={"name": "Londres"})
        ... )
        >>> city.apply_translation("FR")
        >>> city.name, city.translation_language_code
        ('Londres', 'FR')
        >>> city.get_translation("EN").get_attribute_translation("name")
        'London'
    """

    default_language_code: str | None = Field(
        default=None,
        description="Language the live fields are authored in",
    )
    translation_language_code: str | None = Field(
        default=None,
        description="Non default language currently displayed, if any",
    )
    translations: dict[str, Translation] | None = Field(
        default=None,
        description="Overlays keyed by upper case language code",
    )

    def is_translated(self) -> bool:
        """Return True if a translation is applied or any overlay is held."""
        return self.translation_language_code is not None or bool(self.translations)

    def get_translation(self, language_code: str) -> Translation:
        """Return the overlay registered for ``language_code``.

        Raises:
            TranslationNotFoundError: If no overlay is registered for the code.
        """
        if self.translations is None or language_code not in self.translations:
            raise TranslationNotFoundError(TRANSLATION_NOT_REGISTERED.format(language_code=language_code))
        return self.translations[language_code]

    def set_translation(self, translation: Translation) -> None:
        """Register ``translation``, replacing any overlay of the same language.

        Raises:
            TranslationModeError: If the entity is in single language mode.
        """
        if self.translation_language_code is not None:
            raise TranslationModeError(SINGLE_LANGUAGE_MODE)

        if self.translations is None:
            self.translations = {}

        self.translations[normalize_language_code(translation.language_code)] = translation

    def set_translations(self, translations: dict[str, Translation] | None) -> None:
        """Replace the whole overlay collection."""
        self.translations = translations

    def delete_translation(self, language_code: str) -> None:
        """Remove the overlay registered for ``language_code``.

        The collection is left in place even when it becomes empty.

        Raises:
            TranslationNotFoundError: If no overlay is registered for the code.
        """
        if self.translations is None or language_code not in self.translations:
            raise TranslationNotFoundError(TRANSLATION_NOT_REGISTERED.format(language_code=language_code))

        del self.translations[language_code]
        _LOGGER.debug("Deleted translation %s from %s %s", language_code, type(self).__name__, self.id)

    def delete_translations(self, language_codes: Iterable[str] | None) -> None:
        """Remove several overlays at once, or all of them.

        With ``None`` every overlay is dropped. Otherwise every code is checked
        before anything is removed: if one is not registered, nothing is.

        Raises:
            TranslationNotFoundError: Naming the first unregistered code.
        """
        if language_codes is None:
            self.translations = None
            _LOGGER.debug("Deleted all translations from %s %s", type(self).__name__, self.id)
            return

        language_codes = list(language_codes)
        for language_code in language_codes:
            if self.translations is None or language_code not in self.translations:
                raise TranslationNotFoundError(TRANSLATION_NOT_REGISTERED.format(language_code=language_code))

        for language_code in language_codes:
            self.translations.pop(language_code, None)

        _LOGGER.debug(
            "Deleted translations %s from %s %s",
            ", ".join(language_codes),
            type(self).__name__,
            self.id,
        )

    def apply_translation(self, language_code: str) -> None:
        """Display the entity's string fields in ``language_code``.

        The values currently displayed are moved into an overlay tagged with
        the language they were in, and the overlay for ``language_code`` is
        consumed. Applying the default language returns the entity to the
        neutral state; applying the language already displayed does nothing.

        Every field named by the overlay is checked, and every new value is
        validated against a copy of the entity, before any is written, so on
        failure the entity is unchanged.

        Raises:
            InvalidStateError: If no overlay exists for ``language_code``, or
                the displayed language is unknown.
            TranslationTypeError: If the overlay names a non string field.
            AttributeNotFoundError: If the overlay names an undeclared field.
            pydantic.ValidationError: If a translated value violates a field constraint.
        """
        if self.translation_language_code is not None:
            previous_language_code = self.translation_language_code
        else:
            previous_language_code = self.default_language_code

        if previous_language_code == language_code:
            return

        if self.translations is None:
            raise InvalidStateError(NO_TRANSLATIONS)

        if language_code not in self.translations:
            raise InvalidStateError(TRANSLATION_NOT_REGISTERED.format(language_code=language_code))

        if previous_language_code is None:
            raise InvalidStateError(NO_LANGUAGE_TO_DISPLACE)

        translation_to_apply = self.translations[language_code]
        for attribute_name in translation_to_apply.attribute_translations:
            if self.field_kind(attribute_name) is not FieldKind.STRING:
                raise TranslationTypeError(TRANSLATION_NOT_STRING)

        # Field constraints (max_length, strict, non optional) are only checked on assignment
        candidate = self.model_copy()
        for attribute_name, attribute_value in translation_to_apply.attribute_translations.items():
            candidate.set(attribute_name, attribute_value)

        previous_translation = Translation(language_code=previous_language_code)
        for attribute_name, attribute_value in translation_to_apply.attribute_translations.items():
            previous_translation.set_attribute_translation(attribute_name, self.get(attribute_name))
            self.set(attribute_name, attribute_value)

        self.translation_language_code = None
        self.delete_translation(language_code)
        self.set_translation(previous_translation)
        if language_code != self.default_language_code:
            self.translation_language_code = language_code

        _LOGGER.debug(
            "Applied translation %s to %s %s (displaced %s)",
            language_code,
            type(self).__name__,
            self.id,
            previous_language_code,
        )


class TranslatableEntityWithCreationDate(CreationDateMixin, TranslatableEntity):
    """Translatable entity with a creation date."""


class TranslatableEntityWithCreationDateAndUpdateDate(UpdateDateMixin, CreationDateMixin, TranslatableEntity):
    """Translatable entity with creation and update dates."""
