"""Constants and Enums for the entity model library."""

from __future__ import annotations

from enum import StrEnum

# Accessor failures
GET_PROPERTY_FAILED = "Fail to get value of property '{name}' !"
SET_PROPERTY_FAILED = "Fail to set value of property '{name}' !"

# Translation failures
ATTRIBUTE_TRANSLATION_NOT_FOUND = "No attribute named '{name}' has been found in the attribute translations !"
NO_TRANSLATIONS = "No translations associated to the entity !"
TRANSLATION_NOT_REGISTERED = "No translation with the language code '{language_code}' is registered !"
TRANSLATION_NOT_STRING = "Translation attribute values must be of type 'String' !"
SINGLE_LANGUAGE_MODE = "Cannot add a translation for an entity which is already using the 'one language mode' !"
NO_LANGUAGE_TO_DISPLACE = "No default language code is defined, the displayed values cannot be preserved !"


class FieldKind(StrEnum):
    """Declared value kind of an entity field.

    Only STRING fields may receive attribute translations.
    """

    STRING = "string"
    OTHER = "other"
