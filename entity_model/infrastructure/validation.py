"""Normalization helpers for the entity model library.

Language codes are only ever case-normalized; their syntax is not checked.
"""

from __future__ import annotations


def normalize_language_code(language_code: str | None) -> str | None:
    """Return the upper case form of a language code.

    Args:
        language_code: Language code in any case, or None.

    Returns:
        The upper cased language code, or None when no code was given.

    Example:
        >>> normalize_language_code("fr")
        'FR'
        >>> normalize_language_code("pt-br")
        'PT-BR'
        >>> normalize_language_code(None) is None
        True
    """
    if language_code is None:
        return None
    return language_code.upper()
