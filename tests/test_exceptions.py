"""Tests for custom exceptions."""

import pytest

from entity_model.infrastructure.errors import (
    AttributeNotFoundError,
    AttributeTranslationNotFoundError,
    EntityModelError,
    InvalidStateError,
    NotFoundError,
    TranslationModeError,
    TranslationNotFoundError,
    TranslationTypeError,
)


def test_base_exception():
    """Test that EntityModelError is the base exception."""
    error = EntityModelError("Test error")
    assert isinstance(error, Exception)
    assert str(error) == "Test error"


def test_not_found_errors_are_lookup_errors():
    """Test that every not found error is a NotFoundError and a LookupError."""
    for error_cls in (AttributeNotFoundError, AttributeTranslationNotFoundError, TranslationNotFoundError):
        error = error_cls("missing")
        assert isinstance(error, NotFoundError)
        assert isinstance(error, LookupError)
        assert isinstance(error, EntityModelError)
        assert str(error) == "missing"


def test_invalid_state_errors_inheritance():
    """Test that state errors inherit from InvalidStateError."""
    for error_cls in (TranslationModeError, TranslationTypeError):
        error = error_cls("bad state")
        assert isinstance(error, InvalidStateError)
        assert isinstance(error, EntityModelError)
        assert not isinstance(error, NotFoundError)


def test_exception_catching():
    """Test that custom exceptions can be caught properly."""
    # Test catching specific exception
    with pytest.raises(TranslationModeError):
        raise TranslationModeError("Test")

    # Test catching base exception
    with pytest.raises(EntityModelError):
        raise TranslationNotFoundError("Test")

    # Test catching as builtin lookup error
    with pytest.raises(LookupError):
        raise AttributeNotFoundError("Test")
