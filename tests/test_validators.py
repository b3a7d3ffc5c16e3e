"""Tests for validation module."""

from entity_model.infrastructure.validation import normalize_language_code


class TestNormalizeLanguageCode:
    """Tests for normalize_language_code function."""

    def test_lower_case_is_upper_cased(self):
        """Test that lower case codes are upper cased."""
        assert normalize_language_code("fr") == "FR"
        assert normalize_language_code("en") == "EN"

    def test_mixed_case_is_upper_cased(self):
        """Test that mixed case codes and regions are upper cased."""
        assert normalize_language_code("pt-br") == "PT-BR"
        assert normalize_language_code("zh_Hant") == "ZH_HANT"

    def test_upper_case_is_unchanged(self):
        """Test that upper case codes are returned as is."""
        assert normalize_language_code("NL") == "NL"

    def test_none_is_kept(self):
        """Test that a missing code stays missing."""
        assert normalize_language_code(None) is None

    def test_syntax_is_not_checked(self):
        """Test that only the case is changed, never the content."""
        assert normalize_language_code("") == ""
        assert normalize_language_code(" fr ") == " FR "
