"""Tests for placeholder extraction."""

from src.checker import extract_placeholders


class TestExtractPlaceholders:
    """Test ``{name}`` extraction."""

    def test_multiple_placeholders(self):
        assert extract_placeholders("Hello {name}, you have {count} items") == {"name", "count"}

    def test_no_placeholders(self):
        assert extract_placeholders("no placeholders") == frozenset()

    def test_duplicates_collapse(self):
        assert extract_placeholders("{a}{a}") == {"a"}

    def test_malformed_braces_do_not_match(self):
        assert extract_placeholders("{ name } {} {open {x-y} close}") == frozenset()

    def test_nested_braces_match_inner_identifier(self):
        assert extract_placeholders("{{name}}") == {"name"}

    def test_case_sensitive(self):
        assert extract_placeholders("{Name} {name}") == {"Name", "name"}

    def test_digits_and_underscores(self):
        assert extract_placeholders("{user_1} {0}") == {"user_1", "0"}

    def test_idempotent(self):
        text = "{b} and {a}"
        assert extract_placeholders(text) == extract_placeholders(text)

    def test_returns_frozenset(self):
        assert isinstance(extract_placeholders("{x}"), frozenset)
