"""Tests for SQL identifier sanitization."""

import pytest

from csvcombine.sources import (
    DEFAULT_COLUMN_NAME,
    DEFAULT_TABLE_NAME,
    sanitize_column_name,
    sanitize_identifier,
    sanitize_table_name,
)


class TestSanitizeIdentifier:
    """Tests for sanitize_identifier()."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("First Name!", "First_Name"),
            ("123abc", "_123abc"),
            ("customer_id", "customer_id"),
            ("  order  total ", "order_total"),
            ("a--b__c", "a_b__c"),
            ("price ($)", "price"),
            ("2024 revenue", "_2024_revenue"),
            ("_private_", "private"),
            ("Größe", "Gr_e"),
        ],
    )
    def test_sanitizes(self, raw, expected):
        assert sanitize_identifier(raw) == expected

    @pytest.mark.parametrize("raw", ["___", "", "!!!", " ", "-_-"])
    def test_empty_result_uses_default(self, raw):
        assert sanitize_identifier(raw) == DEFAULT_COLUMN_NAME

    def test_custom_default(self):
        assert sanitize_identifier("***", default="fallback") == "fallback"

    def test_never_starts_with_digit(self):
        assert sanitize_identifier("__9lives") == "_9lives"

    def test_collisions_are_not_resolved(self):
        """Distinct inputs may sanitize to the same identifier."""
        assert sanitize_identifier("first name") == sanitize_identifier("first-name")


class TestNameHelpers:
    """Tests for the column and table helpers."""

    def test_column_default(self):
        assert sanitize_column_name("___") == "unnamed_column"
        assert DEFAULT_COLUMN_NAME == "unnamed_column"

    def test_table_default(self):
        assert sanitize_table_name("___") == "default_table"
        assert DEFAULT_TABLE_NAME == "default_table"

    def test_table_name(self):
        assert sanitize_table_name("sales report 2024") == "sales_report_2024"
