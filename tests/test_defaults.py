# ============================================================================
# DEFAULT RESOLVER TESTS
# ============================================================================
# STATUS: Tests - NOT NULL and DEFAULT resolution
# PURPOSE: Verify per-category default handling
# CREATED: 19 OCT 2026
# ============================================================================
"""
Default Resolver Tests

Run with:
    pytest tests/test_defaults.py -v
"""

import pytest

from core.contracts import StorageCategory
from core.schema.defaults import DefaultErrorKind, NULL_LITERAL, resolve_default


class TestRequired:

    def test_required_is_not_null_without_default(self):
        result = resolve_default(True, "5", StorageCategory.INTEGER)
        assert result.not_null is True
        assert result.default is None
        assert result.ok

    def test_required_blob_default_not_checked(self):
        result = resolve_default(True, "{}", StorageCategory.BLOB)
        assert result.ok
        assert result.default is None


class TestNullDefaults:

    @pytest.mark.parametrize("raw", [None, "NULL", "null"])
    def test_missing_or_null_literal(self, raw):
        result = resolve_default(False, raw, StorageCategory.TEXT)
        assert result.not_null is False
        assert result.default.value == NULL_LITERAL
        assert result.default.category is StorageCategory.UNKNOWN
        assert result.default.is_null
        assert result.default.flags.is_null

    def test_no_default_on_blob_is_null(self):
        result = resolve_default(False, None, StorageCategory.BLOB)
        assert result.ok
        assert result.default.is_null

    def test_unknown_category_resolves_null(self):
        result = resolve_default(False, "abc", StorageCategory.UNKNOWN)
        assert result.ok
        assert result.default.is_null


class TestUnsupported:

    @pytest.mark.parametrize("category", [StorageCategory.BLOB, StorageCategory.JSON])
    def test_blob_and_json_reject_defaults(self, category):
        result = resolve_default(False, "{}", category)
        assert result.not_null is False
        assert result.default is None
        assert result.error is DefaultErrorKind.DEFAULT_NOT_SUPPORTED
        assert not result.ok
        assert "cannot be assigned a default value" in result.message


class TestPassthrough:

    @pytest.mark.parametrize("category, raw", [
        (StorageCategory.INTEGER, "42"),
        (StorageCategory.REAL, "1.5"),
        (StorageCategory.BOOLEAN, "true"),
        (StorageCategory.TEXT, "available"),
        (StorageCategory.DATE, "2026-01-01"),
        (StorageCategory.DECIMAL, "9.99"),
    ])
    def test_raw_value_unchanged(self, category, raw):
        result = resolve_default(False, raw, category)
        assert result.ok
        assert result.default.value == raw
        assert result.default.category is category
        assert not result.default.is_null

    def test_flags_follow_category(self):
        result = resolve_default(False, "42", StorageCategory.INTEGER)
        assert result.default.flags.is_integer
        assert result.default.flags.is_numeric
