"""Tests for column role inference in prompt_compare/records/roles.py."""

from __future__ import annotations

import pytest

from prompt_compare.records import (
    ColumnRoleAssignment,
    is_after_header,
    is_before_header,
    is_label_header,
    normalize_header,
    resolve_column_roles,
)


class TestPredicates:
    """Tests for the keyword predicates on normalized headers."""

    def test_normalize_header(self):
        assert normalize_header("  Before Prompt \t") == "before prompt"

    @pytest.mark.parametrize("header", ["before", "prompt_before", "old", "original"])
    def test_before_matches(self, header):
        assert is_before_header(header)

    @pytest.mark.parametrize("header", ["old prompt", "originals", "previous"])
    def test_before_non_matches(self, header):
        """'old' and 'original' must match exactly, not as substrings."""
        assert not is_before_header(header)

    @pytest.mark.parametrize("header", ["after", "after_v2", "new", "updated"])
    def test_after_matches(self, header):
        assert is_after_header(header)

    @pytest.mark.parametrize("header", ["new prompt", "update"])
    def test_after_non_matches(self, header):
        assert not is_after_header(header)

    @pytest.mark.parametrize("header", ["label", "name", "id", "prompt_id", "valid"])
    def test_label_matches(self, header):
        """Label matching is by substring, so 'valid' matches through 'id'."""
        assert is_label_header(header)


class TestResolveColumnRoles:
    """Tests for resolve_column_roles()."""

    def test_plain_before_after(self):
        roles = resolve_column_roles(["before", "after"])
        assert roles == ColumnRoleAssignment(before_key="before", after_key="after")
        assert roles.label_key is None

    def test_old_new_id_uses_fallback_and_label(self):
        """'Old Prompt'/'New Prompt' match no predicate and fall back positionally."""
        roles = resolve_column_roles(["Old Prompt", "New Prompt", "ID"])
        assert roles.before_key == "Old Prompt"
        assert roles.after_key == "New Prompt"
        assert roles.label_key == "ID"

    def test_last_before_match_wins(self):
        """With two before-matching headers the right-most one is chosen."""
        roles = resolve_column_roles(["before_v1", "before_v2"])
        assert roles.before_key == "before_v2"
        assert roles.after_key == "before_v2"

    def test_last_after_and_label_match_wins(self):
        roles = resolve_column_roles(["name", "before", "after", "label", "After 2"])
        assert roles.before_key == "before"
        assert roles.after_key == "After 2"
        assert roles.label_key == "label"

    def test_positional_fallback(self):
        roles = resolve_column_roles(["colA", "colB"])
        assert roles.before_key == "colA"
        assert roles.after_key == "colB"
        assert roles.label_key is None

    def test_single_column(self):
        """One header: before falls back to it, after stays unset."""
        roles = resolve_column_roles(["text"])
        assert roles.before_key == "text"
        assert roles.after_key is None

    def test_single_matching_after_column(self):
        """With only an after column, before falls back to that same header."""
        roles = resolve_column_roles(["after"])
        assert roles.before_key == "after"
        assert roles.after_key == "after"

    def test_original_keys_kept(self):
        """Matching uses normalized text but stores the header as authored."""
        roles = resolve_column_roles(["  OLD ", " Updated"])
        assert roles.before_key == "  OLD "
        assert roles.after_key == " Updated"

    def test_exclusive_chain(self):
        """A header matching several predicates only takes the first role."""
        roles = resolve_column_roles(["before_after_id", "x"])
        assert roles.before_key == "before_after_id"
        assert roles.after_key == "x"
        assert roles.label_key is None

    def test_fallback_ignores_other_roles(self):
        """Positional fallback may pick a header already used as label."""
        roles = resolve_column_roles(["id", "before"])
        assert roles.before_key == "before"
        assert roles.after_key == "before"
        assert roles.label_key == "id"

    def test_no_headers(self):
        assert resolve_column_roles([]) == ColumnRoleAssignment()
