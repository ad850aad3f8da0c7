"""Tests for PromptRecord construction in prompt_compare/records/builder.py."""

from __future__ import annotations

import dataclasses

import pytest

from prompt_compare.data_formats import parse_table
from prompt_compare.records import (
    ColumnRoleAssignment,
    PromptRecord,
    build_record,
    build_records,
    truncate,
)


class TestBuildRecords:
    """Tests for build_records()."""

    def test_ids_follow_row_order(self):
        rows = [{"b": str(i), "a": str(i * 10)} for i in range(5)]
        roles = ColumnRoleAssignment(before_key="b", after_key="a")

        records = build_records(rows, roles)
        assert [r.id for r in records] == [0, 1, 2, 3, 4]
        assert [r.before for r in records] == ["0", "1", "2", "3", "4"]
        assert records[4].after == "40"

    def test_missing_cells_are_empty(self):
        roles = ColumnRoleAssignment(before_key="b", after_key="a")
        record = build_record(0, {"b": "x"}, roles)
        assert record.after == ""

    def test_unset_after_key(self):
        """Single-column input leaves after empty rather than failing."""
        roles = ColumnRoleAssignment(before_key="text")
        record = build_record(0, {"text": "hello"}, roles)
        assert record.before == "hello"
        assert record.after == ""

    def test_label_when_set(self):
        roles = ColumnRoleAssignment(before_key="b", after_key="a", label_key="id")
        record = build_record(3, {"b": "x", "a": "y", "id": "case-3"}, roles)
        assert record.label == "case-3"

    def test_label_unset_without_label_key(self):
        roles = ColumnRoleAssignment(before_key="b", after_key="a")
        record = build_record(0, {"b": "x", "a": "y", "id": "ignored"}, roles)
        assert record.label is None

    def test_label_key_absent_from_row(self):
        roles = ColumnRoleAssignment(before_key="b", after_key="a", label_key="id")
        record = build_record(0, {"b": "x", "a": "y"}, roles)
        assert record.label is None

    def test_text_kept_verbatim(self):
        """Whitespace and markup should pass through untouched."""
        text = "  # Title\n\n- item  \n"
        roles = ColumnRoleAssignment(before_key="b", after_key="a")
        record = build_record(0, {"b": text, "a": text}, roles)
        assert record.before == text

    def test_with_parsed_table(self):
        table = parse_table("before,after\n1,2\n3\n")
        roles = ColumnRoleAssignment(before_key="before", after_key="after")
        records = build_records(table.rows, roles)
        assert records == [
            PromptRecord(id=0, before="1", after="2"),
            PromptRecord(id=1, before="3", after=""),
        ]

    def test_empty_rows(self):
        assert build_records([], ColumnRoleAssignment(before_key="x")) == []


class TestPromptRecord:
    """Tests for PromptRecord display helpers."""

    def test_records_are_immutable(self):
        record = PromptRecord(id=0, before="a", after="b")
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.before = "changed"

    def test_title_uses_label(self):
        assert PromptRecord(id=0, before="", after="", label="Greeting").title == "Greeting"

    @pytest.mark.parametrize("label", [None, ""])
    def test_title_fallback(self, label):
        """Unset or empty label falls back to a 1-based prompt number."""
        assert PromptRecord(id=4, before="", after="", label=label).title == "Prompt 5"

    def test_preview_single_line(self):
        record = PromptRecord(id=0, before="# Title\n\nBody text", after="")
        assert record.preview() == "# Title Body text"

    def test_preview_truncated(self):
        record = PromptRecord(id=0, before="x" * 80, after="")
        preview = record.preview(20)
        assert len(preview) == 20
        assert preview.endswith("...")


class TestTruncate:
    """Tests for truncate()."""

    def test_short_text_unchanged(self):
        assert truncate("Short", 10) == "Short"

    def test_long_text(self):
        assert truncate("Hello, World!", 10) == "Hello, ..."

    def test_tiny_limit(self):
        assert truncate("Hello", 2) == "He"
