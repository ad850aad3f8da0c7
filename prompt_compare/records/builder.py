"""
PromptRecord model and projection from parsed rows.

RecordBuilder turns header-keyed row mappings into fixed-shape records as
early as possible so the session and UI only ever see PromptRecord.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

from prompt_compare.records.roles import ColumnRoleAssignment

PREVIEW_LENGTH = 50


def truncate(text: str, max_len: int) -> str:
    """
    Truncate text to a maximum length, adding ellipsis if truncated.

    Args:
        text: The text to truncate.
        max_len: Maximum length of the output string (including ellipsis).

    Returns:
        The truncated string with ellipsis if it exceeded max_len,
        otherwise the original string.

    Examples:
        >>> truncate("Hello, World!", 10)
        'Hello, ...'
        >>> truncate("Short", 10)
        'Short'
    """
    if len(text) <= max_len:
        return text
    if max_len <= 3:
        return text[:max_len]
    return text[: max_len - 3] + "..."


@dataclass(frozen=True)
class PromptRecord:
    """One before/after pair.

    Attributes:
        id: Position of the source row, starting at 0.
        before: "Before" text; empty string if the cell was absent.
        after: "After" text; empty string if the cell was absent.
        label: Display label, or None when no label column was found.
    """

    id: int
    before: str
    after: str
    label: str | None = None

    @property
    def title(self) -> str:
        """Label for list display; falls back to 'Prompt <n>' (1-based)."""
        return self.label or f"Prompt {self.id + 1}"

    def preview(self, max_len: int = PREVIEW_LENGTH) -> str:
        """Single-line excerpt of the before text."""
        return truncate(" ".join(self.before.split()), max_len)


def build_record(
    index: int, row: Mapping[str, str], roles: ColumnRoleAssignment
) -> PromptRecord:
    """Project a single row into a PromptRecord.

    Args:
        index: Zero-based row position, used as the record id.
        row: Header -> cell text mapping.
        roles: Resolved column roles.

    Returns:
        The PromptRecord for this row.
    """
    label = None
    if roles.label_key is not None and roles.label_key in row:
        label = row[roles.label_key]

    return PromptRecord(
        id=index,
        before=_cell(row, roles.before_key),
        after=_cell(row, roles.after_key),
        label=label,
    )


def _cell(row: Mapping[str, str], key: str | None) -> str:
    if key is None:
        return ""
    return row.get(key) or ""


def build_records(
    rows: Sequence[Mapping[str, str]], roles: ColumnRoleAssignment
) -> list[PromptRecord]:
    """Project parsed rows into PromptRecords, preserving row order.

    Args:
        rows: Row mappings from a RawTable.
        roles: Resolved column roles.

    Returns:
        One PromptRecord per row with ids 0..N-1.

    Examples:
        >>> roles = ColumnRoleAssignment(before_key="b", after_key="a")
        >>> build_records([{"b": "old", "a": "new"}], roles)
        [PromptRecord(id=0, before='old', after='new', label=None)]
    """
    return [build_record(i, row, roles) for i, row in enumerate(rows)]
