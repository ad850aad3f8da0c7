"""
Comparison session state.

ComparisonSession is the single mutable object behind the UI. It holds
the loaded records, the selected index and the view mode, and changes
only through load(), select(), set_view_mode() and reset().
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from prompt_compare.records import PromptRecord


class ViewMode(Enum):
    """How before/after text is displayed."""

    RENDERED = "rendered"
    RAW = "raw"


class ComparisonSession:
    """Loaded records plus selection and display state.

    Invariant: when records is non-empty, 0 <= selected_index < len(records);
    when empty, selected_index is 0 and current is None.

    Usage:
        session = ComparisonSession()
        session.load(ingest_text(text))
        session.select(2)
        session.set_view_mode(ViewMode.RAW)
        session.current.before
    """

    def __init__(self, view_mode: ViewMode = ViewMode.RENDERED) -> None:
        self._records: tuple[PromptRecord, ...] = ()
        self._selected_index: int = 0
        self._view_mode: ViewMode = view_mode

    @property
    def records(self) -> tuple[PromptRecord, ...]:
        """Loaded records in source row order."""
        return self._records

    @property
    def selected_index(self) -> int:
        """Index of the displayed record."""
        return self._selected_index

    @property
    def view_mode(self) -> ViewMode:
        """Current display mode."""
        return self._view_mode

    @property
    def has_records(self) -> bool:
        return bool(self._records)

    @property
    def record_count(self) -> int:
        return len(self._records)

    @property
    def current(self) -> PromptRecord | None:
        """The displayed record, or None when nothing is loaded."""
        if not self._records:
            return None
        return self._records[self._selected_index]

    @property
    def position_label(self) -> str:
        """Footer text such as 'Viewing 2 of 5'; empty with no records."""
        if not self._records:
            return ""
        return f"Viewing {self._selected_index + 1} of {len(self._records)}"

    def is_valid_index(self, index: int) -> bool:
        """Check whether select(index) would be accepted."""
        return 0 <= index < len(self._records)

    def load(self, records: Iterable[PromptRecord]) -> None:
        """Replace all records and select the first one.

        The view mode is left unchanged. Loading an empty list is allowed.

        Args:
            records: The new records, in display order.
        """
        self._records = tuple(records)
        self._selected_index = 0

    def select(self, index: int) -> None:
        """Select the record at index.

        Args:
            index: Zero-based record index.

        Raises:
            IndexError: If index is out of range. State is left unchanged.
        """
        if not self.is_valid_index(index):
            raise IndexError(
                f"Record index {index} out of range for {len(self._records)} records"
            )
        self._selected_index = index

    def set_view_mode(self, mode: ViewMode | str) -> None:
        """Switch between rendered and raw display.

        Args:
            mode: A ViewMode or its string value ("rendered" or "raw").

        Raises:
            ValueError: If mode is not a known view mode.
        """
        self._view_mode = ViewMode(mode)

    def reset(self) -> None:
        """Drop all records. The view mode is kept."""
        self._records = ()
        self._selected_index = 0

    def __repr__(self) -> str:
        return (
            f"ComparisonSession(records={len(self._records)}, "
            f"selected_index={self._selected_index}, "
            f"view_mode={self._view_mode.value!r})"
        )
