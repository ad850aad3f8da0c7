"""
Column role inference.

Decides which header supplies the "before" text, which the "after" text,
and which (optionally) a display label. Headers are free text, so the
decision is a keyword heuristic with a fixed resolution order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

BEFORE_EXACT = frozenset(["old", "original"])
AFTER_EXACT = frozenset(["new", "updated"])
LABEL_SUBSTRINGS = ("label", "name", "id")


@dataclass(frozen=True)
class ColumnRoleAssignment:
    """Headers selected for each column role.

    Keys hold the original header strings, not their normalized form.
    before_key and after_key may be equal for degenerate header sets.

    Attributes:
        before_key: Header supplying "before" text, or None.
        after_key: Header supplying "after" text, or None.
        label_key: Header supplying the display label, or None.
    """

    before_key: str | None = None
    after_key: str | None = None
    label_key: str | None = None


def normalize_header(header: str) -> str:
    """Normalize a header for keyword matching only."""
    return header.strip().lower()


def is_before_header(normalized: str) -> bool:
    """Match headers such as 'before', 'Prompt (before)', 'old', 'original'."""
    return "before" in normalized or normalized in BEFORE_EXACT


def is_after_header(normalized: str) -> bool:
    """Match headers such as 'after', 'after_v2', 'new', 'updated'."""
    return "after" in normalized or normalized in AFTER_EXACT


def is_label_header(normalized: str) -> bool:
    """Match headers containing 'label', 'name' or 'id'."""
    return any(word in normalized for word in LABEL_SUBSTRINGS)


def resolve_column_roles(headers: Sequence[str]) -> ColumnRoleAssignment:
    """Infer column roles from a header row.

    Headers are scanned left to right. Each header is tested against the
    before, after and label predicates in that order and takes at most
    one role. A later match for a role replaces an earlier one, so the
    right-most matching header wins. After the scan an unset before role
    falls back to the first header and an unset after role to the second.
    The label role has no fallback.

    Note that the predicates are plain substring/equality tests on the
    normalized header: 'Old Prompt' matches neither 'old' exactly nor any
    substring rule, and 'valid' contains 'id'.

    Args:
        headers: Header row, as authored.

    Returns:
        The resolved ColumnRoleAssignment.

    Examples:
        >>> resolve_column_roles(["before", "after"])
        ColumnRoleAssignment(before_key='before', after_key='after', label_key=None)
        >>> resolve_column_roles(["colA", "colB"]).before_key
        'colA'
        >>> resolve_column_roles(["before_v1", "before_v2"]).before_key
        'before_v2'
    """
    before_key: str | None = None
    after_key: str | None = None
    label_key: str | None = None

    for header in headers:
        normalized = normalize_header(header)
        if is_before_header(normalized):
            before_key = header
        elif is_after_header(normalized):
            after_key = header
        elif is_label_header(normalized):
            label_key = header

    # Positional fallback
    if before_key is None and len(headers) >= 1:
        before_key = headers[0]
    if after_key is None and len(headers) >= 2:
        after_key = headers[1]

    return ColumnRoleAssignment(
        before_key=before_key, after_key=after_key, label_key=label_key
    )
