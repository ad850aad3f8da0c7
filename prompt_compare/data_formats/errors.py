"""Exceptions raised while turning a payload into prompt records."""

from __future__ import annotations


class IngestError(Exception):
    """Base class for ingestion failures."""


class ParseError(IngestError):
    """The payload is not structurally valid for its format.

    Attributes:
        line: 1-based line number where parsing stopped, if known.
    """

    def __init__(self, message: str, line: int | None = None) -> None:
        self.line = line
        if line is not None:
            message = f"{message} (line {line})"
        super().__init__(message)


class EmptyInputError(IngestError):
    """The payload has no header columns or no data rows."""
