"""
Delimited-text table loaders.

This module provides parse_table() for turning CSV-style text into a
RawTable, plus CSVLoader and TSVLoader wrapping it for file payloads.

Parsing follows standard quoting rules: a quoted field may contain the
delimiter, newlines, or a doubled quote character. The reader runs in
strict mode so unterminated quotes are reported instead of swallowed.
"""

from __future__ import annotations

import csv
import io
from typing import Iterator

from prompt_compare.data_formats.base import RawTable, TableLoader
from prompt_compare.data_formats.errors import EmptyInputError, ParseError

BYTE_ORDER_MARK = "\ufeff"

DEFAULT_DELIMITER = ","

# Delimiters tried by guess_delimiter(), in priority order
DELIMITER_CANDIDATES: tuple[str, ...] = (",", "\t", "|", ";")

# Number of non-empty records inspected when guessing the delimiter
SNIFF_SAMPLE_ROWS = 10

# Largest value the C long behind csv.field_size_limit accepts on every platform
MAX_FIELD_SIZE = 2**31 - 1

# Prompt cells routinely exceed the reader default of 128 KiB
csv.field_size_limit(MAX_FIELD_SIZE)


def decode_payload(data: bytes) -> str:
    """Decode raw file bytes as UTF-8, dropping a leading byte-order mark.

    Args:
        data: Raw file content.

    Returns:
        The decoded text.

    Raises:
        ParseError: If the bytes are not valid UTF-8.
    """
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ParseError(f"Payload is not valid UTF-8 text: {e.reason}") from e


def _is_blank(row: list[str]) -> bool:
    """True for a record with no content, such as a line holding only '""'."""
    return not row or row == [""]


def guess_delimiter(
    text: str, candidates: tuple[str, ...] = DELIMITER_CANDIDATES
) -> str:
    """Pick the delimiter that splits the first records most consistently.

    Each candidate is used to read up to SNIFF_SAMPLE_ROWS non-empty
    records. Candidates averaging fewer than two fields per record are
    discarded; among the rest the one whose field count changes least
    from record to record wins, earlier candidates winning ties.

    Args:
        text: Delimited text to inspect.
        candidates: Delimiters to try, in priority order.

    Returns:
        The chosen delimiter, or DEFAULT_DELIMITER if none qualifies.

    Examples:
        >>> guess_delimiter("before\\tafter\\nx\\ty\\n")
        '\\t'
        >>> guess_delimiter("before\\nx\\n")
        ','
    """
    best = DEFAULT_DELIMITER
    best_delta: int | None = None

    for candidate in candidates:
        counts: list[int] = []
        reader = csv.reader(io.StringIO(text, newline=""), delimiter=candidate)
        try:
            for row in reader:
                if _is_blank(row):
                    continue
                counts.append(len(row))
                if len(counts) >= SNIFF_SAMPLE_ROWS:
                    break
        except csv.Error:
            continue

        if not counts or sum(counts) / len(counts) < 2:
            continue

        delta = sum(abs(b - a) for a, b in zip(counts, counts[1:]))
        if best_delta is None or delta < best_delta:
            best, best_delta = candidate, delta

    return best


def _read_rows(text: str, delimiter: str) -> Iterator[list[str]]:
    """Yield non-empty records, converting reader errors to ParseError."""
    reader = csv.reader(
        io.StringIO(text, newline=""), delimiter=delimiter, strict=True
    )
    try:
        for row in reader:
            if not _is_blank(row):
                yield row
    except csv.Error as e:
        raise ParseError(f"Malformed delimited text: {e}", line=reader.line_num) from e


def parse_table(text: str, delimiter: str | None = None) -> RawTable:
    """Parse delimited text into a RawTable.

    The first non-empty record is the header row; header cells are kept
    verbatim. Entirely empty lines, and lines whose only content is an
    empty quoted field, are skipped. Each data row is matched
    positionally against the headers (see RawTable.from_cells).

    Args:
        text: Delimited text content.
        delimiter: Field delimiter. None auto-detects via guess_delimiter().

    Returns:
        The parsed RawTable.

    Raises:
        ParseError: If quoting is unterminated or otherwise malformed.
        EmptyInputError: If there is no header row or no data rows.

    Examples:
        >>> table = parse_table('before,after\\n"a, b",c\\n')
        >>> table.headers
        ('before', 'after')
        >>> table.rows[0]["before"]
        'a, b'
    """
    if text.startswith(BYTE_ORDER_MARK):
        text = text[len(BYTE_ORDER_MARK):]

    if delimiter is None:
        delimiter = guess_delimiter(text)

    rows = list(_read_rows(text, delimiter))
    if not rows:
        raise EmptyInputError("No header row found")

    headers, data_rows = rows[0], rows[1:]
    if not data_rows:
        raise EmptyInputError("Header row found but no data rows")

    return RawTable.from_cells(headers, data_rows)


class DelimitedTextLoader(TableLoader):
    """Data loader for delimited text.

    Attributes:
        delimiter: Field delimiter, or None to auto-detect per payload.
    """

    def __init__(self, delimiter: str | None = None) -> None:
        self.delimiter = delimiter

    @property
    def format_name(self) -> str:
        """Return the format name."""
        return "csv"

    @property
    def supported_extensions(self) -> list[str]:
        """Return supported file extensions."""
        return [".csv"]

    def parse(self, data: bytes) -> RawTable:
        """Decode and parse a delimited-text payload.

        Args:
            data: File content as bytes.

        Returns:
            The parsed RawTable.

        Raises:
            ParseError: If the payload is not UTF-8 or quoting is malformed.
            EmptyInputError: If there are no columns or no data rows.
        """
        return parse_table(decode_payload(data), self.delimiter)


class CSVLoader(DelimitedTextLoader):
    """Loader for comma-separated files. The delimiter is auto-detected."""


class TSVLoader(DelimitedTextLoader):
    """Loader for tab-separated files."""

    def __init__(self) -> None:
        super().__init__(delimiter="\t")

    @property
    def format_name(self) -> str:
        return "tsv"

    @property
    def supported_extensions(self) -> list[str]:
        return [".tsv", ".tab"]
