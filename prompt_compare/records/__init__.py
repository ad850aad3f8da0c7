"""
Records module: column role inference and PromptRecord construction.

Usage:
    from prompt_compare.records import ingest_text

    records = ingest_text(open("prompts.csv", encoding="utf-8").read())
    print(records[0].before, records[0].after)
"""

from prompt_compare.records.builder import (
    PREVIEW_LENGTH,
    PromptRecord,
    build_record,
    build_records,
    truncate,
)
from prompt_compare.records.pipeline import (
    ingest_bytes,
    ingest_file,
    ingest_text,
    load_prompt_records,
    records_from_table,
)
from prompt_compare.records.roles import (
    ColumnRoleAssignment,
    is_after_header,
    is_before_header,
    is_label_header,
    normalize_header,
    resolve_column_roles,
)

__all__ = [
    # Column roles
    "ColumnRoleAssignment",
    "resolve_column_roles",
    "normalize_header",
    "is_before_header",
    "is_after_header",
    "is_label_header",
    # Records
    "PromptRecord",
    "PREVIEW_LENGTH",
    "build_record",
    "build_records",
    "truncate",
    # Pipeline
    "records_from_table",
    "ingest_text",
    "ingest_bytes",
    "ingest_file",
    "load_prompt_records",
]
