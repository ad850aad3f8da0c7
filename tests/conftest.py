"""Pytest configuration and shared fixtures for prompt_compare tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from prompt_compare.records import PromptRecord

# Path to fixtures directory
FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def prompts_csv() -> Path:
    """CSV fixture with an id column, multi-line cells and a blank line."""
    return FIXTURES_DIR / "prompts.csv"


@pytest.fixture
def prompts_tsv() -> Path:
    """TSV fixture using old/new/name headers."""
    return FIXTURES_DIR / "prompts.tsv"


@pytest.fixture
def sample_records() -> list[PromptRecord]:
    """Return three records as RecordBuilder would produce them."""
    return [
        PromptRecord(id=0, before="old 0", after="new 0", label="first"),
        PromptRecord(id=1, before="old 1", after="new 1", label=None),
        PromptRecord(id=2, before="old 2", after="new 2", label=""),
    ]


def write_text(path: Path, content: str) -> Path:
    """Helper to write a UTF-8 text file and return its path."""
    path.write_text(content, encoding="utf-8")
    return path
