"""
Prompt Compare.

Load a tabular file of paired "before" and "after" prompts and browse the
pairs one at a time in a side-by-side terminal view.

Usage:
    uv run python -m prompt_compare.tui.app prompts.csv

Components:
    - data_formats: Table parsing (CSV, TSV, Parquet) into a RawTable
    - records: Column role inference and PromptRecord construction
    - session: ComparisonSession state (selection and view mode)
    - tui: Textual application rendering the session
"""
