"""
TUI Prompt Compare viewer.

A Textual-based terminal UI for browsing before/after prompt pairs in a
side-by-side view.

Usage:
    uv run python -m prompt_compare.tui.app prompts.csv

Components:
    - PromptCompareApp: Main application class
    - CompareScreen: Side-by-side view with prompt list and open zone
    - TextPanel: Rendered/raw text display widget
"""
