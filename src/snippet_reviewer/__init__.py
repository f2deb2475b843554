"""Snippet Reviewer - structured AI code review for code snippets."""

__version__ = "0.1.0"
