"""Editing logic for a notes workspace: slash commands, vim modes, boards, sheets,
a month calendar, daily notes and HTML-to-Markdown conversion."""

__version__ = "0.1.0"