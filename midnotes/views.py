"""The note lists of the workspace and small helpers around them."""

from __future__ import annotations

from enum import Enum


class View(Enum):
    """Which collection of notes the workspace shows."""

    ALL_NOTES = "all_notes"
    ARCHIVED = "archived"
    TRASH = "trash"
    SMART_VIEWS = "smart_views"


_EMPTY_MESSAGES = {
    View.ALL_NOTES: "No notes yet. Create one!",
    View.ARCHIVED: "No archived notes",
    View.TRASH: "Trash is empty",
    View.SMART_VIEWS: "No smart views yet",
}


def empty_message(view: View) -> str:
    """The text shown when a view has no notes."""
    return _EMPTY_MESSAGES[view]


def tag_query(name: str) -> str:
    """The search query that lists notes carrying a tag."""
    return f"tag:{name}"


def word_count(content: str) -> int:
    """Number of whitespace-separated words in a note."""
    return len(content.split())