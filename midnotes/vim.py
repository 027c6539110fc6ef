"""Modal key handling for the Vim-style editor."""

from __future__ import annotations

from enum import Enum


class VimMode(Enum):
    """Editor modes of the Vim-style editor."""

    NORMAL = "NORMAL"
    INSERT = "INSERT"
    VISUAL = "VISUAL"
    COMMAND = "COMMAND"

    def label(self) -> str:
        return self.value

    def color(self) -> str:
        return _COLORS[self]


_COLORS = {
    VimMode.NORMAL: "#00dbe9",
    VimMode.INSERT: "#00e475",
    VimMode.VISUAL: "#ffb4ab",
    VimMode.COMMAND: "#ffe179",
}


def process_vim_key(current: VimMode, key: str) -> tuple[VimMode, bool]:
    """Return the mode after ``key`` and whether the key goes on to the text."""
    if current is VimMode.INSERT:
        if key == "Escape":
            return VimMode.NORMAL, False
        return VimMode.INSERT, True
    if current is VimMode.NORMAL:
        if key in ("i", "a", "o"):
            return VimMode.INSERT, False
        if key == "v":
            return VimMode.VISUAL, False
        if key == ":":
            return VimMode.COMMAND, False
        return VimMode.NORMAL, False
    if current is VimMode.VISUAL:
        if key == "Escape":
            return VimMode.NORMAL, False
        return VimMode.VISUAL, False
    if key in ("Enter", "Escape"):
        return VimMode.NORMAL, False
    return VimMode.COMMAND, False


def status_hint(mode: VimMode) -> str:
    """The hint shown in the status bar beside the mode label."""
    return "-- INSERT --" if mode is VimMode.INSERT else ""