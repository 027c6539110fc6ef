"""Slash commands that insert Markdown snippets into a note."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SlashCommand:
    """A command typed after "/" and the text it inserts."""

    trigger: str
    label: str
    icon: str
    insert: str


SLASH_COMMANDS: tuple[SlashCommand, ...] = (
    SlashCommand(
        "table",
        "Table",
        "table",
        "| Header 1 | Header 2 |\n|----------|----------|\n| Cell 1   | Cell 2   |",
    ),
    SlashCommand("code", "Code Block", "code", "```\n\n```"),
    SlashCommand("image", "Image", "image", "![alt text](url)"),
    SlashCommand("link", "Link", "link", "[text](url)"),
    SlashCommand("math", "Math (inline)", "functions", "$$"),
    SlashCommand("blockmath", "Math (block)", "functions", "$$\n\n$$"),
    SlashCommand("todo", "Todo List", "checklist", "- [ ] "),
    SlashCommand("list", "Bullet List", "list", "- "),
    SlashCommand("numbered", "Numbered List", "format_list_numbered", "1. "),
    SlashCommand("quote", "Blockquote", "format_quote", "> "),
    SlashCommand("hr", "Horizontal Rule", "horizontal_rule", "\n---\n"),
    SlashCommand("heading", "Heading", "title", "## "),
)


def filter_commands(query: str) -> list[SlashCommand]:
    """Commands whose trigger or label contains the query, case-insensitively."""
    needle = query.lower()
    return [
        command
        for command in SLASH_COMMANDS
        if needle in command.trigger or needle in command.label.lower()
    ]


def find_exact_command(trigger: str) -> SlashCommand | None:
    """The command with exactly this trigger, or None."""
    return next((c for c in SLASH_COMMANDS if c.trigger == trigger), None)