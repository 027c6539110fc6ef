"""A Kanban board stored in a note as JSON."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

DEFAULT_COLUMN_TITLES = ("Todo", "Doing", "Done")
NEW_COLUMN_TITLE = "New Column"


@dataclass
class KanbanColumn:
    """One column of the board and the cards in it."""

    title: str
    tasks: list[str] = field(default_factory=list)


def _parse_column(raw: Any) -> KanbanColumn:
    if not isinstance(raw, dict):
        raise ValueError("a column must be an object")
    title = raw.get("title")
    tasks = raw.get("tasks")
    if not isinstance(title, str):
        raise ValueError("a column needs a string title")
    if not isinstance(tasks, list) or not all(isinstance(t, str) for t in tasks):
        raise ValueError("a column needs a list of string tasks")
    return KanbanColumn(title, list(tasks))


@dataclass
class KanbanBoard:
    """Columns of cards; every edit is meant to be saved with ``to_json``."""

    columns: list[KanbanColumn] = field(default_factory=list)

    @classmethod
    def from_json(cls, content: str) -> KanbanBoard:
        """Read a board from note content, or start a fresh Todo/Doing/Done board."""
        try:
            data = json.loads(content)
            if not isinstance(data, dict) or not isinstance(data.get("columns"), list):
                raise ValueError("a board needs a list of columns")
            return cls([_parse_column(raw) for raw in data["columns"]])
        except ValueError:
            return cls([KanbanColumn(title) for title in DEFAULT_COLUMN_TITLES])

    def to_json(self) -> str:
        """The board as compact JSON, the form stored in the note."""
        payload = {
            "columns": [
                {"title": column.title, "tasks": list(column.tasks)}
                for column in self.columns
            ]
        }
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)

    def _column(self, index: int) -> KanbanColumn:
        if not 0 <= index < len(self.columns):
            raise IndexError(f"no column at index {index}")
        return self.columns[index]

    def rename_column(self, column: int, title: str) -> None:
        self._column(column).title = title

    def add_task(self, column: int) -> int:
        """Append an empty card to a column and return its index."""
        tasks = self._column(column).tasks
        tasks.append("")
        return len(tasks) - 1

    def set_task(self, column: int, task: int, text: str) -> None:
        tasks = self._column(column).tasks
        if not 0 <= task < len(tasks):
            raise IndexError(f"no task at index {task}")
        tasks[task] = text

    def remove_task(self, column: int, task: int) -> str:
        """Remove a card and return its text."""
        tasks = self._column(column).tasks
        if not 0 <= task < len(tasks):
            raise IndexError(f"no task at index {task}")
        return tasks.pop(task)

    def add_column(self) -> int:
        """Append an empty column and return its index."""
        self.columns.append(KanbanColumn(NEW_COLUMN_TITLE))
        return len(self.columns) - 1