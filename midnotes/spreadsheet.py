"""A simple grid of text cells stored in a note as JSON."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

DEFAULT_ROWS = 10
DEFAULT_COLUMNS = 5


def _parse_rows(data: Any) -> list[list[str]]:
    if not isinstance(data, dict):
        raise ValueError("a sheet must be an object")
    rows = data.get("rows")
    if not isinstance(rows, list):
        raise ValueError("a sheet needs a list of rows")
    for row in rows:
        if not isinstance(row, list) or not all(isinstance(c, str) for c in row):
            raise ValueError("each row must be a list of strings")
    return [list(row) for row in rows]


@dataclass
class Sheet:
    """Rows of string cells."""

    rows: list[list[str]] = field(default_factory=list)

    @classmethod
    def from_json(cls, content: str) -> Sheet:
        """Read a sheet from note content, or start an empty 10 by 5 grid."""
        try:
            return cls(_parse_rows(json.loads(content)))
        except ValueError:
            return cls([[""] * DEFAULT_COLUMNS for _ in range(DEFAULT_ROWS)])

    def to_json(self) -> str:
        """The sheet as compact JSON, the form stored in the note."""
        return json.dumps(
            {"rows": [list(row) for row in self.rows]},
            separators=(",", ":"),
            ensure_ascii=False,
        )

    def column_labels(self) -> list[str]:
        """Header letters for the columns of the first row."""
        width = len(self.rows[0]) if self.rows else 0
        return [chr((ord("A") + i) % 256) for i in range(width)]

    def set_cell(self, row: int, column: int, value: str) -> None:
        """Set a cell; positions outside the grid are ignored."""
        if 0 <= row < len(self.rows) and 0 <= column < len(self.rows[row]):
            self.rows[row][column] = value

    def add_row(self) -> None:
        """Append an empty row as wide as the first row."""
        width = len(self.rows[0]) if self.rows else DEFAULT_COLUMNS
        self.rows.append([""] * width)

    def add_column(self) -> None:
        """Append an empty cell to every row."""
        for row in self.rows:
            row.append("")