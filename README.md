# midnotes

The editing logic of a notes workspace, written as plain Python objects and
functions with no GUI toolkit behind them. It uses only the standard library.

## Modules

- `midnotes.slash`: the slash-command catalogue, made of `SlashCommand`
  entries. `filter_commands(query)` returns the commands whose trigger or
  label contains the query, ignoring case. `find_exact_command(trigger)`
  returns the one command with exactly that trigger, or `None`.
- `midnotes.vim`: the `VimMode` enum, each member with a `label()` and a
  `color()`. `process_vim_key(current, key)` returns the next mode and
  whether the key goes on into the text. `status_hint(mode)` gives the
  `-- INSERT --` hint.
- `midnotes.kanban`: `KanbanBoard` and `KanbanColumn`. A board is read with
  `KanbanBoard.from_json(content)`. Content that is not a valid board gives a
  fresh Todo / Doing / Done board. It is written back with `to_json()`. The
  board is edited with `rename_column`, `add_task`, `set_task`, `remove_task`
  and `add_column`. A bad index raises `IndexError`.
- `midnotes.spreadsheet`: `Sheet`, rows of string cells stored as JSON.
  Content that is not valid gives an empty grid of 10 rows by 5 columns. It
  provides `column_labels()` (A, B, C, …), `set_cell` (positions outside the
  grid are ignored), `add_row` and `add_column`.
- `midnotes.calendar_panel`: `MonthView(year, month)` moves between months
  with `previous()` and `next()`. It also gives the `title()`,
  `days_in_month()`, `leading_blanks()` (weeks start on Monday),
  `date_key(day)` and `days(note_dates, today, selected)`. The last returns a
  `DayCell` for every day, marked as today, selected, or having notes.
  `month_name(month)` and `WEEKDAYS` are there as well.
- `midnotes.domtree`: `parse_html(html)` builds a small tree of `Element` and
  `Text` nodes under a root `div`. An `Element` has `text_content()`,
  `find(tag)` and `style_value(prop)`.
- `midnotes.html_markdown`: `html_to_markdown(html)` turns the rich-text
  editor's HTML back into Markdown. It handles headings, bold, italic,
  underline, styled spans, lists, checklists, quotes, code blocks and rules.
  `node_to_markdown(node)` converts a single node.
- `midnotes.daily`: `daily_note_template(date_label)` gives the starting
  content of a daily note. `daily_note_label("YYYY-MM-DD")` writes a date out
  as `Thu 01 Feb 2024`. `format_note_date(moment)` and
  `format_snapshot_date(moment)` give the stamps shown on note cards and on
  saved versions.
- `midnotes.views`: the `View` enum (all notes, archived, trash, smart
  views), along with `empty_message(view)`, `tag_query(name)` and
  `word_count(content)`.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
import datetime

from midnotes.calendar_panel import MonthView
from midnotes.daily import daily_note_label, daily_note_template
from midnotes.html_markdown import html_to_markdown
from midnotes.kanban import KanbanBoard
from midnotes.slash import filter_commands
from midnotes.vim import VimMode, process_vim_key

board = KanbanBoard.from_json("")          # not a board, so Todo / Doing / Done
board.set_task(0, board.add_task(0), "Write release notes")
content = board.to_json()

print(html_to_markdown("<h1>Title</h1><p><b>bold</b> text</p>"))
# # Title
#
# **bold** text

mode, passes_through = process_vim_key(VimMode.NORMAL, "i")   # (INSERT, False)

[command.trigger for command in filter_commands("code")]      # ['code']

february = MonthView(2024, 2)
february.title(), february.days_in_month(), february.leading_blanks()
# ('February 2024', 29, 3)
cells = february.days({"2024-02-14"}, today=datetime.date(2024, 2, 1))

print(daily_note_template(daily_note_label("2024-02-01")))
```

## What it does not do

This package contains only the logic. It has no windows or other screens,
no command to run, and no storage. Notes, tags, version history, search and
encryption are left to the application that uses it. That application keeps
the JSON from `KanbanBoard.to_json()` and `Sheet.to_json()`, the Markdown from
`html_to_markdown`, and the daily note templates wherever it stores its notes.
It also decides what a `View` lists.