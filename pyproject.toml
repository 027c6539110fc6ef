[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "midnotes"
version = "0.1.0"
description = "Editing logic for a notes workspace: slash commands, vim modes, Kanban boards, sheets, a month calendar, daily notes and HTML-to-Markdown conversion"
requires-python = ">=3.10"
dependencies = []
keywords = ["notes", "markdown", "editor", "kanban", "spreadsheet", "vim", "calendar"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors :: Text Processing",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["midnotes"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
