"""
Console output for the launcher.

User-facing text (usage, summaries, error messages) is written here;
diagnostics go through logging instead.
"""

from __future__ import annotations

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from clang_format_launcher.models.config import FormatConfig

HELP_TEXT = """
clang-format-launcher is a clang-format wrapper.
It uses 'git ls-tree' to speed up the file lookup, then filters the files by
the rules defined in clang.format.json (or [tool.clang-format-launcher] in
pyproject.toml).
Usage:
  clang-format-launcher [options] [other options]
    Options:
      -raw
      -verify
      --verbose

  clang-format-launcher [other options]
    equal to 'clang-format --style=file -Werror -i [other options] [Files after filter]'

  clang-format-launcher -verify [other options]
    equal to 'clang-format --style=file -Werror --dry-run --verbose [other options] [Files after filter]'
    then fails if 'git status -s' reports modified or untracked files

  clang-format-launcher -raw [other options]
    equal to 'clang-format [other options]'

Exit codes:
  0  success
  1  setup error (bad config, clang-format not found, git failure)
  2  -verify found files with incorrect formatting or not committed
  3  clang-format exited with a non-zero code

clang.format.json example:
{
  "includeEndsWith": [".h", ".cpp"],
  "excludePathContains": ["/ios/", "/nodejs/", "/android/"],
  "excludePathEndsWith": [".g.h", ".g.cpp"],
  "excludePathStartsWith": [],
  "folder": "../..",
  "style": "--style=file"
}
"""


def print_help() -> None:
	"""Print launcher usage text."""
	typer.echo(HELP_TEXT)


def format_summary(file_count: int) -> str:
	noun = "file" if file_count == 1 else "files"
	return f"ran clang-format on {file_count} {noun}"


def print_summary(file_count: int) -> None:
	"""Print the count of files processed by a successful run."""
	typer.echo("")
	typer.echo(format_summary(file_count))


def print_error(message: str) -> None:
	typer.echo(message)


def print_dirty_files(status: str) -> None:
	"""Report files left modified or untracked after a verify run."""
	typer.echo(
	    "The following files have incorrect formatting or not committed:",
	    err=True)
	typer.echo(status, err=True)


def render_config_table(config: FormatConfig) -> Table:
	"""Build a table describing the resolved configuration."""
	table = Table(
	    title="clang-format-launcher configuration",
	    box=box.ROUNDED,
	    show_header=False,
	    title_style="bold cyan",
	)
	table.add_column("Key", style="bold")
	table.add_column("Value")
	table.add_row("source", str(config.source) if config.source else "-")
	table.add_row("includeEndsWith", ", ".join(config.include_ends_with))
	table.add_row("excludePathContains",
	              ", ".join(config.exclude_path_contains))
	table.add_row("excludePathEndsWith",
	              ", ".join(config.exclude_path_ends_with))
	table.add_row("excludePathStartsWith",
	              ", ".join(config.exclude_path_starts_with))
	table.add_row("folder", str(config.root_directory))
	table.add_row("style", config.style or "-")
	return table


def print_config(config: FormatConfig, console: Console | None = None) -> None:
	"""Show the resolved configuration on stderr."""
	console = console or Console(stderr=True)
	console.print(render_config_table(config))


__all__ = [
    "HELP_TEXT",
    "print_help",
    "format_summary",
    "print_summary",
    "print_error",
    "print_dirty_files",
    "render_config_table",
    "print_config",
]
