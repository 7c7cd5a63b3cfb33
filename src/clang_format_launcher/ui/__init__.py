"""User interface components.

This subpackage provides console output for the launcher: usage text,
run summaries, error messages and the verbose configuration table.
"""

from clang_format_launcher.ui.reporting import (
    HELP_TEXT,
    print_help,
    print_summary,
    print_error,
    print_dirty_files,
    print_config,
)

__all__ = [
    "HELP_TEXT",
    "print_help",
    "print_summary",
    "print_error",
    "print_dirty_files",
    "print_config",
]
