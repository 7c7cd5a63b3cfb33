"""
Error taxonomy for the launcher.

Every error carries the process exit code it maps to, so the top-level
launcher can translate failures without inspecting their type.
"""

from __future__ import annotations

from pathlib import Path

from clang_format_launcher.exitcodes import (
    EXIT_FORMATTER_FAILED,
    EXIT_SETUP_ERROR,
)


class LauncherError(Exception):
	"""Base class for all launcher errors."""

	exit_code: int = EXIT_SETUP_ERROR

	def __init__(self, message: str) -> None:
		super().__init__(message)
		self.message = message

	def __str__(self) -> str:
		return self.message


class ConfigError(LauncherError):
	"""Raised when a configuration source exists but cannot be used."""

	def __init__(self, message: str, source: Path | None = None) -> None:
		super().__init__(message)
		self.source = source

	def __str__(self) -> str:
		if self.source is not None:
			return f"{self.source}: {self.message}"
		return self.message


class FormatterNotFoundError(LauncherError):
	"""Raised when the formatter binary cannot be resolved."""

	def __init__(self, binary: str) -> None:
		super().__init__(f"clang-format binary not found: {binary}")
		self.binary = binary


class GitError(LauncherError):
	"""Raised when a git query whose result matters fails."""


class FormatterFailedError(LauncherError):
	"""Raised (or reported) when a formatter process exits non-zero."""

	exit_code = EXIT_FORMATTER_FAILED

	def __init__(self, returncode: int, detail: str | None = None) -> None:
		if detail:
			message = (f"clang-format could not be started: {detail} "
			           f"(exit code {returncode}).")
		else:
			message = f"clang-format exited with exit code {returncode}."
		super().__init__(message)
		self.returncode = returncode
		self.detail = detail


__all__ = [
    "LauncherError",
    "ConfigError",
    "FormatterNotFoundError",
    "GitError",
    "FormatterFailedError",
]
