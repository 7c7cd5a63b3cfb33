"""
Path filtering for tracked files.

A pure include/exclude predicate over repository-relative paths.
"""

from __future__ import annotations

from collections.abc import Iterable

from clang_format_launcher.models.config import FormatConfig


def is_selected(path: str, config: FormatConfig) -> bool:
	"""
	Return True when ``path`` passes every rule of ``config``.

	An empty ``include_ends_with`` selects nothing. Exclusions match
	anywhere, including at the very start of the path.
	"""
	return (any(path.endswith(s) for s in config.include_ends_with)
	        and not any(s in path for s in config.exclude_path_contains)
	        and not any(path.endswith(s) for s in config.exclude_path_ends_with)
	        and not any(
	            path.startswith(s) for s in config.exclude_path_starts_with))


def filter_paths(paths: Iterable[str], config: FormatConfig) -> list[str]:
	"""
	Narrow tracked paths to the ones that should be formatted.

	Parameters:
		paths: Repository-relative paths.
		config: Rules to apply.

	Returns:
		Selected paths, in input order.
	"""
	return [p for p in paths if is_selected(p, config)]


__all__ = ["filter_paths", "is_selected"]
