"""
Path utilities.

Resolves package-relative assets and configuration-relative directories.
"""

from __future__ import annotations

from pathlib import Path

# Root of the clang_format_launcher package directory.
PACKAGE_DIR: Path = Path(__file__).resolve().parent.parent


def resolve_asset_path(relative_path: str) -> Path:
	"""Resolve a path bundled with the package.

	Parameters:
		relative_path: Path relative to the package directory, like
			``defaults/clang.format.json``.

	Returns:
		Absolute path to the asset.
	"""
	return PACKAGE_DIR / relative_path


def resolve_directory(base: Path, folder: str | Path | None) -> Path:
	"""
	Resolve a possibly relative directory against a base directory.

	Parameters:
		base: Directory that relative values are interpreted against.
		folder: Absolute or relative directory, or None for ``base``.

	Returns:
		Absolute, normalized path.
	"""
	if folder is None or str(folder) == "":
		return base.resolve()
	p = Path(folder).expanduser()
	if not p.is_absolute():
		p = base / p
	return p.resolve()


__all__ = [
    "PACKAGE_DIR",
    "resolve_asset_path",
    "resolve_directory",
]
