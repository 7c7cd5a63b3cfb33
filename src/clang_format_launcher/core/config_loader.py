"""
Configuration discovery and loading.

Resolution order:
    1. an explicit override file (``CLANG_FORMAT_LAUNCHER_CONFIG``)
    2. ``[tool.clang-format-launcher]`` in ``pyproject.toml``
    3. ``clang.format.json`` in the working directory
    4. ``clang.format.yaml`` / ``clang.format.yml`` in the working directory
    5. the packaged default ``clang.format.json``

A candidate that exists but cannot be parsed or validated is fatal; there
is never a silent fallback to the next source.
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from clang_format_launcher.errors import ConfigError
from clang_format_launcher.models.config import FormatConfig
from clang_format_launcher.utils.logging import get_logger
from clang_format_launcher.utils.paths import resolve_asset_path

logger = get_logger(__name__)

MANIFEST_FILE = "pyproject.toml"
MANIFEST_TABLE = "clang-format-launcher"
CONFIG_FILE = "clang.format.json"
YAML_CONFIG_FILES = ("clang.format.yaml", "clang.format.yml")
DEFAULT_CONFIG = "defaults/clang.format.json"


def _read_json(path: Path) -> Any:
	return json.loads(path.read_text(encoding="utf-8"))


def _read_yaml(path: Path) -> Any:
	# an empty document loads as None and is rejected like any non-mapping
	return yaml.safe_load(path.read_text(encoding="utf-8"))


def _read_manifest_table(path: Path) -> Any | None:
	"""Return the launcher table of a TOML manifest, or None if absent."""
	with path.open("rb") as fh:
		manifest = tomllib.load(fh)
	tool = manifest.get("tool", {})
	if not isinstance(tool, dict):
		raise ConfigError("[tool] must be a table", path)
	return tool.get(MANIFEST_TABLE)


def _read_document(path: Path) -> Any:
	"""Parse a configuration file, choosing the format by suffix."""
	suffix = path.suffix.lower()
	if suffix == ".toml":
		table = _read_manifest_table(path)
		if table is None:
			raise ConfigError(f"missing [tool.{MANIFEST_TABLE}] table", path)
		return table
	if suffix in (".yaml", ".yml"):
		return _read_yaml(path)
	return _read_json(path)


def _build(data: Any, base_dir: Path, source: Path) -> FormatConfig:
	try:
		return FormatConfig.from_document(data, base_dir, source)
	except (ValidationError, TypeError) as exc:
		raise ConfigError(f"invalid configuration: {exc}", source) from exc


def _load_file(path: Path, base_dir: Path) -> FormatConfig:
	try:
		data = _read_document(path)
	except (OSError, ValueError, yaml.YAMLError) as exc:
		# json.JSONDecodeError and tomllib.TOMLDecodeError are ValueErrors
		raise ConfigError(f"failed to parse config file: {exc}",
		                  path) from exc
	return _build(data, base_dir, path)


def _manifest_config(cwd: Path) -> FormatConfig | None:
	manifest = cwd / MANIFEST_FILE
	if not manifest.is_file():
		return None
	try:
		table = _read_manifest_table(manifest)
	except (OSError, ValueError) as exc:
		raise ConfigError(f"failed to parse config file: {exc}",
		                  manifest) from exc
	if table is None:
		logger.debug("%s has no [tool.%s] table", manifest, MANIFEST_TABLE)
		return None
	return _build(table, cwd, manifest)


def load_format_config(cwd: Path | None = None,
                       override: Path | None = None) -> FormatConfig:
	"""
	Resolve and load the configuration for a run.

	Parameters:
		cwd: Directory to discover configuration in (default: current).
		override: Explicit configuration file; disables discovery.

	Returns:
		Validated FormatConfig with an absolute root directory.

	Raises:
		ConfigError: If the chosen source is missing (override only),
			unparseable, or fails validation.
	"""
	cwd = (cwd or Path.cwd()).resolve()

	if override is not None:
		path = override if override.is_absolute() else cwd / override
		logger.debug("using explicit config file: %s", path)
		if not path.is_file():
			raise ConfigError("config file does not exist", path)
		return _load_file(path, path.parent.resolve())

	cfg = _manifest_config(cwd)
	if cfg is not None:
		logger.debug("using config from %s", cfg.source)
		return cfg

	for name in (CONFIG_FILE, *YAML_CONFIG_FILES):
		candidate = cwd / name
		logger.debug("looking for config: %s", candidate)
		if candidate.is_file():
			logger.debug("using config file: %s", candidate)
			return _load_file(candidate, cwd)

	default = resolve_asset_path(DEFAULT_CONFIG)
	logger.debug("no config file detected, using packaged default %s",
	             default)
	return _load_file(default, cwd)


__all__ = [
    "load_format_config",
    "CONFIG_FILE",
    "MANIFEST_FILE",
    "MANIFEST_TABLE",
    "DEFAULT_CONFIG",
]
