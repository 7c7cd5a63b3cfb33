from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core.core_schema import ValidationInfo
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

from clang_format_launcher.utils.paths import resolve_directory


def load_env(env_file: str | Path | None = None) -> None:
	"""Load environment variables from an `.env` file if present."""
	env_path = Path(env_file) if env_file else Path(".env")
	if env_path.exists():
		load_dotenv(env_path)


class FormatConfig(BaseModel):
	"""Per-repository file selection rules and formatter options.

	Field aliases match the keys used in configuration documents. The
	resolved ``root_directory`` is always absolute; build instances with
	``from_document`` so it is derived from ``folder`` and the directory
	of the configuration source.
	"""

	model_config = ConfigDict(frozen=True, extra="ignore")

	include_ends_with: list[str] = Field(
	    default_factory=list,
	    alias="includeEndsWith",
	    description="A file qualifies only if it ends with one of these",
	)
	exclude_path_contains: list[str] = Field(
	    default_factory=list,
	    alias="excludePathContains",
	    description="Substrings that disqualify a file",
	)
	exclude_path_ends_with: list[str] = Field(
	    default_factory=list,
	    alias="excludePathEndsWith",
	    description="Suffixes that disqualify a file",
	)
	exclude_path_starts_with: list[str] = Field(
	    default_factory=list,
	    alias="excludePathStartsWith",
	    description="Prefixes that disqualify a file",
	)
	folder: str | None = Field(
	    default=None,
	    alias="folder",
	    description="Repository root, absolute or relative to the config",
	)
	style: str | None = Field(
	    default=None,
	    alias="style",
	    description="Argument prepended to every formatter invocation",
	)
	root_directory: Path = Field(
	    default_factory=Path.cwd,
	    exclude=True,
	    description="Absolute directory used as git root and formatter cwd",
	)
	source: Path | None = Field(
	    default=None,
	    exclude=True,
	    description="File the configuration was read from",
	)

	@field_validator("include_ends_with", "exclude_path_contains",
	                 "exclude_path_ends_with", "exclude_path_starts_with",
	                 mode="before")
	@classmethod
	def null_as_empty(cls, v: Any) -> Any:
		# `null` in a document means "use the default", like an absent key
		if v is None:
			return []
		return v

	@field_validator("style")
	@classmethod
	def blank_style_as_none(cls, v: str | None) -> str | None:
		if v is not None and not v.strip():
			return None
		return v

	@classmethod
	def from_document(cls, data: Any, base_dir: Path,
	                  source: Path | None = None) -> "FormatConfig":
		"""
		Validate a parsed configuration document.

		Parameters:
			data: Parsed mapping (JSON object, YAML mapping, TOML table).
			base_dir: Directory a relative ``folder`` resolves against.
			source: File the document came from, kept for diagnostics.

		Returns:
			FormatConfig with an absolute ``root_directory``.

		Raises:
			pydantic.ValidationError: If a known key has the wrong type.
			TypeError: If the document is not a mapping.
		"""
		if not isinstance(data, dict):
			raise TypeError(
			    f"expected a mapping at top level, got {type(data).__name__}")
		cfg = cls.model_validate(data)
		return cfg.model_copy(
		    update={
		        "root_directory": resolve_directory(base_dir, cfg.folder),
		        "source": source,
		    })


class LauncherSettings(BaseSettings):
	"""Process-level settings loaded from environment variables."""

	model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

	binary: str = Field(
	    "clang-format",
	    alias="CLANG_FORMAT_BINARY",
	    description="clang-format executable name or path",
	)
	config_file: str | None = Field(
	    default=None,
	    alias="CLANG_FORMAT_LAUNCHER_CONFIG",
	    description="Explicit configuration file, bypassing discovery",
	)
	batch_size: int = Field(
	    30,
	    alias="CLANG_FORMAT_LAUNCHER_BATCH_SIZE",
	    description="Number of files passed to one formatter process",
	)
	max_parallel: int = Field(
	    1,
	    alias="CLANG_FORMAT_LAUNCHER_MAX_PARALLEL",
	    description="Maximum formatter processes running at once",
	)
	git_timeout_seconds: float | None = Field(
	    default=None,
	    alias="CLANG_FORMAT_LAUNCHER_GIT_TIMEOUT",
	    description="Timeout for git queries; unset waits indefinitely",
	)
	log_level: str = Field(
	    "warning",
	    alias="CLANG_FORMAT_LAUNCHER_LOG_LEVEL",
	    description="Log level when --verbose is not given",
	)

	@field_validator("batch_size", "max_parallel", "git_timeout_seconds")
	@classmethod
	def validate_positive(cls, v: Any, info: ValidationInfo) -> Any:
		if v is None:
			return v
		if v <= 0:
			raise ValueError(f"{info.field_name} must be > 0")
		return v

	def effective_log_level(self, verbose: bool) -> str:
		"""Return the log level to configure for this invocation."""
		return "debug" if verbose else self.log_level

	@property
	def config_path(self) -> Path | None:
		"""Return config_file as Path."""
		return Path(self.config_file) if self.config_file else None


__all__ = ["FormatConfig", "LauncherSettings", "load_env"]
