"""
Invocation model.

Describes how one launcher run was requested: the selected mode, the
orthogonal verbose/help modifiers, and the arguments that pass through
to the formatter.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Mode(str, Enum):
	"""Mutually exclusive launcher modes."""

	FIX = "fix"
	VERIFY = "verify"
	RAW = "raw"


class Invocation(BaseModel):
	"""Parsed command line of a single launcher run."""

	model_config = ConfigDict(frozen=True)

	mode: Mode = Mode.FIX
	verbose: bool = False
	help: bool = False
	passthrough: list[str] = Field(
	    default_factory=list,
	    description="Arguments forwarded to clang-format verbatim",
	)

	@property
	def discovers_files(self) -> bool:
		"""Return True when the run lists and filters tracked files."""
		return self.mode is not Mode.RAW

	@property
	def checks_git_status(self) -> bool:
		"""Return True when a clean working tree is required afterwards."""
		return self.mode is Mode.VERIFY


__all__ = ["Mode", "Invocation"]
