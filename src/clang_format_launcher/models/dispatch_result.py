"""
Dispatch result models.

Defines the outcome of one formatter batch and the aggregate result of
dispatching every batch of a run.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from clang_format_launcher.errors import FormatterFailedError


class BatchOutcome(BaseModel):
	"""Exit status of one formatter process."""

	index: int
	files: list[str] = Field(default_factory=list)
	returncode: int
	error: str | None = Field(
	    default=None,
	    description="Spawn error message when the process never started",
	)

	@property
	def ok(self) -> bool:
		return self.returncode == 0


class DispatchResult(BaseModel):
	"""
	Aggregate of all batch outcomes for one run.

	Outcomes are kept in dispatch order; success depends only on the set
	of return codes, never on the order batches finished in.
	"""

	outcomes: list[BatchOutcome] = Field(default_factory=list)

	@property
	def ok(self) -> bool:
		return all(o.ok for o in self.outcomes)

	@property
	def file_count(self) -> int:
		return sum(len(o.files) for o in self.outcomes)

	@property
	def failed(self) -> list[BatchOutcome]:
		return [o for o in self.outcomes if not o.ok]

	@property
	def error(self) -> FormatterFailedError | None:
		"""Representative error: the first failing batch in dispatch order."""
		failed = self.failed
		if not failed:
			return None
		first = failed[0]
		return FormatterFailedError(first.returncode, first.error)


__all__ = ["BatchOutcome", "DispatchResult"]
