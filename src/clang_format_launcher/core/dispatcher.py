"""
Formatter process dispatch.

Resolves the clang-format binary and runs it once per batch of files,
collecting each batch's exit status into a DispatchResult.
"""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path

from clang_format_launcher.core.batches import DEFAULT_BATCH_SIZE, chunk_files
from clang_format_launcher.errors import FormatterNotFoundError
from clang_format_launcher.exitcodes import SPAWN_FAILURE_RETURNCODE
from clang_format_launcher.models.dispatch_result import (
    BatchOutcome,
    DispatchResult,
)
from clang_format_launcher.utils.logging import get_logger

logger = get_logger(__name__)


def resolve_formatter_binary(binary: str) -> str:
	"""
	Resolve the formatter executable.

	Parameters:
		binary: Executable name looked up on PATH, or a path to it.

	Returns:
		Absolute path of the executable.

	Raises:
		FormatterNotFoundError: If nothing executable matches.
	"""
	resolved = shutil.which(binary)
	if not resolved:
		raise FormatterNotFoundError(binary)
	logger.debug("native clang-format: %s", resolved)
	return resolved


async def _spawn(binary: str, args: list[str], cwd: Path) -> int:
	"""Run one formatter process with inherited stdio and wait for it."""
	proc = await asyncio.create_subprocess_exec(binary, *args, cwd=str(cwd))
	return await proc.wait()


async def run_batch(
    index: int,
    binary: str,
    args: list[str],
    files: list[str],
    cwd: Path,
) -> BatchOutcome:
	"""
	Run the formatter on one batch.

	A process that cannot be spawned is reported as a failed batch rather
	than raised, so the remaining batches still run.
	"""
	logger.debug("batch %d: %s %s (%d files)", index, binary, args,
	             len(files))
	try:
		rc = await _spawn(binary, [*args, *files], cwd)
	except OSError as exc:
		logger.warning("batch %d: failed to start %s: %s", index, binary,
		               exc)
		return BatchOutcome(
		    index=index,
		    files=files,
		    returncode=SPAWN_FAILURE_RETURNCODE,
		    error=str(exc),
		)
	if rc != 0:
		logger.debug("batch %d: clang-format exited with %d", index, rc)
	return BatchOutcome(index=index, files=files, returncode=rc)


async def run_batches(
    binary: str,
    args: list[str],
    files: list[str],
    cwd: Path,
    batch_size: int = DEFAULT_BATCH_SIZE,
    max_parallel: int = 1,
) -> DispatchResult:
	"""
	Run the formatter over ``files`` in batches and wait for all of them.

	Batches start in list order with at most ``max_parallel`` processes
	alive at once. Every batch runs even after one fails, so the result
	holds the exit status of each.

	Parameters:
		binary: Resolved formatter executable.
		args: Arguments placed before each batch's file paths.
		files: Filtered, repository-relative paths.
		cwd: Working directory (the repository root).
		batch_size: Maximum files per process.
		max_parallel: Maximum concurrent processes.

	Returns:
		DispatchResult with outcomes in dispatch order.
	"""
	batches = chunk_files(files, batch_size)
	logger.debug("dispatching %d files in %d batches (parallel=%d)",
	             len(files), len(batches), max_parallel)
	sem = asyncio.Semaphore(max_parallel)

	async def run_one(i: int, batch: list[str]) -> BatchOutcome:
		async with sem:
			return await run_batch(i, binary, args, batch, cwd)

	outcomes = await asyncio.gather(
	    *(run_one(i, b) for i, b in enumerate(batches)))
	return DispatchResult(outcomes=list(outcomes))


async def run_raw(binary: str, args: list[str], cwd: Path) -> int:
	"""
	Run the formatter once with ``args`` unmodified.

	Returns:
		The formatter's exit code.
	"""
	logger.debug("clang-format %s", args)
	return await _spawn(binary, args, cwd)


__all__ = [
    "resolve_formatter_binary",
    "run_batch",
    "run_batches",
    "run_raw",
]
