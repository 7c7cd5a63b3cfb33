"""
Git queries used by the launcher.

Lists the files tracked at HEAD and reports working-tree status. Both
are read-only and run synchronously.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from clang_format_launcher.errors import GitError
from clang_format_launcher.utils.logging import get_logger

logger = get_logger(__name__)

LS_TREE_ARGS = ["ls-tree", "-r", "--name-only", "--full-tree", "HEAD"]
STATUS_ARGS = ["status", "-s"]


def _git(args: list[str], cwd: Path,
         timeout: float | None = None) -> subprocess.CompletedProcess[str]:
	"""
	Run git with the given arguments and capture its output.

	Parameters:
		args: Arguments after ``git``.
		cwd: Working directory for the command.
		timeout: Optional timeout in seconds.

	Returns:
		The completed process; callers inspect ``returncode``.

	Raises:
		FileNotFoundError: If git is not installed.
		subprocess.TimeoutExpired: If the timeout elapses.
	"""
	logger.debug("git: %s cwd=%s", args, cwd)
	return subprocess.run(
	    ["git", *args],
	    cwd=str(cwd),
	    capture_output=True,
	    text=True,
	    check=False,
	    timeout=timeout,
	)


def list_tracked_files(root: Path,
                       timeout: float | None = None) -> list[str]:
	"""
	List every file tracked at HEAD, relative to the repository root.

	A failed listing degrades to an empty list with a warning, so a run
	outside a repository formats nothing instead of crashing.

	Parameters:
		root: Directory to run git in.
		timeout: Optional timeout in seconds.

	Returns:
		Tracked paths in the order git reports them.
	"""
	try:
		result = _git(LS_TREE_ARGS, root, timeout)
	except FileNotFoundError:
		logger.warning("git not found; no files to format")
		return []
	except subprocess.TimeoutExpired:
		logger.warning("git ls-tree timed out after %ss in %s", timeout,
		               root)
		return []

	if result.returncode != 0:
		logger.warning(
		    "git ls-tree failed (rc=%d) in %s: %s",
		    result.returncode,
		    root,
		    result.stderr.strip()[:500],
		)
		return []

	return [ln for ln in result.stdout.splitlines() if ln.strip()]


def working_tree_status(root: Path, timeout: float | None = None) -> str:
	"""
	Return ``git status -s`` output for the repository at ``root``.

	Parameters:
		root: Directory to run git in.
		timeout: Optional timeout in seconds.

	Returns:
		Short status text; empty when nothing is modified or untracked.

	Raises:
		GitError: If git is missing, times out, or exits non-zero.
	"""
	try:
		result = _git(STATUS_ARGS, root, timeout)
	except FileNotFoundError as exc:
		raise GitError("git not found; cannot check working tree") from exc
	except subprocess.TimeoutExpired as exc:
		raise GitError(
		    f"git status timed out after {timeout}s in {root}") from exc

	if result.returncode != 0:
		raise GitError(f"git status failed (rc={result.returncode}): "
		               f"{result.stderr.strip()}")
	return result.stdout.rstrip()


__all__ = ["list_tracked_files", "working_tree_status"]
