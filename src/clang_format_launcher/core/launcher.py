"""
Top-level orchestration of one launcher run.

Turns a raw argument list into formatter invocations and maps every
outcome to a process exit code.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from pathlib import Path

from clang_format_launcher.core.config_loader import load_format_config
from clang_format_launcher.core.dispatcher import (
    resolve_formatter_binary,
    run_batches,
    run_raw,
)
from clang_format_launcher.core.filters import filter_paths
from clang_format_launcher.core.git import (
    list_tracked_files,
    working_tree_status,
)
from clang_format_launcher.core.modes import (
    build_formatter_args,
    parse_invocation,
)
from clang_format_launcher.errors import FormatterFailedError, LauncherError
from clang_format_launcher.exitcodes import (
    EXIT_DIRTY_TREE,
    EXIT_OK,
    EXIT_SETUP_ERROR,
)
from clang_format_launcher.models.config import LauncherSettings
from clang_format_launcher.models.invocation import Invocation
from clang_format_launcher.ui.reporting import (
    print_config,
    print_dirty_files,
    print_error,
    print_help,
    print_summary,
)
from clang_format_launcher.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def _launch_raw(invocation: Invocation, settings: LauncherSettings,
                cwd: Path) -> int:
	"""Forward the arguments to clang-format without file discovery."""
	binary = resolve_formatter_binary(settings.binary)
	args = build_formatter_args(invocation)
	rc = asyncio.run(run_raw(binary, args, cwd))
	if rc != 0:
		raise FormatterFailedError(rc)
	return EXIT_OK


def _launch_batches(invocation: Invocation, settings: LauncherSettings,
                    cwd: Path) -> int:
	"""Format (or verify) every selected tracked file."""
	config = load_format_config(cwd, settings.config_path)
	logger.debug(
	    "config source=%s root=%s include=%s style=%s",
	    config.source,
	    config.root_directory,
	    config.include_ends_with,
	    config.style,
	)
	if invocation.verbose:
		print_config(config)

	args = build_formatter_args(invocation, config.style)
	binary = resolve_formatter_binary(settings.binary)

	tracked = list_tracked_files(config.root_directory,
	                             settings.git_timeout_seconds)
	files = filter_paths(tracked, config)
	logger.debug("%d of %d tracked files selected", len(files),
	             len(tracked))

	result = asyncio.run(
	    run_batches(
	        binary,
	        args,
	        files,
	        config.root_directory,
	        batch_size=settings.batch_size,
	        max_parallel=settings.max_parallel,
	    ))
	if not result.ok:
		logger.debug("%d of %d batches failed", len(result.failed),
		             len(result.outcomes))
		raise result.error
	print_summary(result.file_count)

	if invocation.checks_git_status:
		status = working_tree_status(config.root_directory,
		                             settings.git_timeout_seconds)
		if status:
			print_dirty_files(status)
			return EXIT_DIRTY_TREE
	return EXIT_OK


def launch(argv: Sequence[str],
           settings: LauncherSettings | None = None,
           cwd: Path | None = None) -> int:
	"""
	Run the launcher for one command line.

	Parameters:
		argv: Arguments after the program name.
		settings: Process settings; loaded from the environment if None.
		cwd: Directory to resolve configuration in (default: current).

	Returns:
		Process exit code (see ``clang_format_launcher.exitcodes``).
	"""
	invocation = parse_invocation(argv)
	if invocation.help:
		print_help()

	try:
		settings = settings or LauncherSettings()
		configure_logging(settings.effective_log_level(invocation.verbose))
		cwd = (cwd or Path.cwd()).resolve()
		logger.debug("mode=%s passthrough=%s", invocation.mode.value,
		             invocation.passthrough)

		if invocation.discovers_files:
			return _launch_batches(invocation, settings, cwd)
		return _launch_raw(invocation, settings, cwd)
	except LauncherError as exc:
		print_error(str(exc))
		return exc.exit_code
	except Exception as exc:
		logger.debug("unexpected error", exc_info=True)
		print_error(str(exc))
		return EXIT_SETUP_ERROR


__all__ = ["launch"]
