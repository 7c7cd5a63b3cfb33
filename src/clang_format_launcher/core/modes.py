"""
Command-line mode selection and formatter argument composition.

Launcher flags are recognized anywhere in the argument list. ``-verify``
and ``-raw`` are consumed; every other argument, including ``--verbose``,
``--help`` and ``--version``, is forwarded to clang-format verbatim.
"""

from __future__ import annotations

from collections.abc import Sequence

from clang_format_launcher.models.invocation import Invocation, Mode

VERIFY_FLAG = "-verify"
RAW_FLAG = "-raw"
VERBOSE_FLAG = "--verbose"
HELP_FLAG = "--help"
VERSION_FLAG = "--version"

LAUNCHER_ONLY_FLAGS = frozenset({VERIFY_FLAG, RAW_FLAG})

WERROR_ARG = "-Werror"
IN_PLACE_ARG = "-i"
DRY_RUN_ARG = "--dry-run"


def parse_invocation(argv: Sequence[str]) -> Invocation:
	"""
	Select the run mode from raw command-line arguments.

	``-raw``, ``--version`` and ``--help`` select RAW; otherwise
	``-verify`` selects VERIFY; otherwise FIX.

	Parameters:
		argv: Arguments after the program name.

	Returns:
		Invocation with the mode, modifiers and passthrough arguments.
	"""
	args = list(argv)
	show_help = HELP_FLAG in args
	if RAW_FLAG in args or VERSION_FLAG in args or show_help:
		mode = Mode.RAW
	elif VERIFY_FLAG in args:
		mode = Mode.VERIFY
	else:
		mode = Mode.FIX
	return Invocation(
	    mode=mode,
	    verbose=VERBOSE_FLAG in args,
	    help=show_help,
	    passthrough=[a for a in args if a not in LAUNCHER_ONLY_FLAGS],
	)


def build_formatter_args(invocation: Invocation,
                         style: str | None = None) -> list[str]:
	"""
	Compose the arguments placed before each batch's file paths.

	FIX:    ``[style?, -Werror, -i, *passthrough]``
	VERIFY: ``[style?, -Werror, --dry-run, --verbose, *passthrough]``
	RAW:    ``passthrough`` unchanged; ``style`` is ignored.
	"""
	user_args = list(invocation.passthrough)
	if invocation.mode is Mode.RAW:
		return user_args

	if invocation.mode is Mode.VERIFY:
		prefix = [WERROR_ARG, DRY_RUN_ARG]
		# --verbose makes clang-format name each file it checks
		if VERBOSE_FLAG not in user_args:
			prefix.append(VERBOSE_FLAG)
	else:
		prefix = [WERROR_ARG, IN_PLACE_ARG]

	if style:
		prefix.insert(0, style)
	return [*prefix, *user_args]


__all__ = [
    "parse_invocation",
    "build_formatter_args",
    "VERIFY_FLAG",
    "RAW_FLAG",
    "VERBOSE_FLAG",
    "HELP_FLAG",
    "VERSION_FLAG",
]
