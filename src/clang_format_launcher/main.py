from __future__ import annotations

import sys

import typer
from typer.main import get_command

from clang_format_launcher.core.launcher import launch
from clang_format_launcher.models.config import load_env

cli = typer.Typer(add_completion=False)

# clang-format owns the option namespace: nothing is parsed or rejected
# here, --help included.
PASSTHROUGH_CONTEXT = {
    "allow_extra_args": True,
    "ignore_unknown_options": True,
    "help_option_names": [],
}


def run_impl(args: list[str]) -> int:
	"""
	Run the launcher for the given raw arguments.

	Loads ``.env`` into the environment, then hands the unparsed
	argument list to the launcher.

	Parameters:
		args: Arguments after the program name.

	Returns:
		Process exit code.
	"""
	load_env()
	return launch(args)


@cli.command(context_settings=PASSTHROUGH_CONTEXT)
def main(ctx: typer.Context) -> None:
	"""
	Run clang-format on the git-tracked files selected by clang.format.json.
	"""
	raise typer.Exit(code=run_impl(list(ctx.args)))


def entrypoint(argv=None, *, standalone_mode: bool = True):
	"""
	Console-script entrypoint.

	Every argument is forwarded after ``--`` so Click never interprets
	clang-format options such as ``-i`` or ``--style=file``.

	Parameters:
		argv: Command-line arguments. Defaults to sys.argv[1:].
		standalone_mode: If True, Click handles exit codes.

	Returns:
		Exit code when ``standalone_mode`` is False.
	"""
	args = sys.argv[1:] if argv is None else list(argv)
	_click_app = get_command(cli)
	return _click_app.main(
	    args=["--", *args],
	    prog_name="clang-format-launcher",
	    standalone_mode=standalone_mode,
	)


if __name__ == "__main__":
	entrypoint()
