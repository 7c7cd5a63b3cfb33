"""
clang-format-launcher - run clang-format over the files git tracks.

Lists tracked files with ``git ls-tree``, filters them by the rules in
``clang.format.json`` (or ``[tool.clang-format-launcher]`` in
``pyproject.toml``), and runs clang-format on them in batches, optionally
verifying that formatting left the working tree clean.

Main entry points:
    - clang_format_launcher.main: CLI entrypoint
    - clang_format_launcher.core.launcher: launch() for one run
    - clang_format_launcher.core.config_loader: load_format_config()
"""

__version__ = "0.1.0"
