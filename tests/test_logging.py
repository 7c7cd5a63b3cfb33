"""Tests for the logging module."""

from __future__ import annotations

import logging

from clang_format_launcher.utils.logging import configure_logging, get_logger


class TestConfigureLogging:
	"""Tests for configure_logging()."""

	def test_sets_root_level(self) -> None:
		root = logging.getLogger()
		original = root.level
		try:
			configure_logging("debug")
			assert root.level == logging.DEBUG
			configure_logging("warning")
			assert root.level == logging.WARNING
		finally:
			root.setLevel(original)

	def test_unknown_level_falls_back_to_warning(self) -> None:
		root = logging.getLogger()
		original = root.level
		try:
			configure_logging("chatty")
			assert root.level == logging.WARNING
		finally:
			root.setLevel(original)


def test_get_logger_uses_module_name() -> None:
	logger = get_logger("clang_format_launcher.core.git")
	assert logger.name == "clang_format_launcher.core.git"
