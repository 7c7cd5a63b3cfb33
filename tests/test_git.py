"""Tests for git listing and status queries."""

from __future__ import annotations

import subprocess
from unittest.mock import patch

import pytest

from clang_format_launcher.core.git import (
    LS_TREE_ARGS,
    list_tracked_files,
    working_tree_status,
)
from clang_format_launcher.errors import GitError


def _completed(returncode: int, stdout: str = "", stderr: str = ""):
	return subprocess.CompletedProcess(["git"], returncode, stdout, stderr)


class TestListTrackedFiles:

	def test_lists_paths_in_order(self, tmp_path):
		with patch("subprocess.run",
		           return_value=_completed(0, "b.cpp\na.h\n\nsub/c.cpp\n")
		          ) as mock_run:
			files = list_tracked_files(tmp_path)

		assert files == ["b.cpp", "a.h", "sub/c.cpp"]
		argv = mock_run.call_args.args[0]
		assert argv == ["git", *LS_TREE_ARGS]
		assert mock_run.call_args.kwargs["cwd"] == str(tmp_path)

	def test_failure_degrades_to_empty_with_warning(self, tmp_path, caplog):
		with patch("subprocess.run",
		           return_value=_completed(128, "", "fatal: not a git repo")):
			with caplog.at_level("WARNING"):
				files = list_tracked_files(tmp_path)

		assert files == []
		assert "git ls-tree failed" in caplog.text

	def test_missing_git_degrades_to_empty(self, tmp_path):
		with patch("subprocess.run", side_effect=FileNotFoundError("git")):
			assert list_tracked_files(tmp_path) == []

	def test_timeout_degrades_to_empty(self, tmp_path):
		with patch("subprocess.run",
		           side_effect=subprocess.TimeoutExpired("git", 1)) as mock_run:
			assert list_tracked_files(tmp_path, timeout=1) == []
		assert mock_run.call_args.kwargs["timeout"] == 1


class TestWorkingTreeStatus:

	def test_clean_tree(self, tmp_path):
		with patch("subprocess.run", return_value=_completed(0, "")):
			assert working_tree_status(tmp_path) == ""

	def test_dirty_tree(self, tmp_path):
		out = " M src/a.cpp\n?? new.h\n"
		with patch("subprocess.run", return_value=_completed(0, out)):
			assert working_tree_status(tmp_path) == " M src/a.cpp\n?? new.h"

	def test_failure_raises(self, tmp_path):
		with patch("subprocess.run", return_value=_completed(128, "", "boom")):
			with pytest.raises(GitError):
				working_tree_status(tmp_path)

	def test_timeout_raises(self, tmp_path):
		with patch("subprocess.run",
		           side_effect=subprocess.TimeoutExpired("git", 3)):
			with pytest.raises(GitError, match="timed out"):
				working_tree_status(tmp_path, timeout=3)
