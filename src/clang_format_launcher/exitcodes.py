"""
Process exit codes.

CI-friendly semantics shared by the launcher and its error types.
"""

from __future__ import annotations

EXIT_OK = 0
EXIT_SETUP_ERROR = 1
EXIT_DIRTY_TREE = 2
EXIT_FORMATTER_FAILED = 3

# Reported for a batch whose child process could not be spawned at all.
SPAWN_FAILURE_RETURNCODE = 127

__all__ = [
    "EXIT_OK",
    "EXIT_SETUP_ERROR",
    "EXIT_DIRTY_TREE",
    "EXIT_FORMATTER_FAILED",
    "SPAWN_FAILURE_RETURNCODE",
]
