"""
Launcher models.

This subpackage contains Pydantic models for configuration, invocation
parsing and dispatch results.

Key models:
    - FormatConfig: Per-repository filter rules and formatter options
    - LauncherSettings: Process settings loaded from the environment
    - Invocation: Parsed command line (mode, modifiers, passthrough)
    - DispatchResult: Aggregate of formatter batch outcomes
"""

from .config import FormatConfig, LauncherSettings, load_env
from .invocation import Mode, Invocation
from .dispatch_result import BatchOutcome, DispatchResult

__all__ = [
    "FormatConfig",
    "LauncherSettings",
    "load_env",
    "Mode",
    "Invocation",
    "BatchOutcome",
    "DispatchResult",
]
