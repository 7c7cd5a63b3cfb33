"""Shared utility functions.

This subpackage provides common utility functions used across
the launcher with no dependencies on other subpackages.

Key modules:
    - paths: Package asset and directory resolution
    - logging: Logging configuration
"""

from .paths import resolve_asset_path, resolve_directory, PACKAGE_DIR
from .logging import configure_logging, get_logger

__all__ = [
    # paths
    "resolve_asset_path",
    "resolve_directory",
    "PACKAGE_DIR",
    # logging
    "configure_logging",
    "get_logger",
]
