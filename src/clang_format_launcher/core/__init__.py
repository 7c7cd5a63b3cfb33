"""Core launcher logic.

Key modules:
    - config_loader: Configuration discovery and validation
    - git: Tracked-file listing and working-tree status
    - filters: Include/exclude path selection
    - batches: Fixed-size batching of the selected files
    - dispatcher: clang-format process execution per batch
    - modes: Mode selection and formatter argument composition
    - launcher: End-to-end orchestration and exit codes
"""
