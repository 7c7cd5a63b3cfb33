"""Split a file list into fixed-size formatter batches."""

from __future__ import annotations

from collections.abc import Sequence

DEFAULT_BATCH_SIZE = 30


def chunk_files(files: Sequence[str],
                size: int = DEFAULT_BATCH_SIZE) -> list[list[str]]:
	"""
	Partition ``files`` into consecutive batches of at most ``size``.

	Concatenating the batches in order gives back ``files``; only the last
	batch may be shorter.

	Raises:
		ValueError: If size is not positive.
	"""
	if size <= 0:
		raise ValueError("batch size must be > 0")
	return [list(files[i:i + size]) for i in range(0, len(files), size)]


__all__ = ["chunk_files", "DEFAULT_BATCH_SIZE"]
