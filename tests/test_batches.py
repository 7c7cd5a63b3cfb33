import math

import pytest

from clang_format_launcher.core.batches import DEFAULT_BATCH_SIZE, chunk_files


@pytest.mark.parametrize("n", [0, 1, 29, 30, 31, 60, 61, 100])
def test_batch_count_and_reconstruction(n):
	files = [f"f{i}.cpp" for i in range(n)]
	batches = chunk_files(files, 30)
	assert len(batches) == math.ceil(n / 30)
	assert [f for b in batches for f in b] == files
	assert all(0 < len(b) <= 30 for b in batches)


def test_last_batch_may_be_shorter():
	batches = chunk_files([str(i) for i in range(7)], 3)
	assert [len(b) for b in batches] == [3, 3, 1]


def test_default_size_is_thirty():
	assert DEFAULT_BATCH_SIZE == 30
	assert len(chunk_files(["x"] * 31)) == 2


def test_rejects_non_positive_size():
	with pytest.raises(ValueError):
		chunk_files(["a"], 0)
