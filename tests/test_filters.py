from pathlib import Path

from clang_format_launcher.core.filters import filter_paths, is_selected
from clang_format_launcher.models.config import FormatConfig


def _cfg(**kwargs) -> FormatConfig:
	return FormatConfig.from_document(kwargs, Path("."))


PATHS = [
    "src/a.cpp",
    "src/a.h",
    "src/gen/a.g.cpp",
    "src/gen/a.g.h",
    "ios/foo.cpp",
    "lib/ios/bar.cpp",
    "third_party/x.cpp",
    "README.md",
]


def test_include_and_exclude_rules():
	cfg = _cfg(
	    includeEndsWith=[".h", ".cpp"],
	    excludePathContains=["/ios/"],
	    excludePathEndsWith=[".g.h", ".g.cpp"],
	    excludePathStartsWith=["third_party/"],
	)
	assert filter_paths(PATHS, cfg) == ["src/a.cpp", "src/a.h", "ios/foo.cpp"]


def test_empty_include_selects_nothing():
	cfg = _cfg(includeEndsWith=[])
	assert filter_paths(PATHS, cfg) == []


def test_default_config_selects_nothing():
	assert filter_paths(PATHS, FormatConfig()) == []


def test_exclude_contains_matches_at_start_of_path():
	"""A disqualifying substring at index 0 still excludes the file."""
	cfg = _cfg(includeEndsWith=[".cpp"], excludePathContains=["ios/"])
	assert not is_selected("ios/foo.cpp", cfg)
	assert not is_selected("lib/ios/bar.cpp", cfg)
	assert is_selected("src/a.cpp", cfg)


def test_exclude_starts_with_is_a_true_prefix_test():
	cfg = _cfg(includeEndsWith=[".cpp"], excludePathStartsWith=["src/"])
	assert not is_selected("src/a.cpp", cfg)
	assert is_selected("lib/src/a.cpp", cfg)


def test_exclude_ends_with_beats_include():
	cfg = _cfg(includeEndsWith=[".cpp"], excludePathEndsWith=[".g.cpp"])
	assert filter_paths(["a.g.cpp", "a.cpp"], cfg) == ["a.cpp"]


def test_preserves_input_order():
	cfg = _cfg(includeEndsWith=[".cpp"])
	paths = ["z.cpp", "a.cpp", "m.h", "b.cpp"]
	assert filter_paths(paths, cfg) == ["z.cpp", "a.cpp", "b.cpp"]


def test_idempotent():
	cfg = _cfg(
	    includeEndsWith=[".h", ".cpp"],
	    excludePathContains=["gen/"],
	    excludePathStartsWith=["third_party"],
	)
	once = filter_paths(PATHS, cfg)
	assert filter_paths(once, cfg) == once


def test_accepts_generators():
	cfg = _cfg(includeEndsWith=[".h"])
	assert filter_paths((p for p in PATHS), cfg) == ["src/a.h", "src/gen/a.g.h"]
