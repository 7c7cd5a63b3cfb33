from pathlib import Path

from clang_format_launcher.utils.paths import (
    PACKAGE_DIR,
    resolve_asset_path,
    resolve_directory,
)


def test_resolve_directory_relative(tmp_path):
	(tmp_path / "a").mkdir()
	assert resolve_directory(tmp_path, "a") == (tmp_path / "a").resolve()


def test_resolve_directory_parent(tmp_path):
	base = tmp_path / "x" / "y"
	assert resolve_directory(base, "../..") == tmp_path.resolve()


def test_resolve_directory_absolute(tmp_path):
	assert resolve_directory(Path("/somewhere"), str(tmp_path)) == (
	    tmp_path.resolve())


def test_resolve_directory_none_is_base(tmp_path):
	assert resolve_directory(tmp_path, None) == tmp_path.resolve()
	assert resolve_directory(tmp_path, "") == tmp_path.resolve()


def test_packaged_default_config_exists():
	path = resolve_asset_path("defaults/clang.format.json")
	assert path.is_file()
	assert path.parent.parent == PACKAGE_DIR
