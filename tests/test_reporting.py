import io

from rich.console import Console

from clang_format_launcher.models.config import FormatConfig
from clang_format_launcher.ui.reporting import (
    HELP_TEXT,
    format_summary,
    print_config,
    print_dirty_files,
    print_help,
)


def test_format_summary_pluralizes():
	assert format_summary(1) == "ran clang-format on 1 file"
	assert format_summary(0) == "ran clang-format on 0 files"
	assert format_summary(31) == "ran clang-format on 31 files"


def test_help_mentions_modes(capsys):
	print_help()
	out = capsys.readouterr().out
	for flag in ("-raw", "-verify", "--dry-run", "clang.format.json"):
		assert flag in out
	assert out.strip() == HELP_TEXT.strip()


def test_dirty_files_go_to_stderr(capsys):
	print_dirty_files(" M src/a.cpp")
	captured = capsys.readouterr()
	assert captured.out == ""
	assert "src/a.cpp" in captured.err


def test_config_table(tmp_path):
	cfg = FormatConfig.from_document(
	    {
	        "includeEndsWith": [".h", ".cpp"],
	        "excludePathContains": ["/ios/"],
	        "style": "--style=file",
	    },
	    tmp_path,
	    source=tmp_path / "clang.format.json",
	)
	buf = io.StringIO()
	print_config(cfg, Console(file=buf, width=200))
	text = buf.getvalue()
	assert ".h, .cpp" in text
	assert "/ios/" in text
	assert "--style=file" in text
