"""Unit tests for console and file-system helpers (module_maker.utils)."""

from __future__ import annotations

from pathlib import Path

import pytest

from module_maker.utils import (
    ensure_dir,
    print_alert,
    print_error,
    print_info,
    print_success,
    print_summary_table,
    print_warning,
)

pytestmark = pytest.mark.unit


class TestEnsureDir:
    def test_creates_nested(self, tmp_path: Path):
        target = tmp_path / "a" / "b" / "c"
        assert ensure_dir(target) == target
        assert target.is_dir()

    def test_existing_directory_untouched(self, tmp_path: Path):
        (tmp_path / "keep.txt").write_text("x", encoding="utf-8")
        ensure_dir(tmp_path)
        assert (tmp_path / "keep.txt").read_text(encoding="utf-8") == "x"


class TestRichHelpers:
    @pytest.mark.parametrize(
        "helper",
        [print_info, print_success, print_error, print_warning, print_alert],
    )
    def test_message_printed(self, helper, capsys):
        helper("hello world")
        assert "hello world" in capsys.readouterr().out

    def test_summary_table(self, capsys):
        print_summary_table({"1": "app/Models/Post.php"}, title="Files")
        out = capsys.readouterr().out
        assert "Files" in out
        assert "Post.php" in out

    @pytest.mark.parametrize(
        "helper",
        [print_info, print_success, print_error, print_warning, print_alert],
    )
    def test_markup_in_message_printed_literally(self, helper, capsys):
        helper("The template '[/bold]x' does not exist [draft].")
        out = capsys.readouterr().out
        assert "[/bold]x" in out
        assert "[draft]" in out

    def test_summary_table_cells_printed_literally(self, capsys):
        print_summary_table({"[1]": "app/[/dim]Post.php"}, title="Files [new]")
        out = capsys.readouterr().out
        assert "[1]" in out
        assert "[/dim]Post.php" in out
        assert "Files [new]" in out
