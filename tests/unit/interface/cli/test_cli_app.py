from __future__ import annotations

"""
Unit tests for the CLI controller.

Calls the in-process entry point with explicit argv and captured streams to
check stdout content, stderr messages and exit codes.
"""

import io
from pathlib import Path

import pytest

from dirtree.interface.cli.app import main


def test_cli_prints_tree_with_trailing_newline(tmp_path: Path) -> None:
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "f.txt").write_bytes(b"12345")

    out = io.StringIO()
    code = main([str(tmp_path), "-f"], out=out)

    assert code == 0
    assert out.getvalue() == "└───sub\n\t└───f.txt (5b)\n"


def test_cli_dirs_only(dirs_only_structure: Path) -> None:
    out = io.StringIO()
    code = main([str(dirs_only_structure)], out=out)

    assert code == 0
    assert out.getvalue() == "├───a\n├───b\n└───c\n"


def test_cli_missing_path_fails_without_output(tmp_path: Path, capsys) -> None:
    out = io.StringIO()
    code = main([str(tmp_path / "missing")], out=out)

    assert code == 1
    assert out.getvalue() == ""
    assert "ERROR:" in capsys.readouterr().err


def test_cli_usage_error_exits_before_scanning(monkeypatch) -> None:
    def fail_scan(*args, **kwargs):
        raise AssertionError("filesystem must not be touched")

    monkeypatch.setattr("dirtree.interface.cli.app.dir_tree", fail_scan)

    with pytest.raises(SystemExit) as exc:
        main(["a", "b", "c"], out=io.StringIO())

    assert exc.value.code == 2


def test_cli_saves_tree_file(tmp_path: Path, dirs_only_structure: Path) -> None:
    target = tmp_path / "tree.txt"
    out = io.StringIO()

    code = main([str(dirs_only_structure), "-o", str(target)], out=out)

    assert code == 0
    assert target.read_text(encoding="utf-8") == out.getvalue()


def test_cli_unexpected_error_is_reported(monkeypatch, tmp_path: Path, capsys) -> None:
    def boom(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr("dirtree.interface.cli.app.dir_tree", boom)

    out = io.StringIO()
    code = main([str(tmp_path)], out=out)

    assert code == 1
    assert out.getvalue() == ""
    assert "ERROR: boom" in capsys.readouterr().err


def test_cli_repeated_files_flag_is_usage_error(tmp_path: Path, monkeypatch) -> None:
    def fail_scan(*args, **kwargs):
        raise AssertionError("filesystem must not be touched")

    monkeypatch.setattr("dirtree.interface.cli.app.dir_tree", fail_scan)

    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path), "-f", "-f"], out=io.StringIO())

    assert exc.value.code == 2


@pytest.mark.parametrize("second", ["-fx", "-o", "--output", "--v", "-h", "--version"])
def test_cli_ignored_second_token_still_prints_tree(dirs_only_structure: Path, second: str) -> None:
    out = io.StringIO()
    code = main([str(dirs_only_structure), second], out=out)

    assert code == 0
    assert out.getvalue() == "├───a\n├───b\n└───c\n"


def test_cli_unreadable_nested_dir_fails_without_output(locked_subdir_structure: Path, capsys) -> None:
    out = io.StringIO()
    code = main([str(locked_subdir_structure), "-f"], out=out)

    assert code == 1
    assert out.getvalue() == ""
    assert "ERROR:" in capsys.readouterr().err
