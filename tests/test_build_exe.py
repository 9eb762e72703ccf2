"""Tests for the PyInstaller option builder."""

import os

import build_exe


def test_console_build_of_cli_entry(tmp_path):
    opts = build_exe.build_options([], here=str(tmp_path))
    assert opts[:3] == ["--console", "--name", build_exe.APP_NAME]
    assert "--onefile" not in opts
    assert "--icon" not in opts
    assert opts[-1] == os.path.join(str(tmp_path), "bestmove", "main.py")


def test_onefile_and_icon(tmp_path):
    (tmp_path / "icon.ico").write_bytes(b"")
    opts = build_exe.build_options(["--onefile"], here=str(tmp_path))
    assert "--onefile" in opts
    assert opts[opts.index("--icon") + 1] == str(tmp_path / "icon.ico")
