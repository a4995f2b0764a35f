"""End-to-end smoke tests for the installed ``worldport`` entrypoint."""

from __future__ import annotations

import subprocess
from pathlib import Path

import worldport


def test_package_import_smoke() -> None:
    """Ensure package can be imported in the test process."""
    assert worldport.__version__


def test_cli_help_smoke() -> None:
    """Ensure the installed CLI entrypoint responds to --help."""
    result = subprocess.run(
        ["worldport", "--help"],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0, result.stderr
    assert "level.dat" in result.stdout


def test_first_run_bootstraps_and_fails_cleanly(tmp_path: Path) -> None:
    """A first run writes config.toml, reports the missing save and exits 1."""
    result = subprocess.run(
        ["worldport"],
        cwd=tmp_path,
        input="\n",
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 1
    assert (tmp_path / "config.toml").exists()
    assert "Could not find" in result.stderr
    assert "Press Enter to Exit" in result.stdout


def test_full_run_in_script_mode(tmp_path: Path, make_level) -> None:
    """A configured run writes the injection script and exits 0."""
    (tmp_path / "config.toml").write_text(
        "[input_settings]\n"
        'input_folder = "input"\n'
        'input_file = "level.dat"\n'
        "[output_settings]\n"
        "output_mode = 1\n"
        'output_folder = "output"\n'
        'output_file = "inject.js"\n'
        'output_website = "https://example.test"\n',
        encoding="utf-8",
    )
    make_level(tmp_path / "input" / "level.dat")

    result = subprocess.run(
        ["worldport"],
        cwd=tmp_path,
        input="\n",
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0, result.stderr
    assert (tmp_path / "output" / "inject.js").exists()
