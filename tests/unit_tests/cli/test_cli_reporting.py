"""Unit tests for CLI command behavior and outcome reporting."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from worldport.application import use_cases as use_cases_module
from worldport.application.results import PipelineResult
from worldport.cli import cli as cli_module
from worldport.errors import ConversionError, InvalidModeError, MissingFileError
from worldport.types import DeliveryMode

runner = CliRunner()


def _result(tmp_path: Path) -> PipelineResult:
    return PipelineResult(
        input_path=tmp_path / "input" / "level.dat",
        output_path=tmp_path / "output" / "inject.js",
        mode=DeliveryMode.SCRIPT,
        plugin="classic",
    )


def test_help_describes_command() -> None:
    """Top-level help renders without running the pipeline."""
    result = runner.invoke(cli_module.app, ["--help"])
    assert result.exit_code == 0
    assert "level.dat" in result.output


def test_success_exits_zero_after_acknowledgment(
    workdir: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A completed run prints the output path and waits for Enter."""
    monkeypatch.setattr(use_cases_module, "run_pipeline", lambda **_: _result(workdir))

    result = runner.invoke(cli_module.app, [], input="\n")

    assert result.exit_code == 0
    assert "Saved" in result.output
    assert "inject.js" in result.output
    assert cli_module.ACKNOWLEDGE_PROMPT in result.output


def test_pipeline_error_exits_one(workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Pipeline errors print one diagnostic line and exit 1."""

    def fail(**_: object) -> PipelineResult:
        raise InvalidModeError(4)

    monkeypatch.setattr(use_cases_module, "run_pipeline", fail)

    result = runner.invoke(cli_module.app, [], input="\n")

    assert result.exit_code == 1
    assert "Error: Invalid Mode: Output mode invalid, expected 0 or 1 but found 4" in result.output
    assert cli_module.ACKNOWLEDGE_PROMPT in result.output


def test_unexpected_exception_exits_one(
    workdir: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Crashes outside the hierarchy are still reported cleanly."""

    def crash(**_: object) -> PipelineResult:
        raise RuntimeError("boom")

    monkeypatch.setattr(use_cases_module, "run_pipeline", crash)

    result = runner.invoke(cli_module.app, [], input="\n")

    assert result.exit_code == 1
    assert "RuntimeError: boom" in result.output


def test_closed_stdin_counts_as_acknowledgment(
    workdir: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """EOF on stdin does not turn success into failure."""
    monkeypatch.setattr(use_cases_module, "run_pipeline", lambda **_: _result(workdir))

    result = runner.invoke(cli_module.app, [])

    assert result.exit_code == 0


def test_first_run_writes_config_and_reports_missing_input(workdir: Path) -> None:
    """With no configuration the defaults are written, then the save is missing."""
    result = runner.invoke(cli_module.app, [], input="\n")

    assert result.exit_code == 1
    assert (workdir / "config.toml").exists()
    assert (workdir / "input").is_dir()
    assert (workdir / "output").is_dir()
    assert "Could not find" in result.output


def test_report_blocks_once_per_outcome(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Both success and failure prompt exactly once."""
    prompts: list[str] = []
    monkeypatch.setattr(
        cli_module.typer, "prompt", lambda text, **_: prompts.append(text) or ""
    )

    assert cli_module.report(_result(tmp_path)) == 0
    assert cli_module.report(MissingFileError(tmp_path / "level.dat")) == 1
    assert prompts == [cli_module.ACKNOWLEDGE_PROMPT] * 2


def test_print_error_honours_custom_exit_code() -> None:
    """Errors can override the default exit status."""
    error = ConversionError("boom")
    error.exit_code = 7
    assert cli_module._print_error(error, debug=False) == 7


def test_print_error_includes_traceback_in_debug(capsys: pytest.CaptureFixture[str]) -> None:
    """Debug mode adds the traceback to stderr."""
    try:
        raise ConversionError("bad world")
    except ConversionError as exc:
        cli_module._print_error(exc, debug=True)
    captured = capsys.readouterr()
    assert "Error: Conversion Error: bad world" in captured.err
    assert "Traceback" in captured.err


@pytest.mark.parametrize(("raw", "expected"), [("info", 20), ("DEBUG", 10), ("nonsense", 30)])
def test_log_level_from_environment(
    raw: str, expected: int, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Unknown level names fall back to WARNING."""
    monkeypatch.setenv(cli_module.LOG_LEVEL_ENV, raw)
    assert cli_module._configure_logging() == expected
