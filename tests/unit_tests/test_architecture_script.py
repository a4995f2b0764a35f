"""Unit test running the repository architecture check."""

from __future__ import annotations

import importlib.util
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "check_architecture.py"


def test_architecture_boundaries_hold(capsys: pytest.CaptureFixture[str]) -> None:
    """Presentation code stays out of the application layers."""
    spec = importlib.util.spec_from_file_location("check_architecture", SCRIPT)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    module.main()

    assert "Architecture checks passed." in capsys.readouterr().out
