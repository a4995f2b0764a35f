"""Shared pytest configuration, marker assignment and level fixtures."""

from __future__ import annotations

import gzip
import struct
from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

import pytest

CLASSIC_MAGIC = 0x271BB788

LevelFactory: TypeAlias = Callable[..., Path]


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


def _utf(value: str) -> bytes:
    raw = value.encode("utf-8")
    return struct.pack(">H", len(raw)) + raw


def classic_level_bytes(
    blocks: bytes,
    width: int,
    height: int,
    depth: int,
    *,
    name: str = "A Nice World",
    creator: str = "player",
) -> bytes:
    """Return an uncompressed format-1 classic level."""
    return (
        struct.pack(">IB", CLASSIC_MAGIC, 1)
        + _utf(name)
        + _utf(creator)
        + struct.pack(">qhhh", 1_700_000_000_000, width, height, depth)
        + blocks
    )


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test inside an empty working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def make_level() -> LevelFactory:
    """Write a gzip-compressed format-1 classic level to a path."""

    def _make(
        path: Path,
        blocks: bytes | None = None,
        dims: tuple[int, int, int] = (4, 2, 4),
    ) -> Path:
        width, height, depth = dims
        if blocks is None:
            blocks = bytes((1, 2, 3, 21)) * (width * height * depth // 4)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(
            gzip.compress(classic_level_bytes(blocks, width, height, depth))
        )
        return path

    return _make
