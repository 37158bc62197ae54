# Shared pytest fixtures
from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from flex_export.logging.init import reset_logging

EXPORT_HEADER = "PickupLocationCode,VehicleCode,PickupDateFrom,PickupDateTo,Price,FromDay"

GRID_CSV = """,A,B,C
1,60,80,120
2,n/a,200,
"""


@pytest.fixture(autouse=True)
def _fresh_logging():
    # handler は生成時の sys.stdout を掴むので毎テスト作り直す
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def temp_workdir(tmp_path: Path, monkeypatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture()
def write_grid(temp_workdir: Path) -> Callable[..., Path]:
    def _write(text: str = GRID_CSV, name: str = "Grid.csv") -> Path:
        p = temp_workdir / name
        p.write_text(text, encoding="utf-8")
        return p
    return _write


@pytest.fixture()
def write_export(temp_workdir: Path) -> Callable[..., Path]:
    """Write a Flexfiles export from data lines (header added automatically)."""
    def _write(lines: list[str], name: str = "Flexfiles_test.csv", header: str = EXPORT_HEADER) -> Path:
        p = temp_workdir / name
        p.write_text("\r\n".join([header, *lines]) + "\r\n", encoding="utf-8")
        return p
    return _write
