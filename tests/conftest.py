"""Pytest configuration for test isolation.

Settings are read from ``SALES_STATISTICS_*`` environment variables, and the
CLI configures the package logger once per process. Either can leak between
tests (a developer's shell exporting ``SALES_STATISTICS_INPUT``, or a logging
handler bound to a previous test's captured stream), so both are reset around
every test via autouse fixtures.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from sales_statistics.logging_setup import reset_logging

_ENV_VARS = (
    "SALES_STATISTICS_INPUT",
    "SALES_STATISTICS_OUTPUT",
    "SALES_STATISTICS_DELIMITER",
    "SALES_STATISTICS_LOG_LEVEL",
)

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Clear settings env vars and run each test from its own directory."""

    for name in _ENV_VARS:
        # setenv first so teardown also removes values a test's .env load adds
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    # The CLI loads ``.env`` from the CWD; keep it pointed at an empty dir.
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_package_logging() -> Iterator[None]:
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def sample_log() -> Path:
    return DATA_DIR / "sales_data_sample.txt"


@pytest.fixture
def write_log(tmp_path: Path):
    """Write a sales log (header added) and return its path."""

    def _write(*lines: str, name: str = "sales.txt") -> Path:
        path = tmp_path / name
        body = "Date,SKU,Unit Price,Quantity,Total Price\n" + "".join(f"{ln}\n" for ln in lines)
        path.write_text(body, encoding="utf-8")
        return path

    return _write
