# tests/conftest.py

"""Shared pytest fixtures for all catalog_admin tests."""

from collections.abc import Generator
from pathlib import Path

import pytest

from catalog_admin.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_dirs(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
) -> Generator[None, None, None]:
    """Point exports and logs at a per-test temp directory."""
    monkeypatch.setattr(Settings, "EXPORTS_DIR", tmp_path / "exports")
    monkeypatch.setattr(Settings, "LOGS_DIR", tmp_path / "logs")
    yield
