"""Shared pytest fixtures for trilby-gallery tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.config import AppSettings
from support import IMAGES_URL


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep TRILBY_* variables and .env files from leaking into tests."""
    for key in ("IMAGES_URL", "DEBUG", "MAPPING_POLICY", "FADE_IN_SECONDS", "HTTP_TIMEOUT_SECONDS"):
        monkeypatch.delenv(f"TRILBY_{key}", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(images_url=IMAGES_URL, _env_file=None)
