"""Shared fixtures for envref tests"""

import os
from pathlib import Path

import pytest

import envref.core.settings as settings_module


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the real environment, .env files and cached settings out of tests."""
    for key in list(os.environ):
        if key.upper().startswith(("REACT_APP_", "ENVREF_")):
            monkeypatch.delenv(key, raising=False)
    for key in ("NODE_ENV", "DISABLE_ENV_CHECK", "FORCE_COLOR"):
        monkeypatch.delenv(key, raising=False)

    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    monkeypatch.setattr(settings_module, "_settings", None)


@pytest.fixture
def src_dir(tmp_path: Path) -> Path:
    """Empty source directory."""
    path = tmp_path / "src"
    path.mkdir()
    return path


@pytest.fixture
def dev_env() -> dict:
    """Environment snapshot in development mode with no prefixed variables."""
    return {"NODE_ENV": "development"}
