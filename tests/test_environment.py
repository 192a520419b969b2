"""Tests for environment snapshots and the defined-variable collector."""

import os
from pathlib import Path

import pytest

from envref.environment import (
    collect_defined_variables,
    is_development,
    is_opted_out,
    take_snapshot,
)


class TestTakeSnapshot:
    def test_defaults_to_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REACT_APP_FROM_OS", "1")
        snapshot = take_snapshot()
        assert snapshot["REACT_APP_FROM_OS"] == "1"

    def test_snapshot_is_a_copy(self, monkeypatch: pytest.MonkeyPatch) -> None:
        snapshot = take_snapshot()
        monkeypatch.setenv("REACT_APP_LATE", "1")
        assert "REACT_APP_LATE" not in snapshot
        assert "REACT_APP_LATE" in os.environ

    def test_snapshot_is_read_only(self) -> None:
        snapshot = take_snapshot({"A": "1"})
        with pytest.raises(TypeError):
            snapshot["A"] = "2"  # type: ignore[index]

    def test_env_file_sits_underneath_environ(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env.local"
        env_file.write_text("REACT_APP_API_URL=from-file\nREACT_APP_TITLE=Demo\n")

        snapshot = take_snapshot({"REACT_APP_API_URL": "from-env"}, env_file)

        assert snapshot["REACT_APP_API_URL"] == "from-env"
        assert snapshot["REACT_APP_TITLE"] == "Demo"

    def test_missing_env_file_is_ignored(self, tmp_path: Path) -> None:
        snapshot = take_snapshot({"A": "1"}, tmp_path / "missing.env")
        assert dict(snapshot) == {"A": "1"}


class TestCollectDefinedVariables:
    def test_prefix_match_is_case_insensitive_and_verbatim(self) -> None:
        snapshot = {
            "REACT_APP_API_URL": "x",
            "react_app_lower": "y",
            "NODE_ENV": "development",
            "PATH": "/bin",
        }
        assert collect_defined_variables(snapshot, "REACT_APP_") == [
            "REACT_APP_API_URL",
            "react_app_lower",
        ]

    def test_none_defined(self) -> None:
        assert collect_defined_variables({"PATH": "/bin"}, "REACT_APP_") == []


class TestGates:
    def test_development_mode(self) -> None:
        assert is_development({"NODE_ENV": "development"}) is True
        assert is_development({"NODE_ENV": "production"}) is False
        assert is_development({}) is False

    def test_opt_out_requires_literal_true(self) -> None:
        assert is_opted_out({"DISABLE_ENV_CHECK": "true"}) is True
        assert is_opted_out({"DISABLE_ENV_CHECK": "TRUE"}) is False
        assert is_opted_out({"DISABLE_ENV_CHECK": "1"}) is False
        assert is_opted_out({}) is False
