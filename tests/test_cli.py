"""Tests for the envref command line interface."""

from pathlib import Path

from click.testing import CliRunner

from envref.cli.main import cli


def _project(root: Path) -> Path:
    src = root / "src"
    src.mkdir(exist_ok=True)
    (src / "App.js").write_text("const apiUrl = process.env.REACT_APP_API_ULR;")
    return src


def test_reports_missing_variables() -> None:
    runner = CliRunner()
    src = _project(Path.cwd())

    result = runner.invoke(
        cli,
        [str(src)],
        env={"NODE_ENV": "development", "REACT_APP_API_URL": "https://api.example.com"},
    )

    assert result.exit_code == 0
    assert "REACT_APP_API_ULR" in result.output
    assert "Did you mean REACT_APP_API_URL?" in result.output


def test_defaults_to_src_directory() -> None:
    runner = CliRunner()
    _project(Path.cwd())

    result = runner.invoke(cli, [], env={"NODE_ENV": "development"})

    assert result.exit_code == 0
    assert "REACT_APP_API_ULR" in result.output


def test_skips_outside_development() -> None:
    runner = CliRunner()
    src = _project(Path.cwd())

    result = runner.invoke(cli, [str(src)], env={"NODE_ENV": "production"})

    assert result.exit_code == 0
    assert result.output == ""


def test_env_file_option(tmp_path: Path) -> None:
    runner = CliRunner()
    src = _project(Path.cwd())
    env_file = tmp_path / ".env.local"
    env_file.write_text("REACT_APP_API_ULR=https://api.example.com\n")

    result = runner.invoke(
        cli, [str(src), "--env-file", str(env_file)], env={"NODE_ENV": "development"}
    )

    assert result.exit_code == 0
    assert "REACT_APP_API_ULR" not in result.output


def test_missing_directory_exits_zero(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli, [str(tmp_path / "missing"), "--non-interactive"], env={"NODE_ENV": "development"}
    )

    assert result.exit_code == 0


def test_version_option() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_malformed_list_setting_exits_zero(monkeypatch) -> None:
    runner = CliRunner()
    src = _project(Path.cwd())
    monkeypatch.setenv("ENVREF_EXTENSIONS", ".js")

    result = runner.invoke(cli, [str(src)], env={"NODE_ENV": "development"})

    assert result.exception is None
    assert result.exit_code == 0
    assert "Unable to validate environment variables" in result.output


def test_malformed_setting_with_default_source_dir_exits_zero(monkeypatch) -> None:
    runner = CliRunner()
    _project(Path.cwd())
    monkeypatch.setenv("ENVREF_EXCLUDED_DIRS", "node_modules")

    result = runner.invoke(cli, ["--non-interactive"], env={"NODE_ENV": "development"})

    assert result.exception is None
    assert result.exit_code == 0


def test_invalid_log_level_exits_zero(monkeypatch) -> None:
    runner = CliRunner()
    src = _project(Path.cwd())
    monkeypatch.setenv("ENVREF_LOG_LEVEL", "LOUD")

    result = runner.invoke(cli, [str(src)], env={"NODE_ENV": "development"})

    assert result.exception is None
    assert result.exit_code == 0
    assert "Unable to validate environment variables" in result.output


def test_malformed_dotenv_setting_exits_zero() -> None:
    runner = CliRunner()
    src = _project(Path.cwd())
    Path(".env").write_text("ENVREF_EXTENSIONS=.js\n")

    result = runner.invoke(cli, [str(src)], env={"NODE_ENV": "development"})

    assert result.exception is None
    assert result.exit_code == 0
