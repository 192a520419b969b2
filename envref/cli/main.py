"""envref CLI interface."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click  # type: ignore[import-not-found]

from envref import __version__
from envref.checker import check_env_variables
from envref.core.settings import get_settings


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI.

    Args:
        verbose: Enable debug level logging
    """
    log_level: int | str = logging.DEBUG if verbose else logging.WARNING
    if not verbose:
        try:
            log_level = get_settings().log_level
        except ValueError:
            # ValidationError and SettingsError; the check reports them itself.
            log_level = logging.WARNING

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
        force=True,
    )


@click.command()
@click.version_option(version=__version__)
@click.argument("source_dir", required=False, type=click.Path(path_type=Path))
@click.option(
    "--non-interactive",
    is_flag=True,
    default=False,
    help="Stay silent if the check itself fails",
)
@click.option(
    "--env-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help=(
        "Dotenv file (e.g. .env) to merge underneath the process environment; "
        "not loaded by default"
    ),
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(
    source_dir: Path | None,
    non_interactive: bool,
    env_file: Path | None,
    verbose: bool,
) -> None:
    """Warn about environment variables referenced in SOURCE_DIR but not defined.

    SOURCE_DIR defaults to ./src. Runs only when NODE_ENV=development and
    DISABLE_ENV_CHECK is not "true". Always exits 0.
    """
    setup_logging(verbose)

    if source_dir is None:
        try:
            source_dir = Path(get_settings().default_source_dir)
        except ValueError:
            source_dir = Path("src")

    check_env_variables(source_dir, interactive=not non_interactive, env_file=env_file)


def main() -> None:
    """Console script entry point."""
    cli()
