"""
Environment variable check orchestration.

Runs scan -> collect -> diff -> report behind the development-mode and
opt-out gates. The check is advisory: run_check turns every failure into an
Err result, and check_env_variables folds every result into ``True``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping, Optional, Union

from rich.console import Console

from envref.core.result import Err, Ok, Pass, Result, fold
from envref.core.settings import Settings, get_settings
from envref.diff import CheckReport, find_missing_variables
from envref.environment import (
    EnvironmentSnapshot,
    collect_defined_variables,
    is_development,
    is_opted_out,
    take_snapshot,
)
from envref.report import make_console, render_failure_warning, render_report
from envref.scanner import find_env_references


logger = logging.getLogger(__name__)

CHECK_FAILED = "CHECK_FAILED"


def run_check(
    source_dir: Union[str, Path],
    snapshot: EnvironmentSnapshot,
    settings: Optional[Settings] = None,
) -> Result[CheckReport]:
    """Run the check pipeline without printing anything.

    Args:
        source_dir: Root of the source tree to scan.
        snapshot: Environment to check against; also drives the gates.
        settings: Tool settings (defaults to the global instance).

    Returns:
        Ok(CheckReport) when the pipeline ran, Pass(reason) when it was
        skipped, Err(message) when anything failed along the way.
    """
    if not is_development(snapshot):
        return Pass("not running in development mode")

    if is_opted_out(snapshot):
        return Pass("environment check disabled")

    try:
        settings = settings or get_settings()

        referenced = find_env_references(source_dir, settings)
        if not referenced:
            return Pass("no environment variable references found")

        defined = collect_defined_variables(snapshot, settings.prefix)
        missing = find_missing_variables(
            referenced, defined, settings.max_suggestion_distance
        )
    except Exception as e:
        logger.warning(f"[ENV_CHECK] Unable to validate environment variables: {e}")
        logger.debug("[ENV_CHECK] Check failure details", exc_info=True)
        return Err(str(e) or type(e).__name__, code=CHECK_FAILED)

    logger.debug(
        f"[ENV_CHECK] {len(referenced)} referenced, {len(defined)} defined, "
        f"{len(missing)} missing"
    )
    return Ok(CheckReport(tuple(referenced), tuple(defined), missing))


def check_env_variables(
    source_dir: Union[str, Path],
    interactive: bool = True,
    *,
    environ: Optional[Mapping[str, str]] = None,
    env_file: Optional[Union[str, Path]] = None,
    settings: Optional[Settings] = None,
    console: Optional[Console] = None,
) -> bool:
    """Warn about environment variables referenced in code but not defined.

    Args:
        source_dir: Root of the source tree to scan.
        interactive: Print a generic warning if the check itself fails.
        environ: Environment to check against (defaults to ``os.environ``).
        env_file: Optional dotenv file merged underneath environ.
        settings: Tool settings (defaults to the global instance).
        console: Rich console for output (defaults to stdout).

    Returns:
        Always True; the check never blocks the caller.
    """
    console = console or make_console()

    def _on_ok(report: Optional[CheckReport]) -> bool:
        if report is None:
            return True
        try:
            render_report(report, settings, console)
        except Exception as e:
            _on_err(f"failed to render report: {e}")
        return True

    def _on_err(error: str) -> bool:
        logger.debug(f"[ENV_CHECK] Check did not complete: {error}")
        if interactive:
            render_failure_warning(console)
        return True

    def _on_pass(message: Optional[str]) -> bool:
        logger.debug(f"[ENV_CHECK] Skipped: {message}")
        return True

    try:
        snapshot = take_snapshot(environ, env_file)
    except Exception as e:
        logger.warning(f"[ENV_CHECK] Unable to read environment: {e}")
        result: Result[CheckReport] = Err(str(e) or type(e).__name__, code=CHECK_FAILED)
    else:
        result = run_check(source_dir, snapshot, settings)

    return fold(result, on_ok=_on_ok, on_err=_on_err, on_pass=_on_pass)
