"""Environment snapshots and the defined-variable collector."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from types import MappingProxyType
from typing import List, Mapping, Optional, Union

from dotenv import dotenv_values


logger = logging.getLogger(__name__)

EnvironmentSnapshot = Mapping[str, str]

DEVELOPMENT_MODE = "development"
MODE_VARIABLE = "NODE_ENV"
OPT_OUT_VARIABLE = "DISABLE_ENV_CHECK"


def take_snapshot(
    environ: Optional[Mapping[str, str]] = None,
    env_file: Optional[Union[str, Path]] = None,
) -> EnvironmentSnapshot:
    """Copy the environment once so the whole check sees one consistent view.

    Args:
        environ: Mapping to copy. Defaults to ``os.environ``.
        env_file: Optional dotenv file. Its values sit underneath environ,
            so variables already set in the environment win.

    Returns:
        A read-only mapping of variable names to values.
    """
    source = os.environ if environ is None else environ
    merged: dict[str, str] = {}

    if env_file is not None:
        path = Path(env_file)
        if path.is_file():
            loaded = dotenv_values(path)
            merged.update({key: value for key, value in loaded.items() if value is not None})
            logger.debug(f"[ENV_CHECK] Loaded {len(loaded)} entries from {path}")
        else:
            logger.debug(f"[ENV_CHECK] Env file {path} not found, ignoring")

    merged.update(source)
    return MappingProxyType(merged)


def collect_defined_variables(snapshot: EnvironmentSnapshot, prefix: str) -> List[str]:
    """Return snapshot names starting with prefix (case-insensitive), verbatim."""
    upper_prefix = prefix.upper()
    return [name for name in snapshot if name.upper().startswith(upper_prefix)]


def is_development(snapshot: EnvironmentSnapshot) -> bool:
    return snapshot.get(MODE_VARIABLE) == DEVELOPMENT_MODE


def is_opted_out(snapshot: EnvironmentSnapshot) -> bool:
    # Only the literal string "true" disables the check.
    return snapshot.get(OPT_OUT_VARIABLE) == "true"
