"""
Reference scanner for environment variable usage in source files.

Walks a source tree and collects every ``process.env.REACT_APP_*`` style
reference (access expression and prefix come from Settings). Only the
names are kept: occurrence counts and locations are discarded.

Files that cannot be read are skipped; a missing or unreadable root simply
produces no references.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Iterator, List, Optional, Pattern, Union

from envref.core.settings import Settings, get_settings


logger = logging.getLogger(__name__)


def build_reference_pattern(settings: Settings) -> Pattern[str]:
    """Compile the regex matching ``<access_expression>.<PREFIX>NAME``.

    The first group captures the variable name including the prefix.
    """
    return re.compile(
        re.escape(settings.access_expression)
        + r"\.("
        + re.escape(settings.prefix)
        + r"[A-Z0-9_]+)"
    )


def _is_test_file(filename: str, settings: Settings) -> bool:
    stem = os.path.splitext(filename)[0]
    return stem.endswith(settings.test_file_marker)


def iter_source_files(
    root: Union[str, Path], settings: Optional[Settings] = None
) -> Iterator[Path]:
    """Yield source files under root that should be scanned.

    Directories are visited in sorted order so results are deterministic.
    Hidden entries, excluded directories (``__tests__``, ``node_modules``)
    and ``*.test.*`` files are skipped.

    Args:
        root: Directory to walk. Need not exist.
        settings: Tool settings (defaults to the global instance).

    Yields:
        Paths of files whose extension is one of settings.extensions.
    """
    settings = settings or get_settings()
    extensions = set(settings.extensions)
    excluded = set(settings.excluded_dirs)

    for dirpath, dirs, filenames in os.walk(root):
        dirs[:] = sorted(d for d in dirs if not d.startswith(".") and d not in excluded)
        for filename in sorted(filenames):
            if filename.startswith("."):
                continue
            ext = os.path.splitext(filename)[1]
            if ext not in extensions:
                continue
            if _is_test_file(filename, settings):
                continue
            yield Path(dirpath) / filename


def find_env_references(
    root: Union[str, Path], settings: Optional[Settings] = None
) -> List[str]:
    """Collect referenced environment variable names under root.

    Args:
        root: Source directory to scan.
        settings: Tool settings (defaults to the global instance).

    Returns:
        Deduplicated names in the order they were first seen.
    """
    settings = settings or get_settings()
    pattern = build_reference_pattern(settings)

    # dict keeps insertion order, giving an ordered set
    referenced: dict[str, None] = {}
    scanned = 0

    for path in iter_source_files(root, settings):
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"[ENV_SCAN] Skipping unreadable file {path}: {e}")
            continue

        scanned += 1
        for match in pattern.finditer(content):
            referenced.setdefault(match.group(1), None)

    logger.debug(
        f"[ENV_SCAN] Scanned {scanned} files under {root}, "
        f"found {len(referenced)} referenced variables"
    )
    return list(referenced)
