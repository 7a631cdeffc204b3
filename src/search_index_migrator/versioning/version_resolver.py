"""Migration version resolution across the script output directories."""

from __future__ import annotations

import logging
import re
from pathlib import Path

MIGRATION_FILENAME_PATTERN = re.compile(r"^V(?P<version>\d+)__(?P<name>.+)\.(?P<ext>[^.]+)$")

logger = logging.getLogger(__name__)


def resolve_next_version(*script_dirs: Path | str) -> int:
    """Return one more than the highest migration version found in any directory.

    Both script variants of a run share the returned version, so the directories
    are scanned together and always advance in lockstep.

    Args:
      script_dirs: Output directories holding previously generated scripts.

    Returns:
      The next version number; 1 when no directory holds a migration.
    """
    latest_version = 0
    for directory in script_dirs:
        latest_version = max(latest_version, latest_version_in(Path(directory)))
    return latest_version + 1


def latest_version_in(directory: Path) -> int:
    """Return the highest migration version in one directory.

    An absent directory contributes 0. An unreadable directory also contributes 0
    and logs a warning instead of aborting the run.
    """
    if not directory.is_dir():
        return 0
    try:
        filenames = [entry.name for entry in directory.iterdir() if entry.is_file()]
    except OSError as exc:
        logger.warning("Could not scan directory %s for versions: %s", directory, exc)
        return 0
    versions = [
        version
        for version in (parse_migration_version(filename) for filename in filenames)
        if version is not None
    ]
    return max(versions, default=0)


def parse_migration_version(filename: str) -> int | None:
    match = MIGRATION_FILENAME_PATTERN.match(filename)
    if match is None:
        return None
    return int(match.group("version"))
