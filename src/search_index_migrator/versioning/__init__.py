"""Versioning exports."""

from .version_resolver import (
    MIGRATION_FILENAME_PATTERN,
    latest_version_in,
    parse_migration_version,
    resolve_next_version,
)

__all__ = [
    "MIGRATION_FILENAME_PATTERN",
    "latest_version_in",
    "parse_migration_version",
    "resolve_next_version",
]
