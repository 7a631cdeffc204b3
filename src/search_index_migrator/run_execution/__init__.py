"""Run execution domain exports."""

from .migration_generation_use_case import (
    DiscoveryError,
    GenerationError,
    MigrationIOError,
    MigrationUsageError,
    generate_migration,
    locate_output_root,
)
from .run_contracts import GenerationOutcome, GenerationRequest

__all__ = [
    "GenerationRequest",
    "GenerationOutcome",
    "GenerationError",
    "MigrationUsageError",
    "DiscoveryError",
    "MigrationIOError",
    "generate_migration",
    "locate_output_root",
]
