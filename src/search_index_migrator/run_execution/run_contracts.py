"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class GenerationRequest:
    """Input contract for generating one migration."""

    migration_name: str
    working_directory: Path


@dataclass(frozen=True)
class GenerationOutcome:
    """Output contract for one completed generation run."""

    version: int
    migration_name: str
    entity_names: tuple[str, ...]
    shell_script_path: Path
    powershell_script_path: Path
