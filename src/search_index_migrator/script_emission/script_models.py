"""Migration script entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class ScriptFormat(str, Enum):
    """Executable script variants written for each migration."""

    SHELL = "sh"
    POWERSHELL = "ps1"


@dataclass(frozen=True)
class MigrationArtifact:
    """One versioned migration and the paths of both script variants."""

    version: int
    name: str
    command_block: str
    shell_script_path: Path
    powershell_script_path: Path


def migration_filename(version: int, name: str, script_format: ScriptFormat) -> str:
    return f"V{version}__{name}.{script_format.value}"


def build_migration_artifact(
    *,
    version: int,
    name: str,
    command_block: str,
    shell_dir: Path,
    powershell_dir: Path,
) -> MigrationArtifact:
    """Bind a compiled command block to its deterministic output paths."""
    return MigrationArtifact(
        version=version,
        name=name,
        command_block=command_block,
        shell_script_path=shell_dir / migration_filename(version, name, ScriptFormat.SHELL),
        powershell_script_path=powershell_dir
        / migration_filename(version, name, ScriptFormat.POWERSHELL),
    )
