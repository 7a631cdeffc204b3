"""Script emission exports."""

from .script_emitter import (
    ScriptEmissionError,
    emit_migration_scripts,
    render_powershell_script,
    render_shell_script,
)
from .script_models import (
    MigrationArtifact,
    ScriptFormat,
    build_migration_artifact,
    migration_filename,
)

__all__ = [
    "ScriptEmissionError",
    "emit_migration_scripts",
    "render_powershell_script",
    "render_shell_script",
    "MigrationArtifact",
    "ScriptFormat",
    "build_migration_artifact",
    "migration_filename",
]
