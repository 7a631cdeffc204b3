"""Script emitter service for shell and PowerShell migration scripts."""

from __future__ import annotations

import logging
import stat
from pathlib import Path

from .script_models import MigrationArtifact

SCRIPT_HEADER_COMMENT = "# Auto-generated Redis migration script"
_HEREDOC_DELIMITER = "EOF"
_EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH

logger = logging.getLogger(__name__)


class ScriptEmissionError(Exception):
    """Raised when a migration script cannot be written.

    ``written_paths`` lists scripts already on disk when the failure happened;
    they are left in place.
    """

    def __init__(self, message: str, written_paths: tuple[Path, ...] = ()) -> None:
        super().__init__(message)
        self.written_paths = written_paths


def render_shell_script(
    artifact: MigrationArtifact, *, container_name: str, client_binary: str
) -> str:
    """Render the bash variant: one container call feeding every command to the client."""
    commands = "\n".join(
        _strip_client_prefix(line, client_binary) for line in artifact.command_block.splitlines()
    )
    return (
        "#!/bin/bash\n"
        f"{SCRIPT_HEADER_COMMENT}\n"
        "\n"
        f'echo "Executing migration: {artifact.shell_script_path.name}"\n'
        "\n"
        f"docker exec -i {container_name} {client_binary} <<'{_HEREDOC_DELIMITER}'\n"
        f"{commands}\n"
        f"{_HEREDOC_DELIMITER}\n"
        "\n"
        'echo "Migration completed."\n'
    )


def render_powershell_script(
    artifact: MigrationArtifact, *, container_name: str, client_binary: str
) -> str:
    """Render the PowerShell variant: each command targets the container explicitly."""
    commands = "\n".join(
        _target_container(line, client_binary, container_name)
        for line in artifact.command_block.splitlines()
    )
    return (
        f"{SCRIPT_HEADER_COMMENT}\n"
        "\n"
        f'Write-Host "Executing migration: {artifact.powershell_script_path.name}"\n'
        "\n"
        f"{commands}\n"
        "\n"
        'Write-Host "Migration completed."\n'
    )


def emit_migration_scripts(
    artifact: MigrationArtifact, *, container_name: str, client_binary: str
) -> tuple[Path, Path]:
    """Write both script variants, shell first.

    Returns:
      The shell and PowerShell script paths.

    Raises:
      ScriptEmissionError: If either write fails. A shell script written before
        the failure is reported through ``written_paths`` and not removed.
    """
    shell_path = artifact.shell_script_path
    try:
        _write_script(
            shell_path,
            render_shell_script(
                artifact, container_name=container_name, client_binary=client_binary
            ),
        )
        shell_path.chmod(shell_path.stat().st_mode | _EXECUTE_BITS)
    except OSError as exc:
        raise ScriptEmissionError(f"Failed to write shell script {shell_path}: {exc}") from exc
    logger.info("Generated Bash script: %s", shell_path)

    powershell_path = artifact.powershell_script_path
    try:
        _write_script(
            powershell_path,
            render_powershell_script(
                artifact, container_name=container_name, client_binary=client_binary
            ),
        )
    except OSError as exc:
        raise ScriptEmissionError(
            f"Failed to write PowerShell script {powershell_path}: {exc}",
            written_paths=(shell_path,),
        ) from exc
    logger.info("Generated PowerShell script: %s", powershell_path)

    return shell_path, powershell_path


def _write_script(path: Path, content: str) -> None:
    path.write_text(content, encoding="utf-8", newline="\n")


def _strip_client_prefix(line: str, client_binary: str) -> str:
    prefix = f"{client_binary} "
    return line[len(prefix) :] if line.startswith(prefix) else line


def _target_container(line: str, client_binary: str, container_name: str) -> str:
    prefix = f"{client_binary} "
    if not line.startswith(prefix):
        return line
    return f"docker exec {container_name} {client_binary} {line[len(prefix) :]}"
