"""Script emitter tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from search_index_migrator.script_emission import (
    ScriptEmissionError,
    build_migration_artifact,
    emit_migration_scripts,
    render_powershell_script,
    render_shell_script,
)

_CONTAINER = "proceduralnexus-redis-stack-1"
_COMMAND_BLOCK = (
    "redis-cli FT.DROPINDEX idx:metadata\n"
    "redis-cli FT.CREATE idx:metadata ON JSON PREFIX 1 metadata: SCHEMA "
    "$.source AS source TEXT $.redis-cli_note AS redis-cli_note TEXT"
)


def _artifact(tmp_path: Path, *, version: int = 7, name: str = "rebuild_indexes"):
    shell_dir = tmp_path / "sh"
    powershell_dir = tmp_path / "ps1"
    shell_dir.mkdir(exist_ok=True)
    powershell_dir.mkdir(exist_ok=True)
    return build_migration_artifact(
        version=version,
        name=name,
        command_block=_COMMAND_BLOCK,
        shell_dir=shell_dir,
        powershell_dir=powershell_dir,
    )


def test_artifact_paths_follow_versioned_filename_convention(tmp_path: Path) -> None:
    artifact = _artifact(tmp_path)

    assert artifact.shell_script_path == tmp_path / "sh" / "V7__rebuild_indexes.sh"
    assert artifact.powershell_script_path == tmp_path / "ps1" / "V7__rebuild_indexes.ps1"


def test_shell_script_wraps_commands_in_single_container_call(tmp_path: Path) -> None:
    content = render_shell_script(
        _artifact(tmp_path), container_name=_CONTAINER, client_binary="redis-cli"
    )

    assert content == (
        "#!/bin/bash\n"
        "# Auto-generated Redis migration script\n"
        "\n"
        'echo "Executing migration: V7__rebuild_indexes.sh"\n'
        "\n"
        f"docker exec -i {_CONTAINER} redis-cli <<'EOF'\n"
        "FT.DROPINDEX idx:metadata\n"
        "FT.CREATE idx:metadata ON JSON PREFIX 1 metadata: SCHEMA "
        "$.source AS source TEXT $.redis-cli_note AS redis-cli_note TEXT\n"
        "EOF\n"
        "\n"
        'echo "Migration completed."\n'
    )


def test_powershell_script_targets_container_for_each_command(tmp_path: Path) -> None:
    content = render_powershell_script(
        _artifact(tmp_path), container_name=_CONTAINER, client_binary="redis-cli"
    )
    lines = content.splitlines()

    assert lines[0] == "# Auto-generated Redis migration script"
    assert lines[2] == 'Write-Host "Executing migration: V7__rebuild_indexes.ps1"'
    assert lines[4] == f"docker exec {_CONTAINER} redis-cli FT.DROPINDEX idx:metadata"
    assert lines[5].startswith(f"docker exec {_CONTAINER} redis-cli FT.CREATE idx:metadata ")
    assert lines[5].endswith("$.redis-cli_note AS redis-cli_note TEXT")
    assert lines[-1] == 'Write-Host "Migration completed."'


def test_both_variants_carry_identical_schema_text(tmp_path: Path) -> None:
    artifact = _artifact(tmp_path)
    shell = render_shell_script(artifact, container_name=_CONTAINER, client_binary="redis-cli")
    powershell = render_powershell_script(
        artifact, container_name=_CONTAINER, client_binary="redis-cli"
    )

    def _schema(text: str) -> str:
        (line,) = [line for line in text.splitlines() if "FT.CREATE" in line]
        return line.split(" SCHEMA ", 1)[1]

    assert _schema(shell) == _schema(powershell)


def test_emit_writes_both_scripts_and_marks_shell_executable(tmp_path: Path) -> None:
    artifact = _artifact(tmp_path)

    shell_path, powershell_path = emit_migration_scripts(
        artifact, container_name=_CONTAINER, client_binary="redis-cli"
    )

    assert shell_path.read_bytes().startswith(b"#!/bin/bash\n")
    assert b"\r\n" not in shell_path.read_bytes()
    assert "Write-Host" in powershell_path.read_text(encoding="utf-8")
    assert os.access(shell_path, os.X_OK)


def test_emit_reports_already_written_shell_script_when_second_write_fails(
    tmp_path: Path,
) -> None:
    artifact = build_migration_artifact(
        version=1,
        name="init",
        command_block=_COMMAND_BLOCK,
        shell_dir=tmp_path,
        powershell_dir=tmp_path / "missing-dir",
    )

    with pytest.raises(ScriptEmissionError, match="PowerShell") as exc_info:
        emit_migration_scripts(artifact, container_name=_CONTAINER, client_binary="redis-cli")

    assert exc_info.value.written_paths == (tmp_path / "V1__init.sh",)
    assert (tmp_path / "V1__init.sh").exists()


def test_emit_fails_without_partial_output_when_shell_write_fails(tmp_path: Path) -> None:
    artifact = build_migration_artifact(
        version=1,
        name="init",
        command_block=_COMMAND_BLOCK,
        shell_dir=tmp_path / "missing-dir",
        powershell_dir=tmp_path,
    )

    with pytest.raises(ScriptEmissionError, match="shell script") as exc_info:
        emit_migration_scripts(artifact, container_name=_CONTAINER, client_binary="redis-cli")

    assert exc_info.value.written_paths == ()
    assert not (tmp_path / "V1__init.ps1").exists()
