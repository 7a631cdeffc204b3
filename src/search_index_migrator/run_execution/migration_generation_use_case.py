"""Migration generation use-case service.

Runs Validate, Locate, Discover, Compile, Version, and Emit in sequence. Each
phase fails fast, so nothing is written unless every earlier phase succeeded.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from pathlib import Path

from search_index_migrator.configuration.runtime_settings import GeneratorSettings
from search_index_migrator.schema_compilation import compile_command_block
from search_index_migrator.script_emission import (
    ScriptEmissionError,
    build_migration_artifact,
    emit_migration_scripts,
)
from search_index_migrator.type_descriptors import (
    DescriptorError,
    TypeDescriptor,
    TypeDescriptorSource,
    load_descriptor_manifest,
)
from search_index_migrator.versioning import resolve_next_version

from .run_contracts import GenerationOutcome, GenerationRequest

DescriptorSourceFactory = Callable[[Path], TypeDescriptorSource]

MIGRATION_NAME_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]*$")

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Raised when a generation run cannot be completed."""


class MigrationUsageError(GenerationError):
    """Raised when the migration name cannot be used."""


class DiscoveryError(GenerationError):
    """Raised when the output root or the record types cannot be found."""


class MigrationIOError(GenerationError):
    """Raised when output directories or scripts cannot be written."""


def generate_migration(
    request: GenerationRequest,
    *,
    settings: GeneratorSettings,
    descriptor_source_factory: DescriptorSourceFactory | None = None,
) -> GenerationOutcome:
    """Generate one versioned drop-then-create migration script pair."""
    resolved_source_factory = descriptor_source_factory or load_descriptor_manifest

    _validate_migration_name(request.migration_name)
    logger.info("Starting Redis script generation for migration='%s'", request.migration_name)

    output_root = locate_output_root(request.working_directory, settings.module_directory)
    logger.info("Detected module root: %s", output_root)

    source, descriptors = _discover_descriptors(
        output_root / settings.descriptor_manifest,
        settings.namespace,
        resolved_source_factory,
    )
    logger.info(
        "Found domain types to index: %s", ", ".join(descriptor.name for descriptor in descriptors)
    )

    command_block = compile_command_block(descriptors, source, settings.client_binary)

    shell_dir = output_root / settings.shell_script_dir
    powershell_dir = output_root / settings.powershell_script_dir
    _create_output_directories(shell_dir, powershell_dir)
    version = resolve_next_version(shell_dir, powershell_dir)
    logger.info("Next migration version: %d", version)

    artifact = build_migration_artifact(
        version=version,
        name=request.migration_name,
        command_block=command_block,
        shell_dir=shell_dir,
        powershell_dir=powershell_dir,
    )
    try:
        shell_path, powershell_path = emit_migration_scripts(
            artifact,
            container_name=settings.container_name,
            client_binary=settings.client_binary,
        )
    except ScriptEmissionError as exc:
        raise MigrationIOError(_describe_partial_output(exc)) from exc

    return GenerationOutcome(
        version=version,
        migration_name=request.migration_name,
        entity_names=tuple(descriptor.name for descriptor in descriptors),
        shell_script_path=shell_path,
        powershell_script_path=powershell_path,
    )


def locate_output_root(working_directory: Path, module_directory: str) -> Path:
    """Return the working directory if it is the module, else its module child directory."""
    current = working_directory.resolve()
    if current.name == module_directory:
        return current
    candidate = current / module_directory
    if candidate.is_dir():
        return candidate
    raise DiscoveryError(f"Could not find the '{module_directory}' module directory.")


def _validate_migration_name(migration_name: str) -> None:
    if not MIGRATION_NAME_PATTERN.match(migration_name):
        raise MigrationUsageError(
            f"Invalid migration name '{migration_name}': use letters, digits, '_' or '-'."
        )


def _discover_descriptors(
    manifest_path: Path,
    namespace: str,
    source_factory: DescriptorSourceFactory,
) -> tuple[TypeDescriptorSource, tuple[TypeDescriptor, ...]]:
    try:
        source = source_factory(manifest_path)
    except DescriptorError as exc:
        raise DiscoveryError(str(exc)) from exc
    descriptors = source.discover(namespace)
    if not descriptors:
        raise DiscoveryError(f"No types found in namespace {namespace}")
    return source, descriptors


def _create_output_directories(*directories: Path) -> None:
    for directory in directories:
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise MigrationIOError(
                f"Failed to create output directory {directory}: {exc}"
            ) from exc


def _describe_partial_output(exc: ScriptEmissionError) -> str:
    if not exc.written_paths:
        return str(exc)
    written = ", ".join(str(path) for path in exc.written_paths)
    return f"{exc} (already written, not rolled back: {written})"
