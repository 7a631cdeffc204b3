"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_MODULE_DIRECTORY = "document-analysis-service"
DEFAULT_NAMESPACE = "com.proceduralnexus.documentanalysis.domain"
DEFAULT_CONTAINER_NAME = "proceduralnexus-redis-stack-1"
DEFAULT_CLIENT_BINARY = "redis-cli"
DEFAULT_DESCRIPTOR_MANIFEST = Path("index-descriptors.yaml")
DEFAULT_SHELL_SCRIPT_DIR = Path("src/main/resources/redis/scripts/sh")
DEFAULT_POWERSHELL_SCRIPT_DIR = Path("src/main/resources/redis/scripts/ps1")


@dataclass(frozen=True)
class GeneratorSettings:  # pylint: disable=too-many-instance-attributes
    """Environment identifiers and output layout for one generator run.

    Relative paths are resolved against the located output root.
    """

    module_directory: str = DEFAULT_MODULE_DIRECTORY
    namespace: str = DEFAULT_NAMESPACE
    container_name: str = DEFAULT_CONTAINER_NAME
    client_binary: str = DEFAULT_CLIENT_BINARY
    descriptor_manifest: Path = DEFAULT_DESCRIPTOR_MANIFEST
    shell_script_dir: Path = DEFAULT_SHELL_SCRIPT_DIR
    powershell_script_dir: Path = DEFAULT_POWERSHELL_SCRIPT_DIR
    source_path: Path | None = None
