"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import GeneratorSettings

DEFAULT_CONFIG_FILENAME = "index-migrations.yaml"


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def resolve_configuration(working_directory: Path | str) -> GeneratorSettings:
    """Load the working directory's configuration file, or return defaults when absent."""
    config_path = Path(working_directory) / DEFAULT_CONFIG_FILENAME
    if not config_path.is_file():
        return GeneratorSettings()
    return load_configuration(config_path)


def load_configuration(config_path: Path | str) -> GeneratorSettings:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigurationError(f"Configuration file {path} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise ConfigurationError(f"Failed to read configuration file {path}: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    defaults = GeneratorSettings()
    redis = _optional_mapping(parsed.get("redis"), "redis")
    scripts = _optional_mapping(parsed.get("scripts"), "scripts")

    return GeneratorSettings(
        module_directory=_string_or_default(
            parsed.get("module_directory"), "module_directory", defaults.module_directory
        ),
        namespace=_string_or_default(parsed.get("namespace"), "namespace", defaults.namespace),
        container_name=_string_or_default(
            redis.get("container_name"), "redis.container_name", defaults.container_name
        ),
        client_binary=_string_or_default(
            redis.get("client_binary"), "redis.client_binary", defaults.client_binary
        ),
        descriptor_manifest=_path_or_default(
            parsed.get("descriptor_manifest"), "descriptor_manifest", defaults.descriptor_manifest
        ),
        shell_script_dir=_path_or_default(
            scripts.get("shell_dir"), "scripts.shell_dir", defaults.shell_script_dir
        ),
        powershell_script_dir=_path_or_default(
            scripts.get("powershell_dir"), "scripts.powershell_dir", defaults.powershell_script_dir
        ),
        source_path=path.resolve(),
    )


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _string_or_default(value: Any, field_name: str, default: str) -> str:
    if value is None:
        return default
    return _require_non_empty_string(value, field_name)


def _path_or_default(value: Any, field_name: str, default: Path) -> Path:
    if value is None:
        return default
    return Path(_require_non_empty_string(value, field_name))


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped
