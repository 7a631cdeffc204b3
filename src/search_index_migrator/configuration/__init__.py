"""Configuration domain exports."""

from .loader import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    resolve_configuration,
)
from .runtime_settings import GeneratorSettings

__all__ = [
    "DEFAULT_CONFIG_FILENAME",
    "ConfigurationError",
    "GeneratorSettings",
    "load_configuration",
    "resolve_configuration",
]
