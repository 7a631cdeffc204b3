"""Descriptor manifest reader service."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .descriptor_models import FieldDescriptor, FieldKind, TypeDescriptor
from .descriptor_registry import DescriptorError, DescriptorRegistry

# Type and field names end up verbatim in FT.CREATE paths, aliases and key prefixes.
IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def load_descriptor_manifest(manifest_path: Path | str) -> DescriptorRegistry:
    """Load a YAML descriptor manifest into a registry.

    Args:
      manifest_path: Path of the manifest listing every indexed record type.

    Returns:
      A registry populated in manifest order.

    Raises:
      DescriptorError: If the manifest is missing or malformed.
    """
    path = Path(manifest_path)
    if not path.exists():
        raise DescriptorError(f"Descriptor manifest not found: {path}")

    try:
        parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise DescriptorError(f"Failed to parse descriptor manifest: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise DescriptorError(f"Descriptor manifest {path} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise DescriptorError(f"Failed to read descriptor manifest {path}: {exc}") from exc

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, Mapping):
        raise DescriptorError("Descriptor manifest root must be a mapping.")

    default_namespace = _optional_string(parsed.get("namespace"), "namespace")
    types = parsed.get("types") or []
    if isinstance(types, str) or not isinstance(types, Sequence):
        raise DescriptorError("Descriptor manifest 'types' must be a list.")

    registry = DescriptorRegistry()
    for index, entry in enumerate(types):
        registry.register(_parse_type_entry(entry, index, default_namespace))
    return registry


def _parse_type_entry(entry: Any, index: int, default_namespace: str | None) -> TypeDescriptor:
    section = _require_mapping(entry, f"types[{index}]")
    name = _require_identifier(section.get("name"), f"types[{index}].name")
    namespace = _optional_string(section.get("namespace"), f"{name}.namespace")
    namespace = namespace or default_namespace
    if namespace is None:
        raise DescriptorError(f"Type '{name}' has no namespace and the manifest sets no default.")

    raw_fields = section.get("fields") or []
    if isinstance(raw_fields, str) or not isinstance(raw_fields, Sequence):
        raise DescriptorError(f"{name}.fields must be a list.")

    fields: list[FieldDescriptor] = []
    # Aliases are matched case-insensitively, so `embedding` and `Embedding` collide.
    seen_names: set[str] = set()
    for field_index, raw_field in enumerate(raw_fields):
        field = _parse_field_entry(raw_field, f"{name}.fields[{field_index}]")
        if field.name.lower() in seen_names:
            raise DescriptorError(f"Duplicate field '{field.name}' declared on type '{name}'.")
        seen_names.add(field.name.lower())
        fields.append(field)

    return TypeDescriptor(name=name, namespace=namespace, fields=tuple(fields))


def _parse_field_entry(value: Any, label: str) -> FieldDescriptor:
    section = _require_mapping(value, label)
    name = _require_identifier(section.get("name"), f"{label}.name")
    raw_kind = _require_non_empty_string(section.get("kind"), f"{label}.kind")
    try:
        kind = FieldKind(raw_kind.lower())
    except ValueError as exc:
        allowed = ", ".join(member.value for member in FieldKind)
        raise DescriptorError(
            f"{label}.kind '{raw_kind}' is not one of: {allowed}."
        ) from exc

    type_ref = _optional_string(section.get("type"), f"{label}.type")
    if kind is FieldKind.NESTED_OBJECT and type_ref is None:
        raise DescriptorError(f"{label} is a nested-object field and requires 'type'.")
    return FieldDescriptor(name=name, kind=kind, type_ref=type_ref)


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise DescriptorError(f"Manifest entry '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise DescriptorError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise DescriptorError(f"{field_name} must not be empty.")
    return stripped


def _require_identifier(value: Any, field_name: str) -> str:
    name = _require_non_empty_string(value, field_name)
    if not IDENTIFIER_PATTERN.match(name):
        raise DescriptorError(
            f"{field_name} '{name}' must use letters, digits and '_' and not start with a digit."
        )
    return name


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise DescriptorError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None
