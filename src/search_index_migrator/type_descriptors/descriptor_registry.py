"""Explicit registration map for type descriptors."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from .descriptor_models import TypeDescriptor


class DescriptorError(Exception):
    """Raised when type descriptors cannot be loaded or registered."""


class TypeDescriptorSource(Protocol):
    """Read-only enumeration of record types, stable within one generator run."""

    def discover(self, namespace: str) -> tuple[TypeDescriptor, ...]: ...

    def resolve(self, type_ref: str, from_namespace: str) -> TypeDescriptor | None: ...


class DescriptorRegistry:
    """Registry of type descriptors keyed by qualified name.

    Registration order is preserved and defines the discovery order of entities.
    """

    def __init__(self, descriptors: Iterable[TypeDescriptor] = ()) -> None:
        self._descriptors: dict[str, TypeDescriptor] = {}
        for descriptor in descriptors:
            self.register(descriptor)

    def register(self, descriptor: TypeDescriptor) -> None:
        """Add one descriptor; duplicate qualified names are rejected."""
        key = descriptor.qualified_name
        if key in self._descriptors:
            raise DescriptorError(f"Type descriptor registered twice: {key}")
        self._descriptors[key] = descriptor

    def discover(self, namespace: str) -> tuple[TypeDescriptor, ...]:
        """Return every descriptor registered under the namespace, in registration order."""
        return tuple(
            descriptor
            for descriptor in self._descriptors.values()
            if descriptor.namespace == namespace
        )

    def resolve(self, type_ref: str, from_namespace: str) -> TypeDescriptor | None:
        """Resolve a type reference relative to the referencing namespace, then as qualified."""
        local = self._descriptors.get(f"{from_namespace}.{type_ref}")
        if local is not None:
            return local
        return self._descriptors.get(type_ref)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __contains__(self, qualified_name: object) -> bool:
        return qualified_name in self._descriptors
