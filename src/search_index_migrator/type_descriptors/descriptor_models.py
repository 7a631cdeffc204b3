"""Type descriptor entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FieldKind(str, Enum):
    """Classification of a field's declared type."""

    SCALAR = "scalar"
    VECTOR = "vector"
    COLLECTION = "collection"
    NESTED_OBJECT = "nested-object"


@dataclass(frozen=True)
class FieldDescriptor:
    """One declared field of a domain record."""

    name: str
    kind: FieldKind
    type_ref: str | None = None


@dataclass(frozen=True)
class TypeDescriptor:
    """One domain record to be indexed, with fields in declaration order."""

    name: str
    namespace: str
    fields: tuple[FieldDescriptor, ...]

    @property
    def qualified_name(self) -> str:
        return f"{self.namespace}.{self.name}"
