"""Field classification policy for index schema attributes.

Rules are evaluated in priority order and the first match wins:

1. A field named ``embedding`` (any casing) becomes the vector attribute,
   whatever its declared kind.
2. Any other collection field is left out of the schema.
3. Scalar fields become one TEXT attribute.
4. Nested objects of a non-standard type are flattened one level: each field
   declared on the nested type becomes a TEXT attribute. The nested type's own
   nested fields are not inspected.
5. Everything else is left out.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from search_index_migrator.type_descriptors.descriptor_models import (
    FieldDescriptor,
    FieldKind,
    TypeDescriptor,
)

from .schema_models import VECTOR_FIELD_NAME, AttributeClause, AttributeType, vector_parameters

NestedTypeResolver = Callable[[str], TypeDescriptor | None]

STANDARD_NAMESPACES: tuple[str, ...] = (
    "builtins",
    "datetime",
    "decimal",
    "uuid",
    "typing",
    "collections",
    "enum",
    "pathlib",
)

logger = logging.getLogger(__name__)


def classify_field(
    field: FieldDescriptor, resolve_nested: NestedTypeResolver
) -> tuple[AttributeClause, ...]:
    """Map one field descriptor to zero or more attribute clauses."""
    if field.name.lower() == VECTOR_FIELD_NAME:
        return (_vector_clause(),)
    if field.kind is FieldKind.COLLECTION:
        return ()
    if field.kind is FieldKind.SCALAR:
        return (_text_clause(f"$.{field.name}", field.name),)
    if field.kind is FieldKind.NESTED_OBJECT and field.type_ref:
        nested_type = resolve_nested(field.type_ref)
        if nested_type is None:
            logger.debug("Nested type %s of field %s is not registered", field.type_ref, field.name)
            return ()
        if is_standard_namespace(nested_type.namespace):
            return ()
        return tuple(
            _text_clause(f"$.{field.name}.{sub_field.name}", f"{field.name}_{sub_field.name}")
            for sub_field in nested_type.fields
        )
    return ()


def is_standard_namespace(namespace: str) -> bool:
    """Return True for builtin/standard-library namespaces that are never flattened."""
    return any(
        namespace == standard or namespace.startswith(f"{standard}.")
        for standard in STANDARD_NAMESPACES
    )


def _vector_clause() -> AttributeClause:
    return AttributeClause(
        json_path=f"$.{VECTOR_FIELD_NAME}",
        alias=VECTOR_FIELD_NAME,
        attribute_type=AttributeType.VECTOR,
        parameters=vector_parameters(),
    )


def _text_clause(json_path: str, alias: str) -> AttributeClause:
    return AttributeClause(json_path=json_path, alias=alias, attribute_type=AttributeType.TEXT)
