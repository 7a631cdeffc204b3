"""Schema compiler service producing DROP+CREATE index command pairs."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from search_index_migrator.type_descriptors.descriptor_models import TypeDescriptor
from search_index_migrator.type_descriptors.descriptor_registry import TypeDescriptorSource

from .field_classifier import classify_field
from .schema_models import AttributeClause, AttributeType, SchemaFragment

DEFAULT_CLIENT_BINARY = "redis-cli"

_INDEX_NAME_PREFIX = "idx:"
_KEY_PREFIX_STRIPPED_TOKEN = "entry"

logger = logging.getLogger(__name__)


def index_name_for(entity_name: str) -> str:
    return f"{_INDEX_NAME_PREFIX}{entity_name.lower()}"


def key_prefix_for(entity_name: str) -> str:
    return f"{entity_name.lower().replace(_KEY_PREFIX_STRIPPED_TOKEN, '')}:"


def compile_schema_fragment(
    descriptor: TypeDescriptor, source: TypeDescriptorSource
) -> SchemaFragment:
    """Classify every field in declaration order and collect the resulting clauses."""
    clauses: list[AttributeClause] = []
    for field in descriptor.fields:
        for clause in classify_field(
            field,
            lambda type_ref: source.resolve(type_ref, descriptor.namespace),
        ):
            if clause.attribute_type is AttributeType.VECTOR and clause in clauses:
                logger.warning(
                    "Entity %s declares more than one embedding field; keeping the first",
                    descriptor.name,
                )
                continue
            clauses.append(clause)
    if not clauses:
        logger.warning(
            "Entity %s has no indexable fields; its index schema is empty", descriptor.name
        )
    return SchemaFragment(
        entity_name=descriptor.name,
        index_name=index_name_for(descriptor.name),
        key_prefix=key_prefix_for(descriptor.name),
        clauses=tuple(clauses),
    )


def render_drop_command(fragment: SchemaFragment) -> str:
    return f"FT.DROPINDEX {fragment.index_name}"


def render_create_command(fragment: SchemaFragment) -> str:
    schema = fragment.render_schema()
    command = f"FT.CREATE {fragment.index_name} ON JSON PREFIX 1 {fragment.key_prefix} SCHEMA"
    return f"{command} {schema}" if schema else command


def render_index_commands(
    fragment: SchemaFragment, client_binary: str = DEFAULT_CLIENT_BINARY
) -> str:
    """Render the entity's command pair; the drop always precedes the create."""
    return "\n".join(
        f"{client_binary} {command}"
        for command in (render_drop_command(fragment), render_create_command(fragment))
    )


def compile_command_block(
    descriptors: Sequence[TypeDescriptor],
    source: TypeDescriptorSource,
    client_binary: str = DEFAULT_CLIENT_BINARY,
) -> str:
    """Concatenate per-entity command pairs in discovery order."""
    return "\n".join(
        render_index_commands(compile_schema_fragment(descriptor, source), client_binary)
        for descriptor in descriptors
    )
