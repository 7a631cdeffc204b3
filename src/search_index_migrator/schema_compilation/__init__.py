"""Schema compilation exports."""

from .field_classifier import STANDARD_NAMESPACES, classify_field, is_standard_namespace
from .schema_compiler import (
    DEFAULT_CLIENT_BINARY,
    compile_command_block,
    compile_schema_fragment,
    index_name_for,
    key_prefix_for,
    render_create_command,
    render_drop_command,
    render_index_commands,
)
from .schema_models import (
    VECTOR_DIMENSION,
    VECTOR_DISTANCE_METRIC,
    VECTOR_ELEMENT_TYPE,
    AttributeClause,
    AttributeType,
    SchemaFragment,
)

__all__ = [
    "STANDARD_NAMESPACES",
    "classify_field",
    "is_standard_namespace",
    "DEFAULT_CLIENT_BINARY",
    "compile_command_block",
    "compile_schema_fragment",
    "index_name_for",
    "key_prefix_for",
    "render_create_command",
    "render_drop_command",
    "render_index_commands",
    "VECTOR_DIMENSION",
    "VECTOR_DISTANCE_METRIC",
    "VECTOR_ELEMENT_TYPE",
    "AttributeClause",
    "AttributeType",
    "SchemaFragment",
]
