"""Search-index schema entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

VECTOR_FIELD_NAME = "embedding"
VECTOR_ALGORITHM = "FLAT"
VECTOR_ELEMENT_TYPE = "FLOAT32"
VECTOR_DIMENSION = 1536
VECTOR_DISTANCE_METRIC = "COSINE"


class AttributeType(str, Enum):
    """Index attribute types emitted by the generator."""

    TEXT = "TEXT"
    VECTOR = "VECTOR"


@dataclass(frozen=True)
class AttributeClause:
    """A single schema-field declaration of the index definition."""

    json_path: str
    alias: str
    attribute_type: AttributeType
    parameters: tuple[str, ...] = ()

    def render(self) -> str:
        parts = [self.json_path, "AS", self.alias, self.attribute_type.value, *self.parameters]
        return " ".join(parts)


@dataclass(frozen=True)
class SchemaFragment:
    """Index name, key prefix, and ordered clauses for one entity."""

    entity_name: str
    index_name: str
    key_prefix: str
    clauses: tuple[AttributeClause, ...]

    def render_schema(self) -> str:
        return " ".join(clause.render() for clause in self.clauses).strip()


def vector_parameters() -> tuple[str, ...]:
    """Return the FLAT vector attribute parameters, preceded by their argument count."""
    attributes = (
        "TYPE",
        VECTOR_ELEMENT_TYPE,
        "DIM",
        str(VECTOR_DIMENSION),
        "DISTANCE_METRIC",
        VECTOR_DISTANCE_METRIC,
    )
    return (VECTOR_ALGORITHM, str(len(attributes)), *attributes)
