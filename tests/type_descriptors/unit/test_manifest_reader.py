"""Descriptor manifest reader tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from search_index_migrator.type_descriptors import (
    DescriptorError,
    FieldDescriptor,
    FieldKind,
    load_descriptor_manifest,
)


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_sample_manifest_in_declared_order() -> None:
    sample_path = Path(__file__).resolve().parents[3] / "samples" / "index-descriptors.yaml"

    registry = load_descriptor_manifest(sample_path)
    descriptors = registry.discover("com.proceduralnexus.documentanalysis.domain")

    assert [descriptor.name for descriptor in descriptors] == [
        "DocumentChunk",
        "Metadata",
        "SemanticCacheEntry",
    ]
    assert descriptors[0].fields[3] == FieldDescriptor(
        name="metadata", kind=FieldKind.NESTED_OBJECT, type_ref="Metadata"
    )
    assert descriptors[0].fields[4].kind is FieldKind.COLLECTION


def test_type_namespace_overrides_manifest_default(tmp_path: Path) -> None:
    manifest = _write_file(
        tmp_path / "index-descriptors.yaml",
        """
namespace: app.domain
types:
  - name: Profile
    fields:
      - {name: email, kind: scalar}
  - name: Clock
    namespace: app.support
    fields:
      - {name: zone, kind: SCALAR}
""",
    )

    registry = load_descriptor_manifest(manifest)

    assert [descriptor.name for descriptor in registry.discover("app.domain")] == ["Profile"]
    (clock,) = registry.discover("app.support")
    assert clock.fields == (FieldDescriptor(name="zone", kind=FieldKind.SCALAR),)


def test_empty_manifest_yields_empty_registry(tmp_path: Path) -> None:
    manifest = _write_file(tmp_path / "index-descriptors.yaml", "")

    assert len(load_descriptor_manifest(manifest)) == 0


def test_errors_when_manifest_missing(tmp_path: Path) -> None:
    with pytest.raises(DescriptorError, match="not found"):
        load_descriptor_manifest(tmp_path / "absent.yaml")


@pytest.mark.parametrize(
    ("contents", "message"),
    [
        ("- just\n- a list\n", "root must be a mapping"),
        ("types: Profile\n", "'types' must be a list"),
        ("types:\n  - fields: []\n", "name must be a string"),
        ("types:\n  - name: Profile\n", "has no namespace"),
        (
            "namespace: app\ntypes:\n  - name: Profile\n    fields:\n"
            "      - {name: email, kind: blob}\n",
            "is not one of",
        ),
        (
            "namespace: app\ntypes:\n  - name: Profile\n    fields:\n"
            "      - {name: address, kind: nested-object}\n",
            "requires 'type'",
        ),
        (
            "namespace: app\ntypes:\n  - name: Profile\n    fields:\n"
            "      - {name: email, kind: scalar}\n      - {name: email, kind: scalar}\n",
            "Duplicate field 'email'",
        ),
        (
            "namespace: app\ntypes:\n  - name: Passage\n    fields:\n"
            "      - {name: embedding, kind: collection}\n"
            "      - {name: Embedding, kind: vector}\n",
            "Duplicate field 'Embedding'",
        ),
        (
            "namespace: app\ntypes:\n  - name: Profile\n    fields:\n"
            "      - {name: 'home address', kind: scalar}\n",
            "'home address' must use letters, digits and '_'",
        ),
        (
            "namespace: app\ntypes:\n  - name: \"Pro'file\"\n",
            "must use letters, digits and '_'",
        ),
        (
            "namespace: app\ntypes:\n  - name: 2ndProfile\n",
            "not start with a digit",
        ),
        (
            "namespace: app\ntypes:\n  - name: Profile\n  - name: Profile\n",
            "registered twice",
        ),
        ("types: [\n", "Failed to parse"),
    ],
)
def test_errors_for_malformed_manifest(tmp_path: Path, contents: str, message: str) -> None:
    manifest = _write_file(tmp_path / "index-descriptors.yaml", contents)

    with pytest.raises(DescriptorError, match=message):
        load_descriptor_manifest(manifest)


def test_errors_when_manifest_is_not_utf8(tmp_path: Path) -> None:
    manifest = tmp_path / "index-descriptors.yaml"
    manifest.write_bytes(b"namespace: \xff\xfe\n")

    with pytest.raises(DescriptorError, match="not valid UTF-8"):
        load_descriptor_manifest(manifest)
