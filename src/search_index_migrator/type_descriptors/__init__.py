"""Type descriptor source exports."""

from .descriptor_models import FieldDescriptor, FieldKind, TypeDescriptor
from .descriptor_registry import DescriptorError, DescriptorRegistry, TypeDescriptorSource
from .manifest_reader import load_descriptor_manifest

__all__ = [
    "FieldDescriptor",
    "FieldKind",
    "TypeDescriptor",
    "DescriptorError",
    "DescriptorRegistry",
    "TypeDescriptorSource",
    "load_descriptor_manifest",
]
