"""Hydration of models from untyped payloads."""

from .field_mapper import ModelFieldMapper
from .hydrator import AttributeHydrator
from .subtype_resolver import SubtypeResolver
from .type_converter import TypeConverter

__all__: list[str] = [
    "AttributeHydrator",
    "ModelFieldMapper",
    "SubtypeResolver",
    "TypeConverter",
]
