"""Declared attribute types.

The set of type specs is closed: primitives, a nested model, an array of a
spec and a map of a spec. The type converter dispatches over exactly these
classes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Union

from .exceptions import ModelDefinitionError


class PrimitiveKind(str, Enum):
    STRING = "String"
    INTEGER = "Integer"
    FLOAT = "Float"
    BOOLEAN = "BOOLEAN"
    DATE_TIME = "DateTime"
    DATE = "Date"
    OBJECT = "Object"


class TypeSpec:
    """Marker base class for declared attribute types."""

    __slots__ = ()


@dataclass(frozen=True)
class Primitive(TypeSpec):
    kind: PrimitiveKind

    def __str__(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class ModelOf(TypeSpec):
    """A nested model.

    ``target`` is either the model class or a zero-argument callable returning
    it, for models declared later in the same module.
    """

    target: Union[type, Callable[[], type]]

    def resolve(self) -> type:
        if isinstance(self.target, type):
            return self.target
        resolved = self.target()
        if not isinstance(resolved, type):
            raise ModelDefinitionError(f"ModelOf target did not resolve to a class: {resolved!r}")
        return resolved

    def __str__(self) -> str:
        try:
            return self.resolve().__name__
        except ModelDefinitionError:
            return repr(self.target)


@dataclass(frozen=True)
class ArrayOf(TypeSpec):
    item: TypeSpec

    def __str__(self) -> str:
        return f"Array<{self.item}>"


@dataclass(frozen=True)
class MapOf(TypeSpec):
    """A map with string keys preserved verbatim and values of ``value`` type."""

    value: TypeSpec

    def __str__(self) -> str:
        return f"Hash<String, {self.value}>"


STRING = Primitive(PrimitiveKind.STRING)
INTEGER = Primitive(PrimitiveKind.INTEGER)
FLOAT = Primitive(PrimitiveKind.FLOAT)
BOOLEAN = Primitive(PrimitiveKind.BOOLEAN)
DATE_TIME = Primitive(PrimitiveKind.DATE_TIME)
DATE = Primitive(PrimitiveKind.DATE)
OBJECT = Primitive(PrimitiveKind.OBJECT)


def as_type_spec(declared: Any) -> TypeSpec:
    """Accept a type spec, or a model class as shorthand for ``ModelOf``."""
    if isinstance(declared, TypeSpec):
        return declared
    if isinstance(declared, type) and hasattr(declared, "build_from_hash"):
        return ModelOf(declared)
    raise ModelDefinitionError(f"Not a valid attribute type: {declared!r}")
