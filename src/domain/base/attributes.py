"""Attribute declarations for model classes."""

import re
from typing import Any, Optional, Union

from .enum_model import BaseEnumModel
from .exceptions import InvalidAttributeValueError, ModelDefinitionError, ValueConversionError
from .types import STRING, ArrayOf, TypeSpec, as_type_spec
from .utils import is_sequence, to_camel


class Attribute:
    """
    A declared model attribute.

    Used as a class-level descriptor; the local name is the name it is bound
    to in the class body and the wire name defaults to its camelCase form::

        class Volume(Model):
            display_name = Attribute("displayName", STRING, required=True)

    Values live in the instance ``__dict__``; an attribute that was never
    assigned reads as ``None`` but is reported as unset.

    Optional limits (``minimum``/``maximum`` for numbers, ``min_length``/
    ``max_length``/``pattern`` for strings, ``min_items``/``max_items`` for
    lists) are checked on every assignment and by
    ``Model.list_invalid_properties``.
    """

    def __init__(
        self,
        wire_name: Optional[str] = None,
        type_spec: Any = STRING,
        *,
        required: bool = False,
        nullable: bool = False,
        minimum: Optional[float] = None,
        maximum: Optional[float] = None,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
        min_items: Optional[int] = None,
        max_items: Optional[int] = None,
        pattern: Union[str, re.Pattern, None] = None,
    ) -> None:
        self.wire_name = wire_name
        self.type_spec: TypeSpec = as_type_spec(type_spec)
        self.required = required
        self.nullable = nullable
        self.minimum = minimum
        self.maximum = maximum
        self.min_length = min_length
        self.max_length = max_length
        self.min_items = min_items
        self.max_items = max_items
        self.pattern: Optional[re.Pattern] = re.compile(pattern) if isinstance(pattern, str) else pattern
        self.name: Optional[str] = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        if self.wire_name is None:
            self.wire_name = to_camel(name)

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        return instance.__dict__.get(self.name)

    def __set__(self, instance: Any, value: Any) -> None:
        value = self.coerce(instance, value)
        errors = self.limit_violations(value)
        if errors:
            raise InvalidAttributeValueError(type(instance).__name__, self.name, errors)
        instance.__dict__[self.name] = value

    def __delete__(self, instance: Any) -> None:
        instance.__dict__.pop(self.name, None)

    def coerce(self, instance: Any, value: Any) -> Any:
        """Hook for subclasses that constrain assigned values."""
        return value

    def limit_violations(self, value: Any) -> list[str]:
        """
        Check a value against the declared limits.

        :param value: Value about to be assigned, or already held.
        :return: One message per violated limit; empty for None.
        """
        if value is None:
            return []

        errors = []
        label = f'invalid value for "{self.name}"'

        if isinstance(value, (int, float)) and not isinstance(value, bool):
            if self.maximum is not None and value > self.maximum:
                errors.append(f"{label}, must be smaller than or equal to {self.maximum}.")
            if self.minimum is not None and value < self.minimum:
                errors.append(f"{label}, must be greater than or equal to {self.minimum}.")

        if isinstance(value, str):
            if self.max_length is not None and len(value) > self.max_length:
                errors.append(
                    f"{label}, the character length must be smaller than or equal to {self.max_length}."
                )
            if self.min_length is not None and len(value) < self.min_length:
                errors.append(
                    f"{label}, the character length must be greater than or equal to {self.min_length}."
                )
            if self.pattern is not None and not self.pattern.search(value):
                errors.append(f"{label}, must conform to the pattern /{self.pattern.pattern}/.")

        if is_sequence(value):
            if self.max_items is not None and len(value) > self.max_items:
                errors.append(f"{label}, number of items must be less than or equal to {self.max_items}.")
            if self.min_items is not None and len(value) < self.min_items:
                errors.append(f"{label}, number of items must be greater than or equal to {self.min_items}.")

        return errors

    def is_set(self, instance: Any) -> bool:
        return self.name in instance.__dict__

    @property
    def is_array(self) -> bool:
        return isinstance(self.type_spec, ArrayOf)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r}, wire={self.wire_name!r}, type={self.type_spec})"


class EnumAttribute(Attribute):
    """String attribute restricted to the members of a ``BaseEnumModel``.

    Values outside the enum are stored as its ``UNKNOWN_ENUM_VALUE`` member
    and reported to the instance's logger.
    """

    def __init__(self, wire_name: Optional[str] = None, enum_cls: type = None, **kwargs: Any) -> None:
        if not (isinstance(enum_cls, type) and issubclass(enum_cls, BaseEnumModel)):
            raise ModelDefinitionError(f"EnumAttribute requires a BaseEnumModel subclass, got {enum_cls!r}")
        if not enum_cls.has_sentinel():
            raise ModelDefinitionError(f"{enum_cls.__name__} must declare UNKNOWN_ENUM_VALUE")
        super().__init__(wire_name, self._declared_type(), **kwargs)
        self.enum_cls = enum_cls

    def _declared_type(self) -> TypeSpec:
        return STRING

    def coerce(self, instance: Any, value: Any) -> Any:
        return self._coerce_one(instance, value)

    def _coerce_one(self, instance: Any, value: Any) -> Any:
        if value is None or self.enum_cls.is_known(value):
            return self.enum_cls.from_value(value)

        logger = getattr(instance, "_logger", None)
        if logger is not None:
            logger.debug(
                "unknown_enum_value",
                model=type(instance).__name__,
                attribute=self.name,
                value=repr(value),
                mapped_to=self.enum_cls.unknown().value,
            )
        return self.enum_cls.unknown()


class EnumListAttribute(EnumAttribute):
    """List of enum values; each element is checked independently."""

    def _declared_type(self) -> TypeSpec:
        return ArrayOf(STRING)

    def coerce(self, instance: Any, value: Any) -> Any:
        if value is None:
            return None
        if not is_sequence(value):
            raise ValueConversionError(f"Array<{self.enum_cls.__name__}>", value, "expected a list")
        return [self._coerce_one(instance, item) for item in value]
