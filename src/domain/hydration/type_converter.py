"""Conversion of raw payload values to declared attribute types."""

import re
from collections.abc import Mapping
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional

from dateutil import parser as date_parser

from domain.base.exceptions import ModelDefinitionError, ValueConversionError
from domain.base.ports.logging_port import LoggingPort
from domain.base.types import ArrayOf, MapOf, ModelOf, Primitive, PrimitiveKind, TypeSpec
from domain.base.utils import is_sequence

_TRUE_PATTERN = re.compile(r"\A(true|t|yes|y|1)\Z", re.IGNORECASE)


class TypeConverter:
    """Convert one raw value to its declared type spec.

    Nested models are hydrated through their own ``from_dict``, so a
    polymorphic base resolves to the subtype named by the payload.
    """

    def __init__(self, logger: Optional[LoggingPort] = None) -> None:
        self._logger = logger

    def convert(self, type_spec: TypeSpec, value: Any) -> Any:
        """
        Convert ``value`` to ``type_spec``.

        :param type_spec: Declared type of the attribute.
        :param value: Raw value from the payload.
        :return: Converted value; None stays None.
        :raises ValueConversionError: If the value cannot be converted.
        """
        if value is None:
            return None

        if isinstance(type_spec, Primitive):
            return self._convert_primitive(type_spec, value)

        if isinstance(type_spec, ModelOf):
            return self._convert_model(type_spec, value)

        if isinstance(type_spec, ArrayOf):
            if not is_sequence(value):
                raise ValueConversionError(str(type_spec), value, "expected a list")
            return [self.convert(type_spec.item, item) for item in value]

        if isinstance(type_spec, MapOf):
            if not isinstance(value, Mapping):
                raise ValueConversionError(str(type_spec), value, "expected a mapping")
            return {key: self.convert(type_spec.value, item) for key, item in value.items()}

        raise ModelDefinitionError(f"Unsupported type spec: {type_spec!r}")

    def _convert_model(self, type_spec: ModelOf, value: Any) -> Any:
        model_cls = type_spec.resolve()
        if isinstance(value, model_cls):
            return value
        if not isinstance(value, Mapping):
            raise ValueConversionError(model_cls.__name__, value, "expected a mapping")
        return model_cls.from_dict(value, logger=self._logger)

    def _convert_primitive(self, type_spec: Primitive, value: Any) -> Any:
        kind = type_spec.kind

        if kind is PrimitiveKind.OBJECT:
            return value

        if kind is PrimitiveKind.STRING:
            if isinstance(value, Enum):
                return str(value.value)
            return value if isinstance(value, str) else str(value)

        if kind is PrimitiveKind.BOOLEAN:
            return self._to_bool(type_spec, value)

        if kind is PrimitiveKind.DATE_TIME:
            return self._to_datetime(type_spec, value)

        if kind is PrimitiveKind.DATE:
            if isinstance(value, datetime):
                return value.date()
            if isinstance(value, date):
                return value
            return self._to_datetime(type_spec, value).date()

        if isinstance(value, bool):
            raise ValueConversionError(str(type_spec), value, "booleans are not numbers")

        try:
            if kind is PrimitiveKind.INTEGER:
                return int(value)
            return float(value)
        except (TypeError, ValueError, OverflowError) as e:
            raise ValueConversionError(str(type_spec), value, str(e)) from e

    @staticmethod
    def _to_bool(type_spec: Primitive, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return bool(_TRUE_PATTERN.match(value.strip()))
        if isinstance(value, (int, float)):
            return bool(value)
        raise ValueConversionError(str(type_spec), value)

    @staticmethod
    def _to_datetime(type_spec: Primitive, value: Any) -> datetime:
        if isinstance(value, datetime):
            return value
        if not isinstance(value, str):
            raise ValueConversionError(str(type_spec), value, "expected an ISO-8601 string")
        try:
            return date_parser.isoparse(value)
        except (ValueError, OverflowError) as e:
            raise ValueConversionError(str(type_spec), value, str(e)) from e
