"""Population of model instances from untyped key/value payloads."""

from collections.abc import Mapping
from typing import Any, Optional

from domain.base.ports.logging_port import LoggingPort
from domain.base.utils import is_sequence
from domain.hydration.field_mapper import ModelFieldMapper
from domain.hydration.type_converter import TypeConverter


class AttributeHydrator:
    """Assign converted payload values to the declared attributes of a model."""

    def __init__(
        self,
        converter: Optional[TypeConverter] = None,
        logger: Optional[LoggingPort] = None,
    ) -> None:
        self._logger = logger
        self._converter = converter or TypeConverter(logger=logger)

    def hydrate(self, instance: Any, payload: Any) -> Any:
        """
        Populate ``instance`` from ``payload`` and return it.

        Keys may use wire or local names. Absent keys leave the current value
        in place, unknown keys are ignored and non-mapping payloads leave the
        instance untouched.

        :param instance: Model instance to populate.
        :param payload: Raw mapping, typically parsed JSON.
        :return: The same instance.
        :raises DuplicateAttributeError: If both key forms of one attribute are given.
        :raises ValueConversionError: If a value cannot be converted.
        """
        if not isinstance(payload, Mapping):
            return instance

        model_cls = type(instance)
        values = ModelFieldMapper(model_cls).map_input_fields(payload)

        for name, attribute in model_cls.attributes().items():
            if name not in values:
                continue
            value = values[name]

            if value is None:
                if attribute.nullable:
                    setattr(instance, name, None)
                continue

            if attribute.is_array:
                # TODO: surface non-list array input as an error once callers can handle it
                if not is_sequence(value):
                    self._log_skipped_array(model_cls, name, value)
                    continue
                item_type = attribute.type_spec.item
                setattr(instance, name, [self._converter.convert(item_type, item) for item in value])
            else:
                setattr(instance, name, self._converter.convert(attribute.type_spec, value))

        return instance

    def _log_skipped_array(self, model_cls: type, name: str, value: Any) -> None:
        if self._logger is not None:
            self._logger.debug(
                "array_attribute_not_a_list",
                model=model_cls.__name__,
                attribute=name,
                value_type=type(value).__name__,
            )
