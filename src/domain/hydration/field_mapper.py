"""Wire/local key mapping for model attributes."""

from collections.abc import Mapping
from typing import Any

from domain.base.exceptions import DuplicateAttributeError, UnknownAttributeError


class ModelFieldMapper:
    """Translate payload keys between the wire format and local attribute names."""

    def __init__(self, model_cls: type) -> None:
        self.model_cls = model_cls

    @property
    def field_mappings(self) -> Mapping[str, str]:
        """Wire field -> local attribute mappings."""
        return self.model_cls.wire_map()

    def map_input_fields(self, payload: Mapping[str, Any], strict: bool = False) -> dict[str, Any]:
        """
        Map a payload keyed by wire or local names onto local attribute names.

        Keys that match no attribute are dropped unless ``strict`` is set, in
        which case they raise ``UnknownAttributeError``. Supplying both forms
        of one attribute raises ``DuplicateAttributeError`` before anything
        is returned.

        :param payload: Raw key/value input.
        :param strict: Reject undeclared keys.
        :return: Values keyed by local attribute name.
        """
        mapped: dict[str, Any] = {}

        for wire_name, local_name in self.field_mappings.items():
            has_wire = wire_name in payload
            has_local = local_name != wire_name and local_name in payload

            if has_wire and has_local:
                raise DuplicateAttributeError(self.model_cls.__name__, wire_name, local_name)
            if has_wire:
                mapped[local_name] = payload[wire_name]
            elif has_local:
                mapped[local_name] = payload[local_name]

        if strict:
            acceptable = self.model_cls.acceptable_attributes()
            for key in payload:
                if key not in acceptable:
                    raise UnknownAttributeError(self.model_cls.__name__, str(key), sorted(acceptable))

        return mapped

    def map_output_fields(self, values: Mapping[str, Any]) -> dict[str, Any]:
        """Map values keyed by local attribute name onto wire names; unknown keys are dropped."""
        reverse_mappings = self.model_cls.attribute_map()
        return {
            reverse_mappings[local_name]: value
            for local_name, value in values.items()
            if local_name in reverse_mappings
        }
