"""Discriminator-based subtype resolution for polymorphic model families."""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional

from config.manager import get_hydration_config
from config.schemas.hydration_schema import HydrationConfig
from domain.base.ports.logging_port import LoggingPort


class SubtypeResolver:
    """Pick the concrete class to instantiate for a payload.

    Resolution is a pure table lookup on the family's discriminator value.
    A missing or unrecognised value resolves to the requested class itself.
    """

    def __init__(
        self,
        logger: Optional[LoggingPort] = None,
        config: Optional[HydrationConfig] = None,
    ) -> None:
        self._logger = logger
        self._config = config

    def resolve(self, model_cls: type, payload: Any) -> type:
        """
        Resolve the subtype of ``model_cls`` named by ``payload``.

        :param model_cls: Declared type, usually the family base.
        :param payload: Raw mapping carrying the discriminator.
        :return: The registered subclass, or ``model_cls`` when none matches.
        """
        attribute = model_cls.discriminator_attribute()
        if attribute is None or not isinstance(payload, Mapping):
            return model_cls

        value = payload.get(attribute.wire_name)
        if value is None:
            value = payload.get(attribute.name)
        if isinstance(value, Enum):
            value = value.value

        subtype = model_cls.subtypes().get(value) if isinstance(value, str) else None
        if subtype is None or not issubclass(subtype, model_cls):
            self._report_unresolved(model_cls, attribute.wire_name, value)
            return model_cls

        return subtype

    def _report_unresolved(self, model_cls: type, discriminator: str, value: Any) -> None:
        if self._logger is None:
            return
        config = self._config or get_hydration_config()
        log = getattr(self._logger, config.unknown_subtype_log_level)
        log(
            "subtype_not_found",
            model=model_cls.__name__,
            discriminator=discriminator,
            value=repr(value),
        )
