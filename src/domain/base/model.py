"""Base class for generated service models."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, ClassVar, Optional, TypeVar

from domain.base.attributes import Attribute
from domain.base.exceptions import ModelDefinitionError, ModelValidationError
from domain.base.ports.logging_port import LoggingPort
from domain.base.utils import freeze, to_plain
from domain.hydration.field_mapper import ModelFieldMapper
from domain.hydration.hydrator import AttributeHydrator
from domain.hydration.subtype_resolver import SubtypeResolver

T = TypeVar("T", bound="Model")

_EMPTY: Mapping = MappingProxyType({})


def _default_logger() -> LoggingPort:
    from infrastructure.adapters.logging_adapter import LoggingAdapter

    return LoggingAdapter("hydrator")


class Model:
    """
    Base class for all models. Provides hydration from plain dictionaries,
    conversion back to them, and structural equality.

    Attributes are declared as class-level ``Attribute`` descriptors. When a
    subclass is defined its attribute table (local name, wire name, declared
    type) is collected once, parent attributes first, and exposed read-only.

    Polymorphic families declare the local name of their discriminator on the
    base class and register each subtype with a class keyword::

        class TrafficNode(Model):
            __discriminator__ = "type"
            type = EnumAttribute("type", TrafficNodeType)

        class VisibleTrafficNode(TrafficNode, discriminator_value="VISIBLE"):
            entity_id = Attribute("entityId", STRING)
    """

    __discriminator__: ClassVar[Optional[str]] = None
    __strict__: ClassVar[bool] = False

    _attributes: ClassVar[Mapping[str, Attribute]] = _EMPTY
    _attribute_map: ClassVar[Mapping[str, str]] = _EMPTY
    _wire_map: ClassVar[Mapping[str, str]] = _EMPTY
    _type_map: ClassVar[Mapping[str, Any]] = _EMPTY
    _family_base: ClassVar[Optional[type]] = None
    _subtypes: ClassVar[dict[str, type]] = {}
    _discriminator_value: ClassVar[Optional[str]] = None

    def __init_subclass__(cls, discriminator_value: Optional[str] = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._collect_attributes()

        if "__discriminator__" in cls.__dict__ and cls.__discriminator__ is not None:
            if cls.__discriminator__ not in cls._attributes:
                raise ModelDefinitionError(
                    f"{cls.__name__} discriminator '{cls.__discriminator__}' is not a declared attribute"
                )
            cls._family_base = cls
            cls._subtypes = {}

        if discriminator_value is not None:
            cls._register_subtype(discriminator_value)

    @classmethod
    def _collect_attributes(cls) -> None:
        attributes: dict[str, Attribute] = {}
        for base in reversed(cls.__mro__[1:]):
            attributes.update(getattr(base, "_attributes", _EMPTY))
        for name, value in cls.__dict__.items():
            if isinstance(value, Attribute):
                attributes[name] = value

        wire_map: dict[str, str] = {}
        for name, attribute in attributes.items():
            if attribute.wire_name in wire_map:
                raise ModelDefinitionError(
                    f"{cls.__name__}: wire name '{attribute.wire_name}' is used by "
                    f"'{wire_map[attribute.wire_name]}' and '{name}'"
                )
            wire_map[attribute.wire_name] = name

        cls._attributes = MappingProxyType(attributes)
        cls._attribute_map = MappingProxyType({name: a.wire_name for name, a in attributes.items()})
        cls._wire_map = MappingProxyType(wire_map)
        cls._type_map = MappingProxyType({name: a.type_spec for name, a in attributes.items()})

    @classmethod
    def _register_subtype(cls, discriminator_value: str) -> None:
        family = cls._family_base
        if family is None:
            raise ModelDefinitionError(
                f"{cls.__name__} sets discriminator_value but no base class declares __discriminator__"
            )
        registered = family._subtypes.get(discriminator_value)
        if registered is not None:
            raise ModelDefinitionError(
                f"{family.__name__} discriminator '{discriminator_value}' is already "
                f"registered to {registered.__name__}"
            )
        family._subtypes[discriminator_value] = cls
        cls._discriminator_value = discriminator_value

    def __init__(
        self,
        attributes: Optional[Mapping[str, Any]] = None,
        *,
        logger: Optional[LoggingPort] = None,
        **kwargs: Any,
    ) -> None:
        """
        Initializes the object.

        Values are assigned as given; use ``from_dict`` for payloads that need
        type conversion. ``None`` values are skipped.

        :param attributes: Attribute values keyed by wire or local name.
        :param logger: Logger for advisory entries (unknown enum values, unresolved subtypes).
        :param kwargs: Attribute values as keywords, merged over ``attributes``.
        """
        self._logger = logger or _default_logger()

        values: dict[str, Any] = dict(attributes) if isinstance(attributes, Mapping) else {}
        values.update(kwargs)

        mapped = ModelFieldMapper(type(self)).map_input_fields(values, strict=self.__strict__)
        for name, value in mapped.items():
            if value is not None:
                setattr(self, name, value)

        if self._discriminator_value is not None:
            setattr(self, self.__discriminator__, self._discriminator_value)

    # Attribute tables

    @classmethod
    def attributes(cls) -> Mapping[str, Attribute]:
        """Declared attributes keyed by local name, in declared order."""
        return cls._attributes

    @classmethod
    def attribute_map(cls) -> Mapping[str, str]:
        """Attribute mapping from local name to wire key."""
        return cls._attribute_map

    @classmethod
    def wire_map(cls) -> Mapping[str, str]:
        """Attribute mapping from wire key to local name."""
        return cls._wire_map

    @classmethod
    def type_map(cls) -> Mapping[str, Any]:
        """Attribute type mapping."""
        return cls._type_map

    @classmethod
    def acceptable_attributes(cls) -> frozenset[str]:
        """Every key the constructor accepts: wire and local names."""
        return frozenset(cls._attribute_map) | frozenset(cls._wire_map)

    # Polymorphism

    @classmethod
    def discriminator_attribute(cls) -> Optional[Attribute]:
        if cls._family_base is None:
            return None
        return cls._attributes[cls._family_base.__discriminator__]

    @classmethod
    def discriminator_value(cls) -> Optional[str]:
        return cls._discriminator_value

    @classmethod
    def subtypes(cls) -> Mapping[str, type]:
        """Registered subtypes of this class's family, keyed by discriminator value."""
        if cls._family_base is None:
            return _EMPTY
        return MappingProxyType(cls._family_base._subtypes)

    @classmethod
    def get_subtype(cls, payload: Any, logger: Optional[LoggingPort] = None) -> type:
        """
        Given the dictionary representation of a subtype of this class,
        use the info in it to return the class of the subtype.
        """
        return SubtypeResolver(logger=logger or _default_logger()).resolve(cls, payload)

    # Hydration

    @classmethod
    def from_dict(cls: type[T], payload: Any, logger: Optional[LoggingPort] = None) -> T:
        """
        Create a model object from a dictionary, resolving the subtype first.

        :param payload: Raw mapping, typically a parsed JSON response.
        :param logger: Logger for advisory entries.
        :return: A populated instance of ``cls`` or of the resolved subtype.
        """
        logger = logger or _default_logger()
        model_cls = cls.get_subtype(payload, logger=logger)
        return model_cls(logger=logger).build_from_hash(payload)

    def build_from_hash(self: T, payload: Any) -> T:
        """Builds the object from a dictionary and returns it."""
        return AttributeHydrator(logger=self._logger).hydrate(self, payload)

    # Conversion

    def is_set(self, name: str) -> bool:
        """Whether an attribute has been assigned, including an explicit ``None``."""
        return self._attributes[name].is_set(self)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the model object to a dictionary keyed by wire names.

        Attributes that were never assigned are left out.
        """
        values = {
            name: to_plain(getattr(self, name))
            for name, attribute in self._attributes.items()
            if attribute.is_set(self)
        }
        return ModelFieldMapper(type(self)).map_output_fields(values)

    to_hash = to_dict

    # Validation

    def list_invalid_properties(self) -> list[str]:
        invalid_properties = []
        for name, attribute in self._attributes.items():
            value = getattr(self, name)
            if attribute.required and value is None:
                invalid_properties.append(f'invalid value for "{name}", {name} cannot be nil.')
            invalid_properties.extend(attribute.limit_violations(value))
        return invalid_properties

    def is_valid(self) -> bool:
        return not self.list_invalid_properties()

    def validate(self) -> None:
        errors = self.list_invalid_properties()
        if errors:
            raise ModelValidationError(type(self).__name__, errors)

    # Equality

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, Model):
            return NotImplemented
        if type(self) is not type(other):
            return False
        return all(getattr(self, name) == getattr(other, name) for name in self._attributes)

    def __hash__(self) -> int:
        return hash((type(self), tuple(freeze(getattr(self, name)) for name in self._attributes)))

    def __str__(self) -> str:
        return str(self.to_dict())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_dict()!r})"
