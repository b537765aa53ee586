"""
Hydrator - typed service models built from untyped response payloads.

Models declare their attributes once; instances are hydrated from parsed
JSON, converted back to wire-keyed dictionaries and compared structurally.
Unknown enum values degrade to ``UNKNOWN_ENUM_VALUE`` and unknown subtypes
degrade to the declared base class instead of failing.

Usage:
    from hydrator import Attribute, EnumAttribute, Model, STRING

    class Cluster(Model):
        name = Attribute("name", STRING)
        lifecycle_state = EnumAttribute("lifecycleState", LifecycleState)

    cluster = Cluster.from_dict({"name": "c1", "lifecycleState": "ACTIVE"})
"""

from config import HydrationConfig, get_hydration_config, set_hydration_config
from domain.base.attributes import Attribute, EnumAttribute, EnumListAttribute
from domain.base.enum_model import UNKNOWN_ENUM_VALUE, BaseEnumModel
from domain.base.exceptions import (
    ConfigurationError,
    DomainException,
    DuplicateAttributeError,
    HydrationError,
    InvalidAttributeValueError,
    ModelDefinitionError,
    ModelValidationError,
    ResponseDecodeError,
    UnknownAttributeError,
    ValueConversionError,
)
from domain.base.model import Model
from domain.base.types import (
    BOOLEAN,
    DATE,
    DATE_TIME,
    FLOAT,
    INTEGER,
    OBJECT,
    STRING,
    ArrayOf,
    MapOf,
    ModelOf,
)
from infrastructure.serialization import ResponseDeserializer, sanitize_for_serialization

__version__ = "0.1.0"

__all__: list[str] = [
    "UNKNOWN_ENUM_VALUE",
    "BOOLEAN",
    "DATE",
    "DATE_TIME",
    "FLOAT",
    "INTEGER",
    "OBJECT",
    "STRING",
    "ArrayOf",
    "Attribute",
    "BaseEnumModel",
    "ConfigurationError",
    "DomainException",
    "DuplicateAttributeError",
    "EnumAttribute",
    "EnumListAttribute",
    "HydrationConfig",
    "HydrationError",
    "InvalidAttributeValueError",
    "MapOf",
    "Model",
    "ModelDefinitionError",
    "ModelOf",
    "ModelValidationError",
    "ResponseDecodeError",
    "ResponseDeserializer",
    "UnknownAttributeError",
    "ValueConversionError",
    "get_hydration_config",
    "sanitize_for_serialization",
    "set_hydration_config",
]
