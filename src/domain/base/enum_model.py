"""String enums with a forward-compatible sentinel member."""

from enum import Enum
from typing import Any

from .exceptions import ModelDefinitionError

UNKNOWN_ENUM_VALUE = "UNKNOWN_ENUM_VALUE"


class BaseEnumModel(str, Enum):
    """
    Base class for constrained-string attribute values.

    Subclasses list the values the service documents plus the reserved
    ``UNKNOWN_ENUM_VALUE`` member, which stands in for any value the service
    starts returning after this client was built::

        class LifecycleState(BaseEnumModel):
            CREATING = "CREATING"
            ACTIVE = "ACTIVE"
            UNKNOWN_ENUM_VALUE = "UNKNOWN_ENUM_VALUE"

    Members are ``str`` instances, so ``LifecycleState.ACTIVE == "ACTIVE"``.
    """

    @classmethod
    def unknown(cls) -> "BaseEnumModel":
        """Return the sentinel member."""
        try:
            return cls(UNKNOWN_ENUM_VALUE)
        except ValueError:
            raise ModelDefinitionError(
                f"{cls.__name__} does not declare {UNKNOWN_ENUM_VALUE}"
            ) from None

    @classmethod
    def has_sentinel(cls) -> bool:
        return UNKNOWN_ENUM_VALUE in cls._value2member_map_

    @classmethod
    def is_known(cls, value: Any) -> bool:
        """Check whether a value is one of the documented members."""
        if isinstance(value, cls):
            return value.value != UNKNOWN_ENUM_VALUE
        if not isinstance(value, str):
            return False
        return value != UNKNOWN_ENUM_VALUE and value in cls._value2member_map_

    @classmethod
    def allowed_values(cls) -> list[str]:
        """Documented values, without the sentinel."""
        return [member.value for member in cls if member.value != UNKNOWN_ENUM_VALUE]

    @classmethod
    def from_value(cls, value: Any) -> Any:
        """
        Map a raw value onto a member.

        ``None`` stays ``None``, known values become members, everything else
        becomes the sentinel.

        :param value: Raw value, usually a string from a response payload.
        :return: Enum member or None.
        """
        if value is None:
            return None
        if isinstance(value, cls):
            return value
        if cls.is_known(value) or value == UNKNOWN_ENUM_VALUE:
            return cls(value)
        return cls.unknown()

    def to_dict(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}.{self.name}"
