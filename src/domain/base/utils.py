"""Helpers shared by model declaration, hydration and serialization."""

from collections.abc import Mapping
from enum import Enum
from typing import Any


def to_camel(snake_str: str) -> str:
    """Convert snake_case to camelCase for the wire format."""
    components = snake_str.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


def is_sequence(value: Any) -> bool:
    """Return True for list-like values; strings and mappings are not sequences."""
    return isinstance(value, (list, tuple))


def to_plain(value: Any) -> Any:
    """
    Recursively unwrap a value into plain data.

    Models become dictionaries keyed by wire names, lists drop ``None``
    elements, dictionaries keep their keys and enum members become their
    values. Anything else is returned unchanged.

    :param value: Any attribute value.
    :return: Plain representation of the value.
    """
    if isinstance(value, (list, tuple)):
        return [to_plain(item) for item in value if item is not None]

    if isinstance(value, Mapping):
        return {key: to_plain(item) for key, item in value.items()}

    # Enum members before the to_dict check: BaseEnumModel defines to_dict too
    if isinstance(value, Enum):
        return value.value

    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()

    return value


def freeze(value: Any) -> Any:
    """Return a hashable equivalent of a value, freezing nested containers."""
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)

    if isinstance(value, Mapping):
        return frozenset((key, freeze(item)) for key, item in value.items())

    if isinstance(value, (set, frozenset)):
        return frozenset(freeze(item) for item in value)

    return value
