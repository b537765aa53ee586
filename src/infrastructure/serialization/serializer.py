"""Conversion of models and values into JSON-ready data."""

import base64
from collections.abc import Mapping
from datetime import date, datetime
from enum import Enum
from typing import Any

from domain.base.model import Model

PRIMITIVE_TYPES = (float, bool, str, int)


def sanitize_for_serialization(obj: Any) -> Any:
    """
    Builds a JSON-ready object.

    If obj is None, return None.
    If obj is an enum member, return its value.
    If obj is str, int, float, bool, return directly.
    If obj is bytes, return it base64-encoded.
    If obj is datetime.datetime, datetime.date, convert to string in iso8601 format.
    If obj is list or tuple, sanitize each element.
    If obj is dict, sanitize each value.
    If obj is a model, return its set attributes keyed by wire name.

    :param obj: The data to serialize.
    :return: The serialized form of data.
    """
    if obj is None:
        return None
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, PRIMITIVE_TYPES):
        return obj
    if isinstance(obj, (bytes, bytearray)):
        return base64.b64encode(obj).decode("ascii")
    if isinstance(obj, (list, tuple)):
        return [sanitize_for_serialization(item) for item in obj]
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()

    if isinstance(obj, Model):
        obj_dict = {
            attribute.wire_name: getattr(obj, name)
            for name, attribute in obj.attributes().items()
            if attribute.is_set(obj)
        }
    elif isinstance(obj, Mapping):
        obj_dict = obj
    else:
        raise TypeError(f"Object of type {type(obj).__name__} is not serializable")

    return {key: sanitize_for_serialization(value) for key, value in obj_dict.items()}
