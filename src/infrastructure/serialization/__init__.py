"""Wire-format serialization."""

from .response_deserializer import ResponseDeserializer
from .serializer import sanitize_for_serialization

__all__: list[str] = ["ResponseDeserializer", "sanitize_for_serialization"]
