"""Deserialization of response bodies into declared return types."""

import json
from typing import Any, Optional

from domain.base.exceptions import ResponseDecodeError
from domain.base.ports.logging_port import LoggingPort
from domain.base.types import Primitive, TypeSpec
from domain.hydration.type_converter import TypeConverter
from infrastructure.adapters.logging_adapter import LoggingAdapter


class ResponseDeserializer:
    """Turn a response body into an instance of the operation's return type."""

    def __init__(
        self,
        converter: Optional[TypeConverter] = None,
        logger: Optional[LoggingPort] = None,
    ) -> None:
        self._logger = logger or LoggingAdapter("hydrator.response")
        self._converter = converter or TypeConverter(logger=self._logger)

    def deserialize(self, body: Any, return_type: TypeSpec) -> Any:
        """
        Deserializes a response body into an object.

        :param body: Raw body (str or bytes holding JSON) or already parsed data.
        :param return_type: Declared return type of the operation.
        :return: Deserialized data; None for an empty body.
        :raises ResponseDecodeError: If the body is not UTF-8, or not JSON where a structured type was expected.
        """
        data = self._decode(body, return_type)
        return self._converter.convert(return_type, data)

    def _decode(self, body: Any, return_type: TypeSpec) -> Any:
        if isinstance(body, (bytes, bytearray)):
            try:
                body = body.decode("utf-8")
            except UnicodeDecodeError as e:
                raise self._decode_error(return_type, e) from e
        if not isinstance(body, str):
            return body
        if not body.strip():
            return None

        try:
            return json.loads(body)
        except ValueError as e:
            if isinstance(return_type, Primitive):
                # plain-text bodies for primitive return types
                return body
            raise self._decode_error(return_type, e) from e

    def _decode_error(self, return_type: TypeSpec, error: ValueError) -> ResponseDecodeError:
        self._logger.error("response_decode_failed", return_type=str(return_type), error=str(error))
        return ResponseDecodeError(str(return_type), str(error))
