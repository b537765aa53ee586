"""Domain exceptions for model declaration, hydration and validation."""

from typing import Any, Optional


class DomainException(Exception):
    """Base exception for all model-layer errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Return the exception as a plain dictionary."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(DomainException):
    """Raised when hydrator settings are missing or invalid."""


class HydrationError(DomainException):
    """Base class for errors raised while populating a model."""

    def __init__(
        self,
        message: str,
        model: Optional[str] = None,
        attribute: Optional[str] = None,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, error_code=error_code, details=details)
        self.model = model
        self.attribute = attribute
        if model:
            self.details["model"] = model
        if attribute:
            self.details["attribute"] = attribute


class DuplicateAttributeError(HydrationError):
    """Raised when both the wire and the local key of one attribute are supplied."""

    def __init__(self, model: str, wire_name: str, local_name: str) -> None:
        super().__init__(
            f"You cannot provide both '{wire_name}' and '{local_name}'",
            model=model,
            attribute=local_name,
            error_code="DUPLICATE_ATTRIBUTE",
            details={"wire_name": wire_name, "local_name": local_name},
        )
        self.wire_name = wire_name
        self.local_name = local_name


class UnknownAttributeError(HydrationError):
    """Raised by strict models when a constructor key is not a declared attribute."""

    def __init__(self, model: str, key: str, acceptable: list[str]) -> None:
        super().__init__(
            f"'{key}' is not a valid attribute in '{model}'",
            model=model,
            attribute=key,
            error_code="UNKNOWN_ATTRIBUTE",
            details={"acceptable_attributes": acceptable},
        )
        self.key = key


class ValueConversionError(HydrationError, ValueError):
    """Raised when a raw value cannot be converted to its declared type."""

    def __init__(self, type_name: str, value: Any, reason: Optional[str] = None) -> None:
        message = f"Failed to convert {value!r} to {type_name}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            message,
            error_code="VALUE_CONVERSION_FAILED",
            details={"type": type_name, "value": repr(value)},
        )
        self.type_name = type_name
        self.value = value


class InvalidAttributeValueError(HydrationError, ValueError):
    """Raised when an assigned value is outside the attribute's declared limits."""

    def __init__(self, model: str, attribute: str, errors: list[str]) -> None:
        super().__init__(
            errors[0],
            model=model,
            attribute=attribute,
            error_code="INVALID_ATTRIBUTE_VALUE",
            details={"errors": errors},
        )
        self.errors = errors


class ModelDefinitionError(DomainException, TypeError):
    """Raised when a model class declares its attributes or subtypes incorrectly."""


class ModelValidationError(DomainException):
    """Raised by ``Model.validate`` when required attributes are missing."""

    def __init__(self, model: str, errors: list[str]) -> None:
        super().__init__(
            f"Invalid '{model}': {'; '.join(errors)}",
            error_code="MODEL_VALIDATION_FAILED",
            details={"model": model, "errors": errors},
        )
        self.errors = errors


class ResponseDecodeError(DomainException):
    """Raised when a response body is not valid JSON but a model was expected."""

    def __init__(self, return_type: str, reason: str) -> None:
        super().__init__(
            f"Unable to decode response body as {return_type}: {reason}",
            error_code="INVALID_JSON",
            details={"return_type": return_type},
        )
        self.return_type = return_type
