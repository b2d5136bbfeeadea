"""
Field level validation errors
"""

from enum import Enum
from typing import Any, Optional


class ErrorType(str, Enum):
    """Class of a validation failure"""

    NOT_SUPPORTED = "NotSupported"
    INVALID = "Invalid"
    DUPLICATE = "Duplicate"
    REQUIRED = "Required"
    NOT_IN_RANGE = "NotInRange"


_ERROR_BODIES = {
    ErrorType.NOT_SUPPORTED: "Unsupported value",
    ErrorType.INVALID: "Invalid value",
    ErrorType.DUPLICATE: "Duplicate value",
    ErrorType.REQUIRED: "Required value",
    ErrorType.NOT_IN_RANGE: "Out of range value",
}


class FieldError(ValueError):
    """A single violation: the field, the offending value and what went wrong.

    Attributes are exposed read-only.
    """

    def __init__(self, kind: ErrorType, field: str, value: Any = None, detail: str = ""):
        self._kind = ErrorType(kind)
        self._field = field
        self._value = None if value is None else str(value)
        self._detail = detail
        super().__init__(self.message)

    @property
    def kind(self) -> ErrorType:
        return self._kind

    @property
    def field(self) -> str:
        return self._field

    @property
    def value(self) -> Optional[str]:
        return self._value

    @property
    def detail(self) -> str:
        return self._detail

    @property
    def message(self) -> str:
        body = _ERROR_BODIES[self._kind]
        if self._value is not None:
            body = f'{body}: "{self._value}"'
        if self._detail:
            body = f"{body}: {self._detail}"
        return f"{self._field}: {body}"

    def __reduce__(self):
        return (type(self), (self._kind, self._field, self._value, self._detail))

    def __repr__(self):
        return (
            f"{type(self).__name__}(kind={self._kind.value!r}, field={self._field!r}, "
            f"value={self._value!r}, detail={self._detail!r})"
        )

    def __eq__(self, other):
        if not isinstance(other, FieldError):
            return NotImplemented
        return (self._kind, self._field, self._value, self._detail) == (
            other._kind,
            other._field,
            other._value,
            other._detail,
        )

    def __hash__(self):
        return hash((self._kind, self._field, self._value, self._detail))


def not_supported(field: str, value: Any, supported) -> FieldError:
    """Value outside the supported set"""
    quoted = ", ".join(f'"{v}"' for v in sorted(supported))
    return FieldError(ErrorType.NOT_SUPPORTED, field, value, f"supported values: {quoted}")


def invalid(field: str, value: Any, detail: str) -> FieldError:
    """Value that breaks a syntax or structure rule"""
    return FieldError(ErrorType.INVALID, field, value, detail)


def duplicate(field: str, value: Any) -> FieldError:
    """Value repeated where it must be unique"""
    return FieldError(ErrorType.DUPLICATE, field, value, "expected unique targets")


def required(field: str, detail: str) -> FieldError:
    """Mandatory value or collection missing"""
    return FieldError(ErrorType.REQUIRED, field, None, detail)


def not_in_range(field: str, value: Any, detail: str) -> FieldError:
    """Numeric value outside its bounds"""
    return FieldError(ErrorType.NOT_IN_RANGE, field, value, detail)


class DNSEndpointValidationError(ValueError):
    """Raised for an invalid DNSEndpoint resource, wrapping the FieldError that caused it"""

    PREFIX = "error validating DNSEndpoint resource"

    def __init__(self, cause: FieldError):
        self.cause = cause
        super().__init__(f"{self.PREFIX}: {cause}")

    @property
    def kind(self) -> ErrorType:
        return self.cause.kind

    @property
    def field(self) -> str:
        return self.cause.field

    @property
    def value(self) -> Optional[str]:
        return self.cause.value
