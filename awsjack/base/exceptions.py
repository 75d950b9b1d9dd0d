"""
Awsjack exception hierarchy.

Operation failures are never raised across a client call: they are returned
as an :class:`AWSError` inside the operation's
:class:`~awsjack.base.outcome.Outcome`. The classes still derive from
:class:`AwsjackError` so that :meth:`Outcome.get_result` can raise them and
callers can ``except`` on a category.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


# ── Base ──────────────────────────────────────────────────────────────
class AwsjackError(Exception):
    """Root exception for all Awsjack errors."""


class ConfigurationError(AwsjackError):
    """A client was constructed or used with an invalid setup."""


# ── Error types ───────────────────────────────────────────────────────
class CoreErrors(Enum):
    """Error types shared by every service client."""

    INCOMPLETE_SIGNATURE = 0
    INTERNAL_FAILURE = 1
    INVALID_ACTION = 2
    INVALID_CLIENT_TOKEN_ID = 3
    INVALID_PARAMETER_COMBINATION = 4
    INVALID_QUERY_PARAMETER = 5
    INVALID_PARAMETER_VALUE = 6
    MISSING_ACTION = 7
    MISSING_AUTHENTICATION_TOKEN = 8
    MISSING_PARAMETER = 9
    OPT_IN_REQUIRED = 10
    REQUEST_EXPIRED = 11
    SERVICE_UNAVAILABLE = 12
    THROTTLING = 13
    VALIDATION = 14
    ACCESS_DENIED = 15
    RESOURCE_NOT_FOUND = 16
    UNRECOGNIZED_CLIENT = 17
    MALFORMED_QUERY_STRING = 18
    SLOW_DOWN = 19
    REQUEST_TIME_TOO_SKEWED = 20
    INVALID_SIGNATURE = 21
    SIGNATURE_DOES_NOT_MATCH = 22
    INVALID_ACCESS_KEY_ID = 23
    REQUEST_TIMEOUT = 24
    NETWORK_CONNECTION = 99
    UNKNOWN = 100
    ENDPOINT_RESOLUTION_FAILURE = 101
    CLIENT_SIGNING_FAILURE = 102
    SERVICE_EXTENSION_START_RANGE = 128


# ── Structured service errors ─────────────────────────────────────────
class AWSError(AwsjackError):
    """Structured error carried by a failed outcome.

    Attributes:
        error_type: A :class:`CoreErrors` member.
        exception_name: Name reported by the service (or the core error name).
        message: Human-readable message.
        retryable: Whether the same request may succeed if sent again.
        response_code: HTTP status code, ``None`` if no response was received.
        request_id: Value of the ``x-amzn-RequestId`` response header.
        response_headers: Raw response headers.
    """

    def __init__(
        self,
        error_type: CoreErrors,
        exception_name: str,
        message: str,
        retryable: bool,
        *,
        response_code: int | None = None,
        request_id: str | None = None,
        response_headers: dict[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.error_type = error_type
        self.exception_name = exception_name
        self.message = message
        self.retryable = retryable
        self.response_code = response_code
        self.request_id = request_id
        self.response_headers = dict(response_headers or {})

    def _key(self) -> tuple[Any, ...]:
        return (
            self.error_type,
            self.exception_name,
            self.message,
            self.retryable,
            self.response_code,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AWSError):
            return NotImplemented
        return type(self) is type(other) and self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.error_type.name}, "
            f"{self.exception_name!r}, {self.message!r}, retryable={self.retryable})"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error_type": self.error_type.name,
            "exception_name": self.exception_name,
            "message": self.message,
            "retryable": self.retryable,
            "response_code": self.response_code,
            "request_id": self.request_id,
        }


# ── Client-side errors ────────────────────────────────────────────────
class MissingParameterError(AWSError):
    """A required request member was never set; nothing was sent."""


class EndpointResolutionError(AWSError):
    """No endpoint provider, or the provider could not resolve an endpoint."""


class NetworkConnectionError(AWSError):
    """The request never produced an HTTP response."""


class ClientSigningError(AWSError):
    """No signer for the operation's tag, or credentials could not be loaded."""


class RequestSerializationError(AWSError):
    """A request member could not be encoded for the wire; nothing was sent."""


# ── Service errors ────────────────────────────────────────────────────
class ServiceError(AWSError):
    """Error response the service returned that has no narrower category."""


class AccessDeniedError(ServiceError):
    """Caller is not authorized to perform the operation."""


class ResourceNotFoundError(ServiceError):
    """The addressed resource does not exist."""


class ThrottlingError(ServiceError):
    """Request rate exceeded."""


class ValidationError(ServiceError):
    """Request failed service-side input validation."""


class ServiceUnavailableError(ServiceError):
    """Service is temporarily unavailable."""


class InternalFailureError(ServiceError):
    """Service hit an internal error."""


# Error type -> category class, used when the service reports a core error.
ERROR_CLASSES: dict[CoreErrors, type[AWSError]] = {
    CoreErrors.MISSING_PARAMETER: MissingParameterError,
    CoreErrors.ENDPOINT_RESOLUTION_FAILURE: EndpointResolutionError,
    CoreErrors.NETWORK_CONNECTION: NetworkConnectionError,
    CoreErrors.CLIENT_SIGNING_FAILURE: ClientSigningError,
    CoreErrors.ACCESS_DENIED: AccessDeniedError,
    CoreErrors.RESOURCE_NOT_FOUND: ResourceNotFoundError,
    CoreErrors.THROTTLING: ThrottlingError,
    CoreErrors.SLOW_DOWN: ThrottlingError,
    CoreErrors.VALIDATION: ValidationError,
    CoreErrors.SERVICE_UNAVAILABLE: ServiceUnavailableError,
    CoreErrors.INTERNAL_FAILURE: InternalFailureError,
}
