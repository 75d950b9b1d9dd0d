"""
Wire protocols and error marshalling.

Two protocols cover the bundled services:

* :class:`JsonProtocol` (``awsJson1_1``): every operation is a POST to ``/``
  with the operation named in the ``X-Amz-Target`` header.
* :class:`RestJsonProtocol`: verb and path come from the operation; declared
  query members go to the query string, everything else to a JSON body.
"""

from __future__ import annotations

import base64
import json
from datetime import datetime, timezone
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Mapping
from urllib.parse import quote, urlencode

from botocore.awsrequest import AWSRequest

from awsjack.base.exceptions import (
    ERROR_CLASSES,
    AWSError,
    CoreErrors,
    ServiceError,
)
from awsjack.base.outcome import AmazonWebServiceResult, Outcome
from awsjack.base.request import member_name

if TYPE_CHECKING:
    from awsjack.base.endpoint import Endpoint
    from awsjack.base.operation import Operation
    from awsjack.base.request import ServiceRequest

# Exception names every AWS service may return, by core error type.
_CORE_ERROR_MAP: dict[str, CoreErrors] = {
    "IncompleteSignature": CoreErrors.INCOMPLETE_SIGNATURE,
    "IncompleteSignatureException": CoreErrors.INCOMPLETE_SIGNATURE,
    "InternalFailure": CoreErrors.INTERNAL_FAILURE,
    "InternalServerError": CoreErrors.INTERNAL_FAILURE,
    "InternalFailureException": CoreErrors.INTERNAL_FAILURE,
    "InvalidAction": CoreErrors.INVALID_ACTION,
    "InvalidClientTokenId": CoreErrors.INVALID_CLIENT_TOKEN_ID,
    "InvalidClientTokenIdException": CoreErrors.INVALID_CLIENT_TOKEN_ID,
    "InvalidParameterCombination": CoreErrors.INVALID_PARAMETER_COMBINATION,
    "InvalidQueryParameter": CoreErrors.INVALID_QUERY_PARAMETER,
    "InvalidParameterValue": CoreErrors.INVALID_PARAMETER_VALUE,
    "MissingAction": CoreErrors.MISSING_ACTION,
    "MissingAuthenticationToken": CoreErrors.MISSING_AUTHENTICATION_TOKEN,
    "MissingAuthenticationTokenException": CoreErrors.MISSING_AUTHENTICATION_TOKEN,
    "MissingParameter": CoreErrors.MISSING_PARAMETER,
    "OptInRequired": CoreErrors.OPT_IN_REQUIRED,
    "RequestExpired": CoreErrors.REQUEST_EXPIRED,
    "ServiceUnavailable": CoreErrors.SERVICE_UNAVAILABLE,
    "ServiceUnavailableException": CoreErrors.SERVICE_UNAVAILABLE,
    "Throttling": CoreErrors.THROTTLING,
    "ThrottlingException": CoreErrors.THROTTLING,
    "TooManyRequestsException": CoreErrors.THROTTLING,
    "RequestLimitExceeded": CoreErrors.THROTTLING,
    "SlowDown": CoreErrors.SLOW_DOWN,
    "ValidationError": CoreErrors.VALIDATION,
    "ValidationException": CoreErrors.VALIDATION,
    "AccessDenied": CoreErrors.ACCESS_DENIED,
    "AccessDeniedException": CoreErrors.ACCESS_DENIED,
    "ResourceNotFound": CoreErrors.RESOURCE_NOT_FOUND,
    "ResourceNotFoundException": CoreErrors.RESOURCE_NOT_FOUND,
    "UnrecognizedClient": CoreErrors.UNRECOGNIZED_CLIENT,
    "UnrecognizedClientException": CoreErrors.UNRECOGNIZED_CLIENT,
    "MalformedQueryString": CoreErrors.MALFORMED_QUERY_STRING,
    "RequestTimeTooSkewed": CoreErrors.REQUEST_TIME_TOO_SKEWED,
    "InvalidSignatureException": CoreErrors.INVALID_SIGNATURE,
    "SignatureDoesNotMatch": CoreErrors.SIGNATURE_DOES_NOT_MATCH,
    "InvalidAccessKeyId": CoreErrors.INVALID_ACCESS_KEY_ID,
    "RequestTimeout": CoreErrors.REQUEST_TIMEOUT,
    "RequestTimeoutException": CoreErrors.REQUEST_TIMEOUT,
}

_RETRYABLE_TYPES = frozenset(
    {
        CoreErrors.THROTTLING,
        CoreErrors.SLOW_DOWN,
        CoreErrors.SERVICE_UNAVAILABLE,
        CoreErrors.INTERNAL_FAILURE,
        CoreErrors.REQUEST_TIMEOUT,
        CoreErrors.REQUEST_TIME_TOO_SKEWED,
        CoreErrors.NETWORK_CONNECTION,
    }
)


def _header(headers: Mapping[str, str], name: str) -> str | None:
    lowered = name.lower()
    for key, value in headers.items():
        if key.lower() == lowered:
            return value
    return None


def _serialize(value: Any) -> Any:
    """``json.dumps`` fallback for non-JSON member values.

    Timestamps go out as epoch seconds (naive values are taken as UTC),
    blobs as base64 and decimals as numbers.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        seconds = value.timestamp()
        return int(seconds) if seconds.is_integer() else seconds
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(value).decode("ascii")
    if isinstance(value, Decimal):
        return float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _dumps(body: dict[str, Any]) -> str:
    return json.dumps(body, default=_serialize)


def _decode(content: bytes | None) -> dict[str, Any]:
    if not content:
        return {}
    try:
        decoded = json.loads(content)
    except ValueError:
        return {}
    return decoded if isinstance(decoded, dict) else {}


class ErrorMarshaller:
    """Turn an error response into a categorized :class:`AWSError`.

    Args:
        error_map: Service-specific exception name -> category class,
            consulted before the core mapping.
    """

    def __init__(self, error_map: Mapping[str, type[AWSError]] | None = None) -> None:
        self.error_map = dict(error_map or {})

    @staticmethod
    def exception_name(headers: Mapping[str, str], body: dict[str, Any]) -> str:
        raw = _header(headers, "x-amzn-ErrorType") or body.get("__type") or body.get("code") or ""
        # "aws.protocoltests#FooError:http://..." -> "FooError"
        return str(raw).split(":", 1)[0].rsplit("#", 1)[-1]

    def marshall(
        self,
        status_code: int,
        headers: Mapping[str, str],
        content: bytes | None,
    ) -> AWSError:
        body = _decode(content)
        name = self.exception_name(headers, body)
        message = body.get("message") or body.get("Message") or _header(headers, "x-amzn-ErrorMessage") or ""

        error_type = _CORE_ERROR_MAP.get(name)
        if error_type is None:
            error_type = (
                CoreErrors.SERVICE_EXTENSION_START_RANGE if name else CoreErrors.UNKNOWN
            )
        error_class = self.error_map.get(name) or ERROR_CLASSES.get(error_type) or ServiceError
        retryable = (
            error_type in _RETRYABLE_TYPES or status_code >= 500 or status_code == 429
        )
        return error_class(
            error_type,
            name or f"HTTP {status_code}",
            str(message),
            retryable,
            response_code=status_code,
            request_id=_header(headers, "x-amzn-RequestId"),
            response_headers=dict(headers),
        )


class Protocol:
    """Serialize requests and parse responses for one wire protocol."""

    content_type = "application/json"

    def __init__(self, error_marshaller: ErrorMarshaller | None = None) -> None:
        self.error_marshaller = error_marshaller or ErrorMarshaller()

    def build_request(
        self,
        operation: Operation,
        request: ServiceRequest,
        endpoint: Endpoint,
    ) -> AWSRequest:
        raise NotImplementedError

    def parse_response(
        self,
        status_code: int,
        headers: Mapping[str, str],
        content: bytes | None,
    ) -> Outcome[AmazonWebServiceResult]:
        if 200 <= status_code < 300:
            return Outcome.success(
                AmazonWebServiceResult(
                    _decode(content),
                    headers,
                    status_code,
                    _header(headers, "x-amzn-RequestId"),
                )
            )
        return Outcome.failure(self.error_marshaller.marshall(status_code, headers, content))


class JsonProtocol(Protocol):
    """``awsJson1_1``: POST ``/`` with ``X-Amz-Target``."""

    content_type = "application/x-amz-json-1.1"

    def __init__(self, target_prefix: str, error_marshaller: ErrorMarshaller | None = None) -> None:
        super().__init__(error_marshaller)
        self.target_prefix = target_prefix

    def build_request(
        self,
        operation: Operation,
        request: ServiceRequest,
        endpoint: Endpoint,
    ) -> AWSRequest:
        headers = {
            "Content-Type": self.content_type,
            "X-Amz-Target": f"{self.target_prefix}.{operation.name}",
        }
        body = _dumps(request.to_wire())
        return AWSRequest(method=operation.http_method, url=endpoint.url, headers=headers, data=body)


def _query_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.isoformat().replace("+00:00", "Z")
    if isinstance(value, (list, tuple)):
        return [_query_value(v) for v in value]
    return str(value)


class RestJsonProtocol(Protocol):
    """REST-JSON: path and query from the operation, JSON body for the rest."""

    def build_request(
        self,
        operation: Operation,
        request: ServiceRequest,
        endpoint: Endpoint,
    ) -> AWSRequest:
        query: list[tuple[str, Any]] = []
        for wire in operation.query:
            member = member_name(wire)
            if request.has_been_set(member):
                value = request.get_member(member)
                if value is not None:
                    query.append((wire, _query_value(value)))

        url = endpoint.url
        if query:
            url += "?" + urlencode(query, doseq=True, quote_via=quote)

        headers = {}
        body = request.to_wire(exclude=operation.bound_members)
        data = None
        if body:
            headers["Content-Type"] = self.content_type
            data = _dumps(body)
        return AWSRequest(method=operation.http_method, url=url, headers=headers, data=data)
