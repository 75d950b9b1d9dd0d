"""Core client machinery shared by every service.

Import from here to type-hint your own code or to build a client for a
service that is not bundled.
"""

from .client import ServiceClient
from .config import ClientConfiguration, validate_config
from .endpoint import DefaultEndpointProvider, Endpoint, EndpointParameter, EndpointProviderBase
from .exceptions import AWSError, AwsjackError, CoreErrors
from .operation import AsyncCallerContext, Operation
from .outcome import AmazonWebServiceResult, Outcome
from .request import ServiceRequest
from .supported_services import existing_services


__all__ = [
    "ServiceClient",
    "ClientConfiguration",
    "validate_config",
    "DefaultEndpointProvider",
    "Endpoint",
    "EndpointParameter",
    "EndpointProviderBase",
    "AWSError",
    "AwsjackError",
    "CoreErrors",
    "AsyncCallerContext",
    "Operation",
    "AmazonWebServiceResult",
    "Outcome",
    "ServiceRequest",
    "existing_services",
]
