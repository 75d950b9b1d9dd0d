"""Awsjack: generated AWS service clients with sync, future and callback forms.

Import :func:`client_factory` to create any bundled client with a single
call::

    from awsjack import client_factory

    eks = client_factory("eks", {"region_name": "us-west-2"})
    outcome = eks.describe_cluster(name="prod")
"""

__version__ = "0.1.0"

from .base import (
    AWSError,
    AsyncCallerContext,
    ClientConfiguration,
    CoreErrors,
    Outcome,
    ServiceClient,
)
from .factory import client_factory

__all__ = [
    "__version__",
    "AWSError",
    "AsyncCallerContext",
    "ClientConfiguration",
    "CoreErrors",
    "Outcome",
    "ServiceClient",
    "client_factory",
]
