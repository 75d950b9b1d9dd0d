"""Application Auto Scaling client (``awsJson1_1``)."""

from awsjack.base.client import ServiceClient
from awsjack.base.exceptions import (
    InternalFailureError,
    ResourceNotFoundError,
    ServiceError,
    ValidationError,
)
from awsjack.base.operation import Operation
from awsjack.base.protocol import ErrorMarshaller, JsonProtocol

_ERROR_MAP = {
    "ConcurrentUpdateException": ServiceError,
    "FailedResourceAccessException": ServiceError,
    "InternalServiceException": InternalFailureError,
    "InvalidNextTokenException": ValidationError,
    "LimitExceededException": ServiceError,
    "ObjectNotFoundException": ResourceNotFoundError,
}

OPERATIONS = tuple(
    Operation(name)
    for name in (
        "DeleteScalingPolicy",
        "DeleteScheduledAction",
        "DeregisterScalableTarget",
        "DescribeScalableTargets",
        "DescribeScalingActivities",
        "DescribeScalingPolicies",
        "DescribeScheduledActions",
        "PutScalingPolicy",
        "PutScheduledAction",
        "RegisterScalableTarget",
    )
)

REQUESTS = {op.request_class.__name__: op.request_class for op in OPERATIONS}
globals().update(REQUESTS)


class ApplicationAutoScalingClient(ServiceClient):
    """Register scalable targets and manage scaling policies and scheduled actions."""

    SERVICE_NAME = "application-autoscaling"
    SERVICE_CLIENT_NAME = "Application Auto Scaling"
    ALLOCATION_TAG = "ApplicationAutoScalingClient"
    ENDPOINT_PREFIX = "application-autoscaling"
    OPERATIONS = OPERATIONS
    protocol = JsonProtocol("AnyScaleFrontendService", ErrorMarshaller(_ERROR_MAP))


__all__ = ["ApplicationAutoScalingClient", "OPERATIONS", *REQUESTS]
