"""AWS RoboMaker client (REST-JSON).

Every action is a POST to ``/<actionName>`` with a JSON body, except the
three tagging actions which address ``/tags/{resourceArn}``.
"""

from awsjack.base.client import ServiceClient
from awsjack.base.exceptions import (
    InternalFailureError,
    ResourceNotFoundError,
    ServiceError,
    ServiceUnavailableError,
    ThrottlingError,
    ValidationError,
)
from awsjack.base.operation import Operation
from awsjack.base.protocol import ErrorMarshaller, RestJsonProtocol

_ERROR_MAP = {
    "ConcurrentDeploymentException": ServiceError,
    "IdempotentParameterMismatchException": ValidationError,
    "InternalServerException": InternalFailureError,
    "InvalidParameterException": ValidationError,
    "LimitExceededException": ServiceError,
    "ResourceAlreadyExistsException": ServiceError,
    "ResourceNotFoundException": ResourceNotFoundError,
    "ServiceUnavailableException": ServiceUnavailableError,
    "ThrottlingException": ThrottlingError,
}


def _action(name: str) -> Operation:
    return Operation(name, "POST", "/" + name[:1].lower() + name[1:])


OPERATIONS = tuple(
    _action(name)
    for name in (
        "BatchDeleteWorlds",
        "BatchDescribeSimulationJob",
        "CancelSimulationJob",
        "CancelSimulationJobBatch",
        "CancelWorldExportJob",
        "CancelWorldGenerationJob",
        "CreateRobotApplication",
        "CreateRobotApplicationVersion",
        "CreateSimulationApplication",
        "CreateSimulationApplicationVersion",
        "CreateSimulationJob",
        "CreateWorldExportJob",
        "CreateWorldGenerationJob",
        "CreateWorldTemplate",
        "DeleteRobotApplication",
        "DeleteSimulationApplication",
        "DeleteWorldTemplate",
        "DescribeRobotApplication",
        "DescribeSimulationApplication",
        "DescribeSimulationJob",
        "DescribeSimulationJobBatch",
        "DescribeWorld",
        "DescribeWorldExportJob",
        "DescribeWorldGenerationJob",
        "DescribeWorldTemplate",
        "GetWorldTemplateBody",
        "ListRobotApplications",
        "ListSimulationApplications",
        "ListSimulationJobBatches",
        "ListSimulationJobs",
    )
) + (
    Operation("ListTagsForResource", "GET", "/tags/{resourceArn}"),
) + tuple(
    _action(name)
    for name in (
        "ListWorldExportJobs",
        "ListWorldGenerationJobs",
        "ListWorldTemplates",
        "ListWorlds",
        "RestartSimulationJob",
        "StartSimulationJobBatch",
    )
) + (
    Operation("TagResource", "POST", "/tags/{resourceArn}"),
    Operation("UntagResource", "DELETE", "/tags/{resourceArn}", query=("tagKeys",), required=("tagKeys",)),
    _action("UpdateRobotApplication"),
    _action("UpdateSimulationApplication"),
    _action("UpdateWorldTemplate"),
)

REQUESTS = {op.request_class.__name__: op.request_class for op in OPERATIONS}
globals().update(REQUESTS)


class RoboMakerClient(ServiceClient):
    """Robot and simulation applications, simulation jobs and simulation worlds."""

    SERVICE_NAME = "robomaker"
    SERVICE_CLIENT_NAME = "RoboMaker"
    ALLOCATION_TAG = "RoboMakerClient"
    ENDPOINT_PREFIX = "robomaker"
    OPERATIONS = OPERATIONS
    protocol = RestJsonProtocol(ErrorMarshaller(_ERROR_MAP))


__all__ = ["RoboMakerClient", "OPERATIONS", *REQUESTS]
