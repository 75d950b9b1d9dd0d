"""AWS DataSync client (``awsJson1_1``)."""

from awsjack.base.client import ServiceClient
from awsjack.base.exceptions import InternalFailureError, ValidationError
from awsjack.base.operation import Operation
from awsjack.base.protocol import ErrorMarshaller, JsonProtocol

_ERROR_MAP = {
    "InternalException": InternalFailureError,
    "InvalidRequestException": ValidationError,
}

OPERATIONS = tuple(
    Operation(name)
    for name in (
        "CancelTaskExecution",
        "CreateAgent",
        "CreateLocationEfs",
        "CreateLocationFsxLustre",
        "CreateLocationFsxOntap",
        "CreateLocationFsxOpenZfs",
        "CreateLocationFsxWindows",
        "CreateLocationHdfs",
        "CreateLocationNfs",
        "CreateLocationObjectStorage",
        "CreateLocationS3",
        "CreateLocationSmb",
        "CreateTask",
        "DeleteAgent",
        "DeleteLocation",
        "DeleteTask",
        "DescribeAgent",
        "DescribeLocationEfs",
        "DescribeLocationFsxLustre",
        "DescribeLocationFsxOntap",
        "DescribeLocationFsxOpenZfs",
        "DescribeLocationFsxWindows",
        "DescribeLocationHdfs",
        "DescribeLocationNfs",
        "DescribeLocationObjectStorage",
        "DescribeLocationS3",
        "DescribeLocationSmb",
        "DescribeTask",
        "DescribeTaskExecution",
        "ListAgents",
        "ListLocations",
        "ListTagsForResource",
        "ListTaskExecutions",
        "ListTasks",
        "StartTaskExecution",
        "TagResource",
        "UntagResource",
        "UpdateAgent",
        "UpdateLocationHdfs",
        "UpdateLocationNfs",
        "UpdateLocationObjectStorage",
        "UpdateLocationSmb",
        "UpdateTask",
        "UpdateTaskExecution",
    )
)

REQUESTS = {op.request_class.__name__: op.request_class for op in OPERATIONS}
globals().update(REQUESTS)


class DataSyncClient(ServiceClient):
    """Agents, locations, tasks and task executions for online data transfer."""

    SERVICE_NAME = "datasync"
    SERVICE_CLIENT_NAME = "DataSync"
    ALLOCATION_TAG = "DataSyncClient"
    ENDPOINT_PREFIX = "datasync"
    OPERATIONS = OPERATIONS
    protocol = JsonProtocol("FmrsService", ErrorMarshaller(_ERROR_MAP))


__all__ = ["DataSyncClient", "OPERATIONS", *REQUESTS]
