"""Amazon EKS client (REST-JSON).

Path members (``{clusterName}``, ``{name}``...) are required and
URL-encoded into the path; ``query`` members go to the query string and
everything else is sent as the JSON body.
"""

from awsjack.base.client import ServiceClient
from awsjack.base.exceptions import (
    AccessDeniedError,
    InternalFailureError,
    ResourceNotFoundError,
    ServiceError,
    ServiceUnavailableError,
    ValidationError,
)
from awsjack.base.operation import Operation
from awsjack.base.protocol import ErrorMarshaller, RestJsonProtocol

_ERROR_MAP = {
    "AccessDeniedException": AccessDeniedError,
    "BadRequestException": ValidationError,
    "ClientException": ServiceError,
    "InvalidParameterException": ValidationError,
    "InvalidRequestException": ValidationError,
    "NotFoundException": ResourceNotFoundError,
    "ResourceInUseException": ServiceError,
    "ResourceLimitExceededException": ServiceError,
    "ResourceNotFoundException": ResourceNotFoundError,
    "ResourcePropagationDelayException": ServiceError,
    "ServerException": InternalFailureError,
    "ServiceUnavailableException": ServiceUnavailableError,
    "UnsupportedAvailabilityZoneException": ServiceError,
}

_PAGED = ("maxResults", "nextToken")

OPERATIONS = (
    Operation("AssociateEncryptionConfig", "POST", "/clusters/{clusterName}/encryption-config/associate"),
    Operation("AssociateIdentityProviderConfig", "POST", "/clusters/{clusterName}/identity-provider-configs/associate"),
    Operation("CreateAddon", "POST", "/clusters/{clusterName}/addons"),
    Operation("CreateCluster", "POST", "/clusters"),
    Operation("CreateFargateProfile", "POST", "/clusters/{clusterName}/fargate-profiles"),
    Operation("CreateNodegroup", "POST", "/clusters/{clusterName}/node-groups"),
    Operation("DeleteAddon", "DELETE", "/clusters/{clusterName}/addons/{addonName}", query=("preserve",)),
    Operation("DeleteCluster", "DELETE", "/clusters/{name}"),
    Operation("DeleteFargateProfile", "DELETE", "/clusters/{clusterName}/fargate-profiles/{fargateProfileName}"),
    Operation("DeleteNodegroup", "DELETE", "/clusters/{clusterName}/node-groups/{nodegroupName}"),
    Operation("DeregisterCluster", "DELETE", "/cluster-registrations/{name}"),
    Operation("DescribeAddon", "GET", "/clusters/{clusterName}/addons/{addonName}"),
    Operation(
        "DescribeAddonVersions",
        "GET",
        "/addons/supported-versions",
        query=("kubernetesVersion", *_PAGED, "addonName", "types", "publishers", "owners"),
    ),
    Operation("DescribeCluster", "GET", "/clusters/{name}"),
    Operation("DescribeFargateProfile", "GET", "/clusters/{clusterName}/fargate-profiles/{fargateProfileName}"),
    Operation("DescribeIdentityProviderConfig", "POST", "/clusters/{clusterName}/identity-provider-configs/describe"),
    Operation("DescribeNodegroup", "GET", "/clusters/{clusterName}/node-groups/{nodegroupName}"),
    Operation("DescribeUpdate", "GET", "/clusters/{name}/updates/{updateId}", query=("nodegroupName", "addonName")),
    Operation("DisassociateIdentityProviderConfig", "POST", "/clusters/{clusterName}/identity-provider-configs/disassociate"),
    Operation("ListAddons", "GET", "/clusters/{clusterName}/addons", query=_PAGED),
    Operation("ListClusters", "GET", "/clusters", query=(*_PAGED, "include")),
    Operation("ListFargateProfiles", "GET", "/clusters/{clusterName}/fargate-profiles", query=_PAGED),
    Operation("ListIdentityProviderConfigs", "GET", "/clusters/{clusterName}/identity-provider-configs", query=_PAGED),
    Operation("ListNodegroups", "GET", "/clusters/{clusterName}/node-groups", query=_PAGED),
    Operation("ListTagsForResource", "GET", "/tags/{resourceArn}"),
    Operation("ListUpdates", "GET", "/clusters/{name}/updates", query=("nodegroupName", "addonName", "nextToken", "maxResults")),
    Operation("RegisterCluster", "POST", "/cluster-registrations"),
    Operation("TagResource", "POST", "/tags/{resourceArn}"),
    Operation("UntagResource", "DELETE", "/tags/{resourceArn}", query=("tagKeys",), required=("tagKeys",)),
    Operation("UpdateAddon", "POST", "/clusters/{clusterName}/addons/{addonName}/update"),
    Operation("UpdateClusterConfig", "POST", "/clusters/{name}/update-config"),
    Operation("UpdateClusterVersion", "POST", "/clusters/{name}/updates"),
    Operation("UpdateNodegroupConfig", "POST", "/clusters/{clusterName}/node-groups/{nodegroupName}/update-config"),
    Operation("UpdateNodegroupVersion", "POST", "/clusters/{clusterName}/node-groups/{nodegroupName}/update-version"),
)

REQUESTS = {op.request_class.__name__: op.request_class for op in OPERATIONS}
globals().update(REQUESTS)


class EKSClient(ServiceClient):
    """Clusters, managed node groups, Fargate profiles, add-ons and identity providers."""

    SERVICE_NAME = "eks"
    SERVICE_CLIENT_NAME = "EKS"
    ALLOCATION_TAG = "EKSClient"
    ENDPOINT_PREFIX = "eks"
    OPERATIONS = OPERATIONS
    protocol = RestJsonProtocol(ErrorMarshaller(_ERROR_MAP))


__all__ = ["EKSClient", "OPERATIONS", *REQUESTS]
