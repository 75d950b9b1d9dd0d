"""AWS SSO Admin client (``awsJson1_1``).

Endpoints and signatures use the ``sso`` prefix, not ``sso-admin``.
"""

from awsjack.base.client import ServiceClient
from awsjack.base.exceptions import (
    AccessDeniedError,
    InternalFailureError,
    ResourceNotFoundError,
    ServiceError,
    ThrottlingError,
    ValidationError,
)
from awsjack.base.operation import Operation
from awsjack.base.protocol import ErrorMarshaller, JsonProtocol

_ERROR_MAP = {
    "AccessDeniedException": AccessDeniedError,
    "ConflictException": ServiceError,
    "InternalServerException": InternalFailureError,
    "ResourceNotFoundException": ResourceNotFoundError,
    "ServiceQuotaExceededException": ServiceError,
    "ThrottlingException": ThrottlingError,
    "ValidationException": ValidationError,
}

OPERATIONS = tuple(
    Operation(name)
    for name in (
        "AttachCustomerManagedPolicyReferenceToPermissionSet",
        "AttachManagedPolicyToPermissionSet",
        "CreateAccountAssignment",
        "CreateInstanceAccessControlAttributeConfiguration",
        "CreatePermissionSet",
        "DeleteAccountAssignment",
        "DeleteInlinePolicyFromPermissionSet",
        "DeleteInstanceAccessControlAttributeConfiguration",
        "DeletePermissionSet",
        "DeletePermissionsBoundaryFromPermissionSet",
        "DescribeAccountAssignmentCreationStatus",
        "DescribeAccountAssignmentDeletionStatus",
        "DescribeInstanceAccessControlAttributeConfiguration",
        "DescribePermissionSet",
        "DescribePermissionSetProvisioningStatus",
        "DetachCustomerManagedPolicyReferenceFromPermissionSet",
        "DetachManagedPolicyFromPermissionSet",
        "GetInlinePolicyForPermissionSet",
        "GetPermissionsBoundaryForPermissionSet",
        "ListAccountAssignmentCreationStatus",
        "ListAccountAssignmentDeletionStatus",
        "ListAccountAssignments",
        "ListAccountsForProvisionedPermissionSet",
        "ListCustomerManagedPolicyReferencesInPermissionSet",
        "ListInstances",
        "ListManagedPoliciesInPermissionSet",
        "ListPermissionSetProvisioningStatus",
        "ListPermissionSets",
        "ListPermissionSetsProvisionedToAccount",
        "ListTagsForResource",
        "ProvisionPermissionSet",
        "PutInlinePolicyToPermissionSet",
        "PutPermissionsBoundaryToPermissionSet",
        "TagResource",
        "UntagResource",
        "UpdateInstanceAccessControlAttributeConfiguration",
        "UpdatePermissionSet",
    )
)

REQUESTS = {op.request_class.__name__: op.request_class for op in OPERATIONS}
globals().update(REQUESTS)


class SSOAdminClient(ServiceClient):
    """Permission sets, account assignments and access-control attributes."""

    SERVICE_NAME = "sso"
    SERVICE_CLIENT_NAME = "SSO Admin"
    ALLOCATION_TAG = "SSOAdminClient"
    ENDPOINT_PREFIX = "sso"
    OPERATIONS = OPERATIONS
    protocol = JsonProtocol("SWBExternalService", ErrorMarshaller(_ERROR_MAP))


__all__ = ["SSOAdminClient", "OPERATIONS", *REQUESTS]
