"""AWS Organizations client (``awsJson1_1``).

Organizations is a global service: in the ``aws`` partition every request
goes to ``organizations.us-east-1.amazonaws.com`` and is signed for
``us-east-1`` whatever region the client is configured with.
``DeleteOrganization``, ``DescribeOrganization`` and ``LeaveOrganization``
take no request, so their methods can be called without arguments.
"""

from awsjack.base.client import ServiceClient
from awsjack.base.exceptions import (
    AccessDeniedError,
    ResourceNotFoundError,
    ServiceError,
    ServiceUnavailableError,
    ThrottlingError,
    ValidationError,
)
from awsjack.base.operation import Operation
from awsjack.base.protocol import ErrorMarshaller, JsonProtocol

_ERROR_MAP = {
    "AWSOrganizationsNotInUseException": ServiceError,
    "AccessDeniedException": AccessDeniedError,
    "AccessDeniedForDependencyException": AccessDeniedError,
    "AccountNotFoundException": ResourceNotFoundError,
    "AccountNotRegisteredException": ResourceNotFoundError,
    "AccountOwnerNotVerifiedException": ServiceError,
    "AlreadyInOrganizationException": ServiceError,
    "ChildNotFoundException": ResourceNotFoundError,
    "ConcurrentModificationException": ServiceError,
    "ConstraintViolationException": ValidationError,
    "DuplicateOrganizationalUnitException": ServiceError,
    "DuplicatePolicyException": ServiceError,
    "HandshakeNotFoundException": ResourceNotFoundError,
    "InvalidInputException": ValidationError,
    "OrganizationalUnitNotFoundException": ResourceNotFoundError,
    "ParentNotFoundException": ResourceNotFoundError,
    "PolicyNotFoundException": ResourceNotFoundError,
    "RootNotFoundException": ResourceNotFoundError,
    "ServiceException": ServiceUnavailableError,
    "TargetNotFoundException": ResourceNotFoundError,
    "TooManyRequestsException": ThrottlingError,
    "UnsupportedAPIEndpointException": ServiceError,
}

OPERATIONS = tuple(
    Operation(name)
    for name in (
        "AcceptHandshake",
        "AttachPolicy",
        "CancelHandshake",
        "CloseAccount",
        "CreateAccount",
        "CreateGovCloudAccount",
        "CreateOrganization",
        "CreateOrganizationalUnit",
        "CreatePolicy",
        "DeclineHandshake",
        "DeleteOrganization",
        "DeleteOrganizationalUnit",
        "DeletePolicy",
        "DeregisterDelegatedAdministrator",
        "DescribeAccount",
        "DescribeCreateAccountStatus",
        "DescribeEffectivePolicy",
        "DescribeHandshake",
        "DescribeOrganization",
        "DescribeOrganizationalUnit",
        "DescribePolicy",
        "DetachPolicy",
        "DisableAWSServiceAccess",
        "DisablePolicyType",
        "EnableAWSServiceAccess",
        "EnableAllFeatures",
        "EnablePolicyType",
        "InviteAccountToOrganization",
        "LeaveOrganization",
        "ListAWSServiceAccessForOrganization",
        "ListAccounts",
        "ListAccountsForParent",
        "ListChildren",
        "ListCreateAccountStatus",
        "ListDelegatedAdministrators",
        "ListDelegatedServicesForAccount",
        "ListHandshakesForAccount",
        "ListHandshakesForOrganization",
        "ListOrganizationalUnitsForParent",
        "ListParents",
        "ListPolicies",
        "ListPoliciesForTarget",
        "ListRoots",
        "ListTagsForResource",
        "ListTargetsForPolicy",
        "MoveAccount",
        "RegisterDelegatedAdministrator",
        "RemoveAccountFromOrganization",
        "TagResource",
        "UntagResource",
        "UpdateOrganizationalUnit",
        "UpdatePolicy",
    )
)

REQUESTS = {op.request_class.__name__: op.request_class for op in OPERATIONS}
globals().update(REQUESTS)


class OrganizationsClient(ServiceClient):
    """Accounts, organizational units, policies and handshakes of an organization."""

    SERVICE_NAME = "organizations"
    SERVICE_CLIENT_NAME = "Organizations"
    ALLOCATION_TAG = "OrganizationsClient"
    ENDPOINT_PREFIX = "organizations"
    GLOBAL_ENDPOINTS = {
        "aws": ("organizations.us-east-1.amazonaws.com", "us-east-1"),
        "aws-us-gov": ("organizations.us-gov-west-1.amazonaws.com", "us-gov-west-1"),
        "aws-cn": ("organizations.cn-northwest-1.amazonaws.com.cn", "cn-northwest-1"),
    }
    OPERATIONS = OPERATIONS
    protocol = JsonProtocol("AWSOrganizationsV20161128", ErrorMarshaller(_ERROR_MAP))


__all__ = ["OrganizationsClient", "OPERATIONS", *REQUESTS]
