"""AWS License Manager client (``awsJson1_1``)."""

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
    "AuthorizationException": AccessDeniedError,
    "ConflictException": ServiceError,
    "EntitlementNotAllowedException": ServiceError,
    "FailedDependencyException": ServiceError,
    "FilterLimitExceededException": ValidationError,
    "InvalidParameterValueException": ValidationError,
    "InvalidResourceStateException": ServiceError,
    "LicenseUsageException": ServiceError,
    "NoEntitlementsAllowedException": ServiceError,
    "RateLimitExceededException": ThrottlingError,
    "RedirectException": ServiceError,
    "ResourceLimitExceededException": ServiceError,
    "ResourceNotFoundException": ResourceNotFoundError,
    "ServerInternalException": InternalFailureError,
    "UnsupportedDigitalSignatureMethodException": ValidationError,
}

OPERATIONS = tuple(
    Operation(name)
    for name in (
        "AcceptGrant",
        "CheckInLicense",
        "CheckoutBorrowLicense",
        "CheckoutLicense",
        "CreateGrant",
        "CreateGrantVersion",
        "CreateLicense",
        "CreateLicenseConfiguration",
        "CreateLicenseConversionTaskForResource",
        "CreateLicenseManagerReportGenerator",
        "CreateLicenseVersion",
        "CreateToken",
        "DeleteGrant",
        "DeleteLicense",
        "DeleteLicenseConfiguration",
        "DeleteLicenseManagerReportGenerator",
        "DeleteToken",
        "ExtendLicenseConsumption",
        "GetAccessToken",
        "GetGrant",
        "GetLicense",
        "GetLicenseConfiguration",
        "GetLicenseConversionTask",
        "GetLicenseManagerReportGenerator",
        "GetLicenseUsage",
        "GetServiceSettings",
        "ListAssociationsForLicenseConfiguration",
        "ListDistributedGrants",
        "ListFailuresForLicenseConfigurationOperations",
        "ListLicenseConfigurations",
        "ListLicenseConversionTasks",
        "ListLicenseManagerReportGenerators",
        "ListLicenseSpecificationsForResource",
        "ListLicenseVersions",
        "ListLicenses",
        "ListReceivedGrants",
        "ListReceivedGrantsForOrganization",
        "ListReceivedLicenses",
        "ListReceivedLicensesForOrganization",
        "ListResourceInventory",
        "ListTagsForResource",
        "ListTokens",
        "ListUsageForLicenseConfiguration",
        "RejectGrant",
        "TagResource",
        "UntagResource",
        "UpdateLicenseConfiguration",
        "UpdateLicenseManagerReportGenerator",
        "UpdateLicenseSpecificationsForResource",
        "UpdateServiceSettings",
    )
)

REQUESTS = {op.request_class.__name__: op.request_class for op in OPERATIONS}
globals().update(REQUESTS)


class LicenseManagerClient(ServiceClient):
    """License configurations, grants, entitlements and usage reports."""

    SERVICE_NAME = "license-manager"
    SERVICE_CLIENT_NAME = "License Manager"
    ALLOCATION_TAG = "LicenseManagerClient"
    ENDPOINT_PREFIX = "license-manager"
    OPERATIONS = OPERATIONS
    protocol = JsonProtocol("AWSLicenseManager", ErrorMarshaller(_ERROR_MAP))


__all__ = ["LicenseManagerClient", "OPERATIONS", *REQUESTS]
