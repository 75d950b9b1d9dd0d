"""Checks run against every row of every service's operation table."""

import pytest

from awsjack.base.exceptions import CoreErrors, MissingParameterError
from awsjack.services.application_autoscaling import ApplicationAutoScalingClient
from awsjack.services.datasync import DataSyncClient
from awsjack.services.eks import EKSClient
from awsjack.services.kendra import KendraClient
from awsjack.services.license_manager import LicenseManagerClient
from awsjack.services.organizations import OrganizationsClient
from awsjack.services.robomaker import RoboMakerClient
from awsjack.services.sso_admin import SSOAdminClient

ALL_CLIENTS = (
    ApplicationAutoScalingClient,
    DataSyncClient,
    EKSClient,
    KendraClient,
    LicenseManagerClient,
    OrganizationsClient,
    RoboMakerClient,
    SSOAdminClient,
)
REST_CLIENTS = (EKSClient, RoboMakerClient)

ALL_OPERATIONS = [
    pytest.param(cls, op, id=f"{cls.SERVICE_NAME}.{op.name}")
    for cls in ALL_CLIENTS
    for op in cls.OPERATIONS
]
REST_OPERATIONS = [
    pytest.param(cls, op, id=f"{cls.SERVICE_NAME}.{op.name}")
    for cls in REST_CLIENTS
    for op in cls.OPERATIONS
]
REQUIRED_MEMBERS = [
    pytest.param(cls, op, member, id=f"{cls.SERVICE_NAME}.{op.name}.{member}")
    for cls in REST_CLIENTS
    for op in cls.OPERATIONS
    for member in op.required
]


def _members_except(operation, missing=None):
    return {member: "v" for member in operation.required if member != missing}


# ══════════════════════════════════════════════════════════════════════
# Required members
# ══════════════════════════════════════════════════════════════════════

class TestRequiredMembers:
    @pytest.mark.parametrize("client_class,operation,member", REQUIRED_MEMBERS)
    def test_each_required_member_is_checked(self, make_client, http_client, client_class, operation, member):
        client = make_client(client_class)
        request = operation.request_class(**_members_except(operation, member))
        outcome = getattr(client, operation.python_name)(request)
        assert isinstance(outcome.error, MissingParameterError)
        assert outcome.error.message == f"Missing required field [{member}]"
        http_client.send.assert_not_called()

    @pytest.mark.parametrize("client_class,operation", REST_OPERATIONS)
    def test_all_required_members_set_sends_once(self, make_client, http_client, client_class, operation):
        client = make_client(client_class)
        outcome = getattr(client, operation.python_name)(
            operation.request_class(**_members_except(operation))
        )
        assert outcome.is_success()
        http_client.send.assert_called_once()
        assert http_client.send.call_args[0][0].method == operation.http_method


# ══════════════════════════════════════════════════════════════════════
# Endpoint provider
# ══════════════════════════════════════════════════════════════════════

class TestNoEndpointProvider:
    @pytest.mark.parametrize("client_class,operation", ALL_OPERATIONS)
    def test_every_operation_fails_without_sending(self, make_client, http_client, client_class, operation):
        client = make_client(client_class)
        client.endpoint_provider = None
        outcome = getattr(client, operation.python_name)(operation.request_class())
        assert outcome.error.error_type == CoreErrors.ENDPOINT_RESOLUTION_FAILURE
        assert outcome.error.message == "Unexpected nullptr: endpoint_provider"
        http_client.send.assert_not_called()
