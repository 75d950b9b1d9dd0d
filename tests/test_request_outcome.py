"""Tests for request models, operation descriptors, outcomes and error marshalling."""

import json

import pytest

from awsjack.base.exceptions import (
    AWSError,
    AccessDeniedError,
    CoreErrors,
    MissingParameterError,
    ResourceNotFoundError,
    ServiceError,
    ThrottlingError,
)
from awsjack.base.operation import AsyncCallerContext, Operation
from awsjack.base.outcome import AmazonWebServiceResult, Outcome
from awsjack.base.protocol import ErrorMarshaller


# ══════════════════════════════════════════════════════════════════════
# Request models
# ══════════════════════════════════════════════════════════════════════

class TestServiceRequest:
    @pytest.fixture
    def delete_addon(self):
        return Operation(
            "DeleteAddon", "DELETE", "/clusters/{clusterName}/addons/{addonName}", query=("preserve",)
        )

    def test_generated_class(self, delete_addon):
        request_class = delete_addon.request_class
        assert request_class.__name__ == "DeleteAddonRequest"
        assert request_class().get_service_request_name() == "DeleteAddon"

    def test_nothing_set_by_default(self, delete_addon):
        request = delete_addon.request_class()
        assert not request.has_been_set("ClusterName")
        assert not request.has_been_set("AddonName")
        assert request.to_wire() == {}

    def test_snake_case_and_member_names_are_equivalent(self, delete_addon):
        a = delete_addon.request_class(cluster_name="prod")
        b = delete_addon.request_class(ClusterName="prod")
        assert a.has_been_set("ClusterName")
        assert b.has_been_set("ClusterName")
        assert a.get_member("ClusterName") == b.get_member("ClusterName") == "prod"

    def test_setattr_by_member_name(self, delete_addon):
        request = delete_addon.request_class()
        request.AddonName = "vpc-cni"
        assert request.addon_name == "vpc-cni"
        assert request.has_been_set("AddonName")

    def test_explicit_none_counts_as_set(self, delete_addon):
        request = delete_addon.request_class(addon_name=None)
        assert request.has_been_set("AddonName")

    def test_extras_are_wire_members(self):
        op = Operation("CreateCluster", "POST", "/clusters")
        request = op.request_class(name="prod", roleArn="arn:aws:iam::1:role/eks")
        assert request.has_been_set("roleArn")
        assert request.to_wire() == {"name": "prod", "roleArn": "arn:aws:iam::1:role/eks"}

    def test_to_wire_uses_wire_names_and_exclude(self, delete_addon):
        request = delete_addon.request_class(cluster_name="prod", preserve=True)
        assert request.to_wire() == {"clusterName": "prod", "preserve": True}
        assert request.to_wire(exclude=delete_addon.bound_members) == {}

    def test_clone_is_deep(self):
        op = Operation("TagResource", "POST", "/tags/{resourceArn}")
        request = op.request_class(resource_arn="arn", tags={"team": "a"})
        copy = request.clone()
        copy.tags["team"] = "b"
        assert request.tags == {"team": "a"}
        assert copy is not request

    def test_no_endpoint_context_params(self, delete_addon):
        assert delete_addon.request_class().get_endpoint_context_params() == []


# ══════════════════════════════════════════════════════════════════════
# Operation descriptors
# ══════════════════════════════════════════════════════════════════════

class TestOperation:
    def test_required_members_in_path_order(self):
        op = Operation(
            "UntagResource", "DELETE", "/tags/{resourceArn}", query=("tagKeys",), required=("tagKeys",)
        )
        assert op.required == ("ResourceArn", "TagKeys")
        assert op.python_name == "untag_resource"

    def test_json_operation_defaults(self):
        op = Operation("ListIndices")
        assert op.http_method == "POST"
        assert op.request_uri == "/"
        assert op.required == ()
        assert op.python_name == "list_indices"

    def test_path_segments(self):
        op = Operation("DescribeUpdate", "GET", "/clusters/{name}/updates/{updateId}")
        request = op.request_class(name="prod", update_id="u-1")
        assert list(op.path_segments(request)) == [
            (False, "/clusters/"),
            (True, "prod"),
            (False, "/updates/"),
            (True, "u-1"),
        ]

    def test_caller_context(self):
        assert AsyncCallerContext("abc").uuid == "abc"
        assert AsyncCallerContext().uuid != AsyncCallerContext().uuid


# ══════════════════════════════════════════════════════════════════════
# Outcome
# ══════════════════════════════════════════════════════════════════════

class TestOutcome:
    def test_success(self):
        outcome = Outcome.success(AmazonWebServiceResult({"a": 1}))
        assert outcome.is_success()
        assert bool(outcome)
        assert outcome.error is None
        assert outcome.get_result()["a"] == 1

    def test_failure_raises_on_get_result(self):
        error = MissingParameterError(
            CoreErrors.MISSING_PARAMETER, "MISSING_PARAMETER", "Missing required field [Name]", False
        )
        outcome = Outcome.failure(error)
        assert not outcome
        assert outcome.result is None
        with pytest.raises(MissingParameterError, match=r"Missing required field \[Name\]"):
            outcome.get_result()

    def test_cannot_carry_both(self):
        error = AWSError(CoreErrors.UNKNOWN, "x", "y", False)
        with pytest.raises(ValueError):
            Outcome(result={}, error=error)

    def test_equality(self):
        assert Outcome.success(AmazonWebServiceResult({"a": 1})) == Outcome.success(
            AmazonWebServiceResult({"a": 1}, {"x-amzn-RequestId": "other"})
        )
        assert AmazonWebServiceResult({"a": 1}) == {"a": 1}

    def test_error_to_dict(self):
        error = AWSError(CoreErrors.THROTTLING, "ThrottlingException", "slow down", True, response_code=400)
        assert error.to_dict()["error_type"] == "THROTTLING"
        assert error.to_dict()["response_code"] == 400


# ══════════════════════════════════════════════════════════════════════
# Error marshalling
# ══════════════════════════════════════════════════════════════════════

class TestErrorMarshaller:
    def test_name_from_header(self):
        error = ErrorMarshaller().marshall(
            404,
            {"x-amzn-ErrorType": "ResourceNotFoundException:http://internal.amazon.com/", "x-amzn-RequestId": "r1"},
            json.dumps({"message": "No cluster found for name: prod."}).encode(),
        )
        assert isinstance(error, ResourceNotFoundError)
        assert error.error_type == CoreErrors.RESOURCE_NOT_FOUND
        assert error.exception_name == "ResourceNotFoundException"
        assert error.message == "No cluster found for name: prod."
        assert error.response_code == 404
        assert error.request_id == "r1"
        assert error.retryable is False

    def test_name_from_body_type(self):
        error = ErrorMarshaller().marshall(
            400,
            {},
            json.dumps({"__type": "com.amazonaws.kendra#ThrottlingException", "Message": "Rate exceeded"}).encode(),
        )
        assert isinstance(error, ThrottlingError)
        assert error.exception_name == "ThrottlingException"
        assert error.message == "Rate exceeded"
        assert error.retryable is True

    def test_service_specific_map(self):
        marshaller = ErrorMarshaller({"AuthorizationException": AccessDeniedError})
        error = marshaller.marshall(400, {}, b'{"__type": "AuthorizationException", "Message": "no"}')
        assert isinstance(error, AccessDeniedError)
        assert error.error_type == CoreErrors.SERVICE_EXTENSION_START_RANGE

    def test_unknown_error(self):
        error = ErrorMarshaller().marshall(503, {}, b"<html>down</html>")
        assert type(error) is ServiceError
        assert error.error_type == CoreErrors.UNKNOWN
        assert error.exception_name == "HTTP 503"
        assert error.retryable is True
