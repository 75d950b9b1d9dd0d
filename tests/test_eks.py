"""Tests for the EKS client's REST-JSON wire format."""

import json

import pytest

from awsjack.services.eks import (
    OPERATIONS,
    CreateClusterRequest,
    DeleteAddonRequest,
    DescribeAddonVersionsRequest,
    EKSClient,
    ListClustersRequest,
    UntagResourceRequest,
    UpdateNodegroupVersionRequest,
)

from conftest import make_response, sent_request

BASE = "https://eks.us-west-2.amazonaws.com"


@pytest.fixture
def eks(make_client):
    return make_client(EKSClient)


class TestEKSOperations:
    def test_operation_count(self):
        assert len(OPERATIONS) == 34

    def test_client_names(self):
        assert EKSClient.SERVICE_CLIENT_NAME == "EKS"
        assert EKSClient.ALLOCATION_TAG == "EKSClient"

    def test_create_cluster_body(self, eks, http_client):
        http_client.send.return_value = make_response(payload={"cluster": {"name": "prod"}})
        outcome = eks.create_cluster(
            CreateClusterRequest(
                name="prod",
                roleArn="arn:aws:iam::123456789012:role/eks",
                resourcesVpcConfig={"subnetIds": ["subnet-1"]},
            )
        )
        assert outcome.is_success()
        request = sent_request(http_client)
        assert request.method == "POST"
        assert request.url == f"{BASE}/clusters"
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.data) == {
            "name": "prod",
            "roleArn": "arn:aws:iam::123456789012:role/eks",
            "resourcesVpcConfig": {"subnetIds": ["subnet-1"]},
        }

    def test_delete_addon_path_and_query(self, eks, http_client):
        eks.delete_addon(DeleteAddonRequest(cluster_name="my cluster", addon_name="vpc-cni", preserve=True))
        request = sent_request(http_client)
        assert request.method == "DELETE"
        assert request.url == f"{BASE}/clusters/my%20cluster/addons/vpc-cni?preserve=true"
        assert request.data is None

    def test_unset_query_members_are_omitted(self, eks, http_client):
        eks.list_clusters(ListClustersRequest())
        assert sent_request(http_client).url == f"{BASE}/clusters"

    def test_list_query(self, eks, http_client):
        eks.list_clusters(ListClustersRequest(max_results=10, include=["all"]))
        assert sent_request(http_client).url == f"{BASE}/clusters?maxResults=10&include=all"

    def test_query_members_by_wire_name(self, eks, http_client):
        request = ListClustersRequest(maxResults=10, nextToken="t-1")
        assert request.has_been_set("MaxResults")
        assert request.has_been_set("maxResults")
        assert request.model_extra == {}
        eks.list_clusters(request)
        sent = sent_request(http_client)
        assert sent.url == f"{BASE}/clusters?maxResults=10&nextToken=t-1"
        assert sent.data is None

    def test_path_members_by_wire_name(self, eks, http_client):
        request = DeleteAddonRequest(clusterName="prod", addonName="vpc-cni")
        assert request.cluster_name == "prod"
        eks.delete_addon(request)
        sent = sent_request(http_client)
        assert sent.url == f"{BASE}/clusters/prod/addons/vpc-cni"
        assert sent.data is None

    def test_setattr_by_wire_name(self, eks, http_client):
        request = ListClustersRequest()
        request.maxResults = 5
        assert request.max_results == 5
        eks.list_clusters(request)
        assert sent_request(http_client).url == f"{BASE}/clusters?maxResults=5"

    def test_describe_addon_versions_query(self, eks, http_client):
        eks.describe_addon_versions(
            DescribeAddonVersionsRequest(kubernetes_version="1.27", addon_name="coredns", types=["networking", "storage"])
        )
        assert sent_request(http_client).url == (
            f"{BASE}/addons/supported-versions?kubernetesVersion=1.27&addonName=coredns"
            "&types=networking&types=storage"
        )

    def test_untag_requires_tag_keys(self, eks, http_client):
        outcome = eks.untag_resource(UntagResourceRequest(resource_arn="arn:aws:eks:us-west-2:1:cluster/prod"))
        assert outcome.error.message == "Missing required field [TagKeys]"
        http_client.send.assert_not_called()

    def test_untag_resource(self, eks, http_client):
        eks.untag_resource(
            UntagResourceRequest(resource_arn="arn:aws:eks:us-west-2:1:cluster/prod", tag_keys=["team", "env"])
        )
        request = sent_request(http_client)
        assert request.method == "DELETE"
        assert request.url == (
            f"{BASE}/tags/arn%3Aaws%3Aeks%3Aus-west-2%3A1%3Acluster%2Fprod?tagKeys=team&tagKeys=env"
        )

    def test_update_nodegroup_version(self, eks, http_client):
        eks.update_nodegroup_version(
            UpdateNodegroupVersionRequest(cluster_name="prod", nodegroup_name="ng-1", version="1.27")
        )
        request = sent_request(http_client)
        assert request.url == f"{BASE}/clusters/prod/node-groups/ng-1/update-version"
        assert json.loads(request.data) == {"version": "1.27"}

    @pytest.mark.parametrize(
        "method,request_kwargs,missing",
        [
            ("describe_nodegroup", {"cluster_name": "prod"}, "NodegroupName"),
            ("describe_fargate_profile", {}, "ClusterName"),
            ("describe_update", {"name": "prod"}, "UpdateId"),
            ("deregister_cluster", {}, "Name"),
            ("tag_resource", {"tags": {"a": "b"}}, "ResourceArn"),
        ],
    )
    def test_required_path_members(self, eks, http_client, method, request_kwargs, missing):
        outcome = getattr(eks, method)(**request_kwargs)
        assert outcome.error.message == f"Missing required field [{missing}]"
        http_client.send.assert_not_called()
