"""Tests for the awsjack CLI."""

import json
from unittest.mock import patch, MagicMock

import pytest

from awsjack.base.exceptions import CoreErrors, MissingParameterError
from awsjack.base.outcome import AmazonWebServiceResult, Outcome
from awsjack.cli import main


def _client(method, outcome):
    client = MagicMock()
    getattr(client, method).return_value = outcome
    return client


class TestCli:
    def test_list_operations(self, capsys):
        main(["--service", "organizations", "--list-operations"])
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 52
        assert "describe-organization" in lines

    @patch("awsjack.factory.client_factory")
    def test_invokes_operation(self, mock_factory, capsys):
        client = _client(
            "describe_cluster",
            Outcome.success(AmazonWebServiceResult({"cluster": {"name": "prod"}})),
        )
        mock_factory.return_value = client
        main([
            "--service", "eks",
            "--config", '{"region_name": "us-west-2"}',
            "--params", '{"name": "prod"}',
            "describe-cluster",
        ])
        mock_factory.assert_called_once_with("eks", {"region_name": "us-west-2"})
        client.describe_cluster.assert_called_once_with({"name": "prod"})
        assert json.loads(capsys.readouterr().out) == {"cluster": {"name": "prod"}}

    @patch("awsjack.factory.client_factory")
    def test_accepts_aws_operation_name(self, mock_factory, capsys):
        mock_factory.return_value = _client(
            "describe_organization", Outcome.success(AmazonWebServiceResult({}))
        )
        main(["--service", "organizations", "DescribeOrganization"])
        assert json.loads(capsys.readouterr().out) == {}

    @patch("awsjack.factory.client_factory")
    def test_failed_outcome_exits_1(self, mock_factory, capsys):
        error = MissingParameterError(
            CoreErrors.MISSING_PARAMETER, "MISSING_PARAMETER", "Missing required field [AddonName]", False
        )
        mock_factory.return_value = _client("delete_addon", Outcome.failure(error))
        with pytest.raises(SystemExit) as exc:
            main(["-s", "eks", "-p", '{"clusterName": "prod"}', "delete-addon"])
        assert exc.value.code == 1
        err = json.loads(capsys.readouterr().err)
        assert err["error_type"] == "MISSING_PARAMETER"
        assert err["message"] == "Missing required field [AddonName]"

    def test_unknown_operation(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--service", "eks", "list-buckets"])
        assert exc.value.code == 1
        assert "Unknown operation" in capsys.readouterr().err

    def test_invalid_params_json(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--service", "eks", "--params", "{not json", "list-clusters"])
        assert exc.value.code == 1
        assert "Invalid --params JSON" in capsys.readouterr().err

    def test_operation_required(self):
        with pytest.raises(SystemExit) as exc:
            main(["--service", "eks"])
        assert exc.value.code == 2

    def test_unknown_service(self):
        with pytest.raises(SystemExit):
            main(["--service", "s3", "list-buckets"])
