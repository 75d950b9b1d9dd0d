"""Shared fixtures: a fake transport and static credentials."""

import json
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from awsjack.base.signer import static_credentials_provider

_ENV_VARS = (
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_SESSION_TOKEN",
    "AWS_REGION",
    "AWS_DEFAULT_REGION",
    "AWS_PROFILE",
    "AWS_ENDPOINT_URL",
    "AWS_USE_FIPS_ENDPOINT",
    "AWS_USE_DUALSTACK_ENDPOINT",
)


def make_response(status_code=200, payload=None, headers=None):
    content = b"" if payload is None else json.dumps(payload).encode()
    return SimpleNamespace(
        status_code=status_code,
        headers={"x-amzn-RequestId": "req-123", **(headers or {})},
        content=content,
    )


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def http_client():
    client = MagicMock()
    client.send.return_value = make_response(payload={})
    return client


@pytest.fixture
def credentials():
    return static_credentials_provider("AKIDEXAMPLE", "wJalrXUtnFEMI/K7MDENG+bPxRfiCYEXAMPLEKEY")


@pytest.fixture
def make_client(http_client, credentials):
    """Build a client of the given class wired to the fake transport."""
    created = []

    def _make(client_class, config=None, **kwargs):
        kwargs.setdefault("credentials_provider", credentials)
        kwargs.setdefault("http_client", http_client)
        client = client_class(config or {"region_name": "us-west-2"}, **kwargs)
        created.append(client)
        return client

    yield _make
    for client in created:
        client.close()


def sent_request(http_client, index=-1):
    """The AWSRequest passed to the fake transport."""
    return http_client.send.call_args_list[index][0][0]
