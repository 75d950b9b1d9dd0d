"""
Request signers.

Operations name the signer they need by tag (:data:`SIGV4_SIGNER` for every
bundled operation); the client looks the tag up in its signer table. SigV4
itself is botocore's :class:`~botocore.auth.SigV4Auth`, and credentials come
from the boto3 session credential chain unless the caller supplies a
provider.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

import boto3
from botocore.auth import SigV4Auth
from botocore.awsrequest import AWSRequest
from botocore.credentials import Credentials

from awsjack.base.logger import aj_logger

if TYPE_CHECKING:
    from awsjack.base.config import ClientConfiguration

SIGV4_SIGNER = "SignatureV4"
NULL_SIGNER = "NullSigner"

# Anything returning botocore Credentials (or None when nothing is configured).
CredentialsProvider = Callable[[], "Credentials | None"]


def compute_signer_region(region: str | None) -> str | None:
    """Map a configured region to the region used in the signature scope.

    ``aws-global`` signs as ``us-east-1``; FIPS pseudo-regions
    (``fips-us-gov-west-1``, ``us-east-1-fips``) sign as their base region.
    """
    if region is None:
        return None
    if region == "aws-global":
        return "us-east-1"
    if region.startswith("fips-"):
        return region[len("fips-"):]
    if region.endswith("-fips"):
        return region[: -len("-fips")]
    return region


def default_credentials_provider(config: ClientConfiguration) -> CredentialsProvider:
    """Credential chain for *config*.

    Explicit keys in the config win; otherwise boto3 walks its usual chain
    (environment, shared files, profile, container and instance metadata).
    The chain is only consulted when a request is signed.
    """
    session = boto3.Session(
        aws_access_key_id=config.aws_access_key_id,
        aws_secret_access_key=config.aws_secret_access_key,
        aws_session_token=config.aws_session_token,
        region_name=config.region_name,
        profile_name=config.profile_name,
    )
    return session.get_credentials


def static_credentials_provider(
    access_key: str, secret_key: str, token: str | None = None
) -> CredentialsProvider:
    """Provider that always returns the same credentials."""
    credentials = Credentials(access_key, secret_key, token)
    return lambda: credentials


class AWSAuthV4Signer:
    """Sign requests with AWS Signature Version 4.

    Attributes:
        credentials_provider: Zero-argument callable returning credentials.
        service_name: Signing name of the service (e.g. ``eks``, ``sso``).
        region: Default signing region; an endpoint may pin another one.
    """

    name = SIGV4_SIGNER

    def __init__(
        self,
        credentials_provider: CredentialsProvider,
        service_name: str,
        region: str | None,
    ) -> None:
        self.credentials_provider = credentials_provider
        self.service_name = service_name
        self.region = region

    def sign(
        self,
        request: AWSRequest,
        signing_region: str | None = None,
        signing_name: str | None = None,
    ) -> bool:
        """Add SigV4 headers to *request* in place.

        Returns:
            True if the request was signed, False if no credentials were
            available (the request is then sent anonymously).
        """
        credentials = self.credentials_provider()
        if credentials is None:
            aj_logger.debug(
                "Credentials are empty; request will not be signed",
                service=self.service_name,
            )
            return False
        frozen = credentials.get_frozen_credentials()
        if not frozen.access_key or not frozen.secret_key:
            aj_logger.debug(
                "Credentials are empty; request will not be signed",
                service=self.service_name,
            )
            return False
        region = signing_region or self.region
        SigV4Auth(frozen, signing_name or self.service_name, region).add_auth(request)
        return True


class NullSigner:
    """Leaves requests untouched."""

    name = NULL_SIGNER

    def sign(self, request: AWSRequest, *args: Any, **kwargs: Any) -> bool:
        return False
