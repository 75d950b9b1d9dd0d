"""
Endpoint resolution.

An endpoint provider turns the client's built-in parameters (region, FIPS,
dual-stack, custom endpoint) plus request-derived parameters into a concrete
:class:`Endpoint`. Clients only talk to :class:`EndpointProviderBase`; the
:class:`DefaultEndpointProvider` implements the standard regional rules.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, NamedTuple
from urllib.parse import quote, urlsplit

from awsjack.base.exceptions import CoreErrors, EndpointResolutionError
from awsjack.base.outcome import Outcome

if TYPE_CHECKING:
    from awsjack.base.config import ClientConfiguration


class EndpointParameter(NamedTuple):
    """A single named endpoint-rule parameter."""

    name: str
    value: Any


class Endpoint:
    """Resolved endpoint URL plus the signing attributes that go with it.

    Attributes:
        base_url: Scheme and authority (and optional base path) of the endpoint.
        signing_region: Region to sign for, if the rules pinned one.
        signing_name: Service name to sign for, if the rules pinned one.
        path_segments: Encoded path segments appended by the operation.
    """

    def __init__(
        self,
        base_url: str,
        signing_region: str | None = None,
        signing_name: str | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.signing_region = signing_region
        self.signing_name = signing_name
        self.path_segments: list[str] = []

    def add_path_segments(self, literal: str) -> None:
        """Append each non-empty segment of a literal path such as ``/clusters/``."""
        for segment in literal.split("/"):
            if segment:
                self.path_segments.append(quote(segment, safe=""))

    def add_path_segment(self, value: Any) -> None:
        """Append one URL-encoded segment (``/`` and ``:`` are escaped)."""
        self.path_segments.append(quote(str(value), safe=""))

    @property
    def url(self) -> str:
        return self.base_url + "/" + "/".join(self.path_segments)

    @property
    def host(self) -> str:
        return urlsplit(self.base_url).netloc

    def __repr__(self) -> str:
        return f"Endpoint({self.url!r}, signing_region={self.signing_region!r})"


ResolveEndpointOutcome = Outcome[Endpoint]


class EndpointProviderBase(ABC):
    """Interface every endpoint provider implements."""

    @abstractmethod
    def init_built_in_parameters(self, config: ClientConfiguration) -> None:
        """Capture region, FIPS, dual-stack and endpoint override from *config*."""

    @abstractmethod
    def override_endpoint(self, endpoint: str) -> None:
        """Pin every later resolution to *endpoint*."""

    @abstractmethod
    def resolve_endpoint(self, params: list[EndpointParameter]) -> ResolveEndpointOutcome:
        """Resolve an endpoint for one request.

        Args:
            params: Request-derived parameters; they take precedence over
                built-ins of the same name.
        """


class _Partition(NamedTuple):
    name: str
    dns_suffix: str
    dual_stack_dns_suffix: str | None


# Checked in order; the first matching region prefix wins.
_PARTITIONS: tuple[tuple[str, _Partition], ...] = (
    ("us-isob-", _Partition("aws-iso-b", "sc2s.sgov.gov", None)),
    ("us-iso-", _Partition("aws-iso", "c2s.ic.gov", None)),
    ("us-gov-", _Partition("aws-us-gov", "amazonaws.com", "api.aws")),
    ("cn-", _Partition("aws-cn", "amazonaws.com.cn", "api.amazonwebservices.com.cn")),
)
_DEFAULT_PARTITION = _Partition("aws", "amazonaws.com", "api.aws")


def partition_for(region: str) -> _Partition:
    for prefix, partition in _PARTITIONS:
        if region.startswith(prefix):
            return partition
    return _DEFAULT_PARTITION


def _error(message: str) -> ResolveEndpointOutcome:
    return Outcome.failure(
        EndpointResolutionError(
            CoreErrors.ENDPOINT_RESOLUTION_FAILURE,
            "ENDPOINT_RESOLUTION_FAILURE",
            message,
            False,
        )
    )


class DefaultEndpointProvider(EndpointProviderBase):
    """Regional endpoint rules for services with a single endpoint prefix.

    Args:
        endpoint_prefix: Host prefix, e.g. ``eks`` or ``license-manager``.
        global_endpoints: Partition name -> ``(host, signing_region)`` for
            services served from one global host per partition
            (e.g. Organizations). FIPS/dual-stack variants of a global
            service fall back to the regional rules.
    """

    def __init__(
        self,
        endpoint_prefix: str,
        global_endpoints: dict[str, tuple[str, str]] | None = None,
    ) -> None:
        self.endpoint_prefix = endpoint_prefix
        self.global_endpoints = dict(global_endpoints or {})
        self._built_ins: dict[str, Any] = {}

    def init_built_in_parameters(self, config: ClientConfiguration) -> None:
        self._built_ins = {
            "Region": config.region_name,
            "UseFIPS": config.use_fips,
            "UseDualStack": config.use_dual_stack,
        }
        if config.endpoint_override:
            self._built_ins["Endpoint"] = config.endpoint_override

    def override_endpoint(self, endpoint: str) -> None:
        self._built_ins["Endpoint"] = endpoint

    def resolve_endpoint(self, params: list[EndpointParameter]) -> ResolveEndpointOutcome:
        values = dict(self._built_ins)
        values.update({p.name: p.value for p in params})

        region = values.get("Region")
        use_fips = bool(values.get("UseFIPS"))
        use_dual_stack = bool(values.get("UseDualStack"))
        custom = values.get("Endpoint")

        if custom:
            if use_fips:
                return _error("Invalid Configuration: FIPS and custom endpoint are not supported")
            if use_dual_stack:
                return _error(
                    "Invalid Configuration: Dualstack and custom endpoint are not supported"
                )
            return Outcome.success(Endpoint(custom, signing_region=region))

        if not region:
            return _error("Invalid Configuration: Missing Region")

        partition = partition_for(region)
        if use_dual_stack and partition.dual_stack_dns_suffix is None:
            return _error("DualStack is enabled but this partition does not support DualStack")

        if not use_fips and not use_dual_stack and partition.name in self.global_endpoints:
            host, signing_region = self.global_endpoints[partition.name]
            return Outcome.success(Endpoint(f"https://{host}", signing_region=signing_region))

        prefix = f"{self.endpoint_prefix}-fips" if use_fips else self.endpoint_prefix
        suffix = partition.dual_stack_dns_suffix if use_dual_stack else partition.dns_suffix
        return Outcome.success(
            Endpoint(f"https://{prefix}.{region}.{suffix}", signing_region=region)
        )
