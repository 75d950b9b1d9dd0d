"""
Base class of every service client.

A concrete client only declares constants and an ``OPERATIONS`` table.
``__init_subclass__`` turns each :class:`~awsjack.base.operation.Operation`
into four methods (shown for ``DescribeCluster``):

* ``describe_cluster(request)``: synchronous call, returns an ``Outcome``.
* ``describe_cluster_callable(request)``: returns a ``concurrent.futures.Future``.
* ``describe_cluster_async(request, handler, context=None)``: calls
  ``handler(client, request, outcome, context)`` from the executor.
* ``adescribe_cluster(request)``: asyncio coroutine.

All of them funnel into :meth:`ServiceClient.invoke`.
"""

from __future__ import annotations

import functools
import platform
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Any, ClassVar, Mapping

from botocore.awsrequest import AWSRequest
from botocore.exceptions import BotoCoreError

from awsjack import __version__
from awsjack.base.async_support import async_wrap
from awsjack.base.config import ClientConfiguration, validate_config
from awsjack.base.endpoint import DefaultEndpointProvider, Endpoint, EndpointProviderBase
from awsjack.base.exceptions import (
    AWSError,
    ClientSigningError,
    ConfigurationError,
    CoreErrors,
    EndpointResolutionError,
    MissingParameterError,
    NetworkConnectionError,
    RequestSerializationError,
)
from awsjack.base.http import HttpClient
from awsjack.base.logger import aj_logger
from awsjack.base.operation import (
    AsyncCallerContext,
    Operation,
    ResponseReceivedHandler,
    make_async_operation,
    make_callable_operation,
)
from awsjack.base.outcome import AmazonWebServiceResult, Outcome
from awsjack.base.protocol import Protocol
from awsjack.base.request import ServiceRequest
from awsjack.base.signer import (
    NULL_SIGNER,
    SIGV4_SIGNER,
    AWSAuthV4Signer,
    CredentialsProvider,
    NullSigner,
    compute_signer_region,
    default_credentials_provider,
)


def _create_sync_method(operation: Operation):
    def _api_call(self, request=None, **members):
        request = self._coerce_request(operation, request, members)
        return self.invoke(operation, request)

    _api_call.__name__ = operation.python_name
    _api_call.__doc__ = (
        f"Call ``{operation.name}`` ({operation.http_method} {operation.request_uri}).\n\n"
        f"Args:\n    request: ``{operation.request_class.__name__}``, a dict of members,\n"
        f"        or members as keyword arguments.\n\n"
        f"Returns:\n    Outcome wrapping the decoded response or an AWSError."
    )
    return _api_call


def _create_callable_method(operation: Operation):
    def _api_call_callable(self, request=None, **members):
        request = self._coerce_request(operation, request, members)
        return make_callable_operation(
            self.executor, functools.partial(self.invoke, operation), request
        )

    _api_call_callable.__name__ = f"{operation.python_name}_callable"
    _api_call_callable.__doc__ = (
        f"Submit ``{operation.name}`` to the executor and return a Future of its Outcome."
    )
    return _api_call_callable


def _create_async_method(operation: Operation):
    def _api_call_async(self, request, handler, context=None):
        request = self._coerce_request(operation, request, {})
        make_async_operation(
            self.executor,
            functools.partial(self.invoke, operation),
            self,
            request,
            handler,
            context,
        )

    _api_call_async.__name__ = f"{operation.python_name}_async"
    _api_call_async.__doc__ = (
        f"Submit ``{operation.name}`` to the executor; the handler is called with\n"
        f"``(client, request, outcome, context)`` once it completes."
    )
    return _api_call_async


class ServiceClient:
    """Shared machinery of the generated service clients.

    Args:
        config: Client configuration (dict, model or ``None`` for env/defaults).
        endpoint_provider: Endpoint provider; defaults to the service's
            :class:`DefaultEndpointProvider`.
        credentials_provider: Zero-argument callable returning botocore
            credentials; defaults to the boto3 credential chain.
        executor: Executor for the callable/async forms; a private
            ``ThreadPoolExecutor`` is created (and owned) when omitted.
        http_client: Transport with ``send(AWSRequest)``; defaults to
            :class:`HttpClient`.

    Attributes:
        endpoint_provider: Public so it can be swapped or cleared; a client
            without one fails every operation with
            ``ENDPOINT_RESOLUTION_FAILURE``.
    """

    SERVICE_NAME: ClassVar[str] = ""
    SERVICE_CLIENT_NAME: ClassVar[str] = ""
    ALLOCATION_TAG: ClassVar[str] = ""
    ENDPOINT_PREFIX: ClassVar[str] = ""
    GLOBAL_ENDPOINTS: ClassVar[dict[str, tuple[str, str]]] = {}
    OPERATIONS: ClassVar[tuple[Operation, ...]] = ()
    protocol: ClassVar[Protocol]

    operations: ClassVar[dict[str, Operation]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.operations = {op.python_name: op for op in cls.OPERATIONS}
        for op in cls.OPERATIONS:
            sync = _create_sync_method(op)
            setattr(cls, op.python_name, sync)
            setattr(cls, f"{op.python_name}_callable", _create_callable_method(op))
            setattr(cls, f"{op.python_name}_async", _create_async_method(op))
            setattr(cls, f"a{op.python_name}", async_wrap(sync))

    def __init__(
        self,
        config: dict | ClientConfiguration | None = None,
        *,
        endpoint_provider: EndpointProviderBase | None = None,
        credentials_provider: CredentialsProvider | None = None,
        executor: Executor | None = None,
        http_client: Any | None = None,
    ) -> None:
        if not self.OPERATIONS:
            raise ConfigurationError(f"{type(self).__name__} declares no operations")
        self.config = validate_config(config)
        self.endpoint_provider = endpoint_provider or self.default_endpoint_provider()

        self._owns_executor = executor is None
        self.executor = executor or ThreadPoolExecutor(
            max_workers=self.config.max_workers,
            thread_name_prefix=self.ALLOCATION_TAG,
        )
        self._owns_http_client = http_client is None
        self.http_client = http_client or HttpClient(self.config)

        self.signers = {
            SIGV4_SIGNER: AWSAuthV4Signer(
                credentials_provider or default_credentials_provider(self.config),
                self.SERVICE_NAME,
                compute_signer_region(self.config.region_name),
            ),
            NULL_SIGNER: NullSigner(),
        }
        self.user_agent = (
            f"awsjack/{__version__} api/{self.SERVICE_CLIENT_NAME.replace(' ', '-')} "
            f"Python/{platform.python_version()}"
        )
        if self.config.user_agent_extra:
            self.user_agent += f" {self.config.user_agent_extra}"
        self._init()

    @classmethod
    def default_endpoint_provider(cls) -> EndpointProviderBase:
        return DefaultEndpointProvider(cls.ENDPOINT_PREFIX, cls.GLOBAL_ENDPOINTS)

    def _init(self) -> None:
        if self.endpoint_provider is None:
            aj_logger.critical(
                "Unexpected nullptr: endpoint_provider", service=self.SERVICE_CLIENT_NAME
            )
            return
        self.endpoint_provider.init_built_in_parameters(self.config)

    def override_endpoint(self, endpoint: str) -> None:
        """Send every later request to *endpoint* instead of the resolved one."""
        if self.endpoint_provider is None:
            raise ConfigurationError("Cannot override endpoint: no endpoint provider set")
        self.endpoint_provider.override_endpoint(endpoint)

    # --- lifecycle ---

    def close(self) -> None:
        """Release the executor and HTTP client if this client created them."""
        if self._owns_executor:
            self.executor.shutdown(wait=True)
        if self._owns_http_client:
            self.http_client.close()

    def __enter__(self) -> ServiceClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # --- dispatch ---

    @classmethod
    def get_operation(cls, name: str) -> Operation:
        """Look up an operation by AWS name, Python name or CLI name."""
        key = name.replace("-", "_")
        if key in cls.operations:
            return cls.operations[key]
        for op in cls.OPERATIONS:
            if op.name == name:
                return op
        raise ValueError(f"Unknown operation '{name}' for {cls.SERVICE_CLIENT_NAME}")

    @staticmethod
    def _coerce_request(
        operation: Operation,
        request: ServiceRequest | Mapping[str, Any] | None,
        members: Mapping[str, Any],
    ) -> ServiceRequest:
        if request is None:
            return operation.request_class(**members)
        if members:
            raise TypeError(
                f"{operation.python_name}() takes a request or keyword members, not both"
            )
        if isinstance(request, operation.request_class):
            return request
        if isinstance(request, Mapping):
            return operation.request_class(**request)
        raise TypeError(
            f"{operation.python_name}() expects {operation.request_class.__name__}, "
            f"got {type(request).__name__}"
        )

    def invoke(self, operation: Operation, request: ServiceRequest) -> Outcome[AmazonWebServiceResult]:
        """Run one operation synchronously.

        Steps, each a terminal failure if it does not pass: endpoint
        provider present, required members set, endpoint resolved. Then the
        path is built and the signed request is sent.
        """
        if self.endpoint_provider is None:
            aj_logger.critical(
                "Unexpected nullptr: endpoint_provider",
                service=self.SERVICE_CLIENT_NAME,
                operation=operation.name,
            )
            return Outcome.failure(
                EndpointResolutionError(
                    CoreErrors.ENDPOINT_RESOLUTION_FAILURE,
                    "ENDPOINT_RESOLUTION_FAILURE",
                    "Unexpected nullptr: endpoint_provider",
                    False,
                )
            )

        for member in operation.required:
            unset = not request.has_been_set(member) or (
                member in operation.path_member_names and request.get_member(member) is None
            )
            if unset:
                aj_logger.error(
                    f"Required field: {member}, is not set",
                    service=self.SERVICE_CLIENT_NAME,
                    operation=operation.name,
                )
                return Outcome.failure(
                    MissingParameterError(
                        CoreErrors.MISSING_PARAMETER,
                        "MISSING_PARAMETER",
                        f"Missing required field [{member}]",
                        False,
                    )
                )

        resolved = self.endpoint_provider.resolve_endpoint(request.get_endpoint_context_params())
        if not resolved.is_success():
            message = resolved.error.message
            aj_logger.error(message, service=self.SERVICE_CLIENT_NAME, operation=operation.name)
            return Outcome.failure(
                EndpointResolutionError(
                    CoreErrors.ENDPOINT_RESOLUTION_FAILURE,
                    "ENDPOINT_RESOLUTION_FAILURE",
                    message,
                    False,
                )
            )
        endpoint = resolved.result
        for is_member, value in operation.path_segments(request):
            if is_member:
                endpoint.add_path_segment(value)
            else:
                endpoint.add_path_segments(value)

        return self.make_request(operation, request, endpoint)

    def make_request(
        self,
        operation: Operation,
        request: ServiceRequest,
        endpoint: Endpoint,
    ) -> Outcome[AmazonWebServiceResult]:
        """Serialize, sign and send *request*, then wrap the HTTP outcome."""
        try:
            aws_request: AWSRequest = self.protocol.build_request(operation, request, endpoint)
        except (TypeError, ValueError) as exc:
            aj_logger.error(
                f"Request serialization failed: {exc}",
                service=self.SERVICE_CLIENT_NAME,
                operation=operation.name,
            )
            return Outcome.failure(
                RequestSerializationError(
                    CoreErrors.INVALID_PARAMETER_VALUE,
                    "SERIALIZATION_FAILURE",
                    str(exc),
                    False,
                )
            )
        aws_request.headers["User-Agent"] = self.user_agent

        signer = self.signers.get(operation.signer)
        if signer is None:
            return Outcome.failure(
                ClientSigningError(
                    CoreErrors.CLIENT_SIGNING_FAILURE,
                    "CLIENT_SIGNING_FAILURE",
                    f"No signer registered for '{operation.signer}'",
                    False,
                )
            )
        try:
            signer.sign(aws_request, endpoint.signing_region, endpoint.signing_name)
        except BotoCoreError as exc:
            aj_logger.error(
                f"Request signing failed: {exc}",
                service=self.SERVICE_CLIENT_NAME,
                operation=operation.name,
            )
            return Outcome.failure(
                ClientSigningError(
                    CoreErrors.CLIENT_SIGNING_FAILURE,
                    "CLIENT_SIGNING_FAILURE",
                    str(exc),
                    False,
                )
            )

        aj_logger.debug(
            f"{aws_request.method} {aws_request.url}",
            service=self.SERVICE_CLIENT_NAME,
            operation=operation.name,
        )
        try:
            response = self.http_client.send(aws_request)
        except BotoCoreError as exc:
            aj_logger.error(
                f"No response received: {exc}",
                service=self.SERVICE_CLIENT_NAME,
                operation=operation.name,
            )
            return Outcome.failure(
                NetworkConnectionError(
                    CoreErrors.NETWORK_CONNECTION,
                    "NetworkConnection",
                    str(exc),
                    True,
                )
            )

        outcome = self.protocol.parse_response(
            response.status_code, response.headers, response.content
        )
        if not outcome.is_success():
            error: AWSError = outcome.error  # type: ignore[assignment]
            aj_logger.warning(
                f"{error.exception_name}: {error.message}",
                service=self.SERVICE_CLIENT_NAME,
                operation=operation.name,
                request_id=error.request_id,
            )
        return outcome

    def __repr__(self) -> str:
        return f"{type(self).__name__}(region={self.config.region_name!r})"


__all__ = [
    "ServiceClient",
    "AsyncCallerContext",
    "ResponseReceivedHandler",
]
