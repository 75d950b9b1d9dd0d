"""
Operation descriptors and the callable/async call helpers.

A service declares its API as a tuple of :class:`Operation` objects; the
shared dispatch in :mod:`awsjack.base.client` reads verb, path template,
query members and required members from the descriptor instead of each
operation carrying its own copy of the template.
"""

from __future__ import annotations

import re
from uuid import uuid4
from concurrent.futures import Executor, Future
from typing import Any, Callable, Iterator

from botocore import xform_name

from awsjack.base.exceptions import AWSError, CoreErrors
from awsjack.base.logger import aj_logger
from awsjack.base.outcome import Outcome
from awsjack.base.request import ServiceRequest, build_request_model, member_name
from awsjack.base.signer import SIGV4_SIGNER

_PLACEHOLDER = re.compile(r"\{([A-Za-z0-9_]+)\}")


class Operation:
    """One AWS API action.

    Args:
        name: AWS operation name, e.g. ``DeleteAddon``.
        http_method: ``GET``, ``POST`` or ``DELETE``.
        request_uri: Path template, e.g. ``/clusters/{clusterName}/addons/{addonName}``.
            Every placeholder is a required member.
        query: Wire names of members sent in the query string.
        required: Wire names of further required members (checked after the
            path members, in this order).
        signer: Tag of the signer that signs this operation.
    """

    def __init__(
        self,
        name: str,
        http_method: str = "POST",
        request_uri: str = "/",
        query: tuple[str, ...] = (),
        required: tuple[str, ...] = (),
        signer: str = SIGV4_SIGNER,
    ) -> None:
        self.name = name
        self.http_method = http_method
        self.request_uri = request_uri
        self.query = query
        self.signer = signer
        self.path_members = tuple(_PLACEHOLDER.findall(request_uri))
        self.required = tuple(
            member_name(wire) for wire in self.path_members + tuple(required)
        )
        self.bound_members = frozenset(
            member_name(wire) for wire in self.path_members + query
        )
        self.path_member_names = frozenset(member_name(wire) for wire in self.path_members)
        self.python_name = xform_name(name)
        self.request_class = build_request_model(
            name,
            {xform_name(wire): wire for wire in self.path_members + query},
        )

    def path_segments(self, request: ServiceRequest) -> Iterator[tuple[bool, Any]]:
        """Yield ``(is_member, value)`` pairs that rebuild the request path.

        Literal runs come out as ``(False, "/clusters/")``; members as
        ``(True, <value of ClusterName>)``.
        """
        position = 0
        for match in _PLACEHOLDER.finditer(self.request_uri):
            literal = self.request_uri[position:match.start()]
            if literal:
                yield False, literal
            yield True, request.get_member(member_name(match.group(1)))
            position = match.end()
        tail = self.request_uri[position:]
        if tail and tail != "/":
            yield False, tail

    def __repr__(self) -> str:
        return f"Operation({self.name!r}, {self.http_method!r}, {self.request_uri!r})"


class AsyncCallerContext:
    """Opaque value handed back to an async handler.

    Attributes:
        uuid: Correlation id, generated when not supplied.
    """

    def __init__(self, uuid: str | None = None) -> None:
        self.uuid = uuid or str(uuid4())

    def __repr__(self) -> str:
        return f"AsyncCallerContext({self.uuid!r})"


# handler(client, request, outcome, context)
ResponseReceivedHandler = Callable[[Any, ServiceRequest, Outcome, "AsyncCallerContext | None"], None]


def make_callable_operation(
    executor: Executor,
    fn: Callable[[ServiceRequest], Outcome],
    request: ServiceRequest,
) -> Future:
    """Run ``fn(request)`` on *executor* and return its future.

    The request is cloned first so the caller may reuse or mutate it as
    soon as this returns.
    """
    request_copy = request.clone()
    return executor.submit(fn, request_copy)


def make_async_operation(
    executor: Executor,
    fn: Callable[[ServiceRequest], Outcome],
    client: Any,
    request: ServiceRequest,
    handler: ResponseReceivedHandler,
    context: AsyncCallerContext | None = None,
) -> None:
    """Run ``fn`` on *executor* and pass its outcome to *handler*.

    The handler receives the caller's original request object, and runs on
    the executor thread exactly once, with a failed outcome if ``fn``
    itself raised.
    """
    request_copy = request.clone()

    def task() -> None:
        try:
            outcome = fn(request_copy)
        except Exception as exc:
            aj_logger.error(
                f"Operation raised before producing an outcome: {exc}",
                operation=request.get_service_request_name(),
                exc_info=True,
            )
            outcome = Outcome.failure(
                AWSError(CoreErrors.UNKNOWN, type(exc).__name__, str(exc), False)
            )
        try:
            handler(client, request, outcome, context)
        except Exception:
            aj_logger.error(
                "Response handler raised",
                operation=request.get_service_request_name(),
                exc_info=True,
            )
            raise

    executor.submit(task)
