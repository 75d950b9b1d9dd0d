"""Success/error result returned by every client operation."""

from __future__ import annotations

from typing import Any, Generic, Iterator, Mapping, TypeVar

from awsjack.base.exceptions import AWSError

T = TypeVar("T")


class AmazonWebServiceResult(Mapping[str, Any]):
    """Deserialized response of a successful call.

    Behaves as a read-only mapping over the JSON payload so callers can
    write ``result["cluster"]["status"]``.

    Attributes:
        payload: Decoded JSON body (``{}`` for empty bodies).
        headers: Response headers.
        status_code: HTTP status code.
        request_id: Value of the ``x-amzn-RequestId`` header, if any.
    """

    def __init__(
        self,
        payload: dict[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        status_code: int = 200,
        request_id: str | None = None,
    ) -> None:
        self.payload = dict(payload or {})
        self.headers = dict(headers or {})
        self.status_code = status_code
        self.request_id = request_id

    def __getitem__(self, key: str) -> Any:
        return self.payload[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.payload)

    def __len__(self) -> int:
        return len(self.payload)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AmazonWebServiceResult):
            return (self.payload, self.status_code) == (other.payload, other.status_code)
        if isinstance(other, Mapping):
            return self.payload == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"AmazonWebServiceResult(status_code={self.status_code}, payload={self.payload!r})"


class Outcome(Generic[T]):
    """Either a result or an :class:`AWSError`, never both.

    Nothing is raised across an operation call; inspect :meth:`is_success`
    or call :meth:`get_result`, which raises the carried error.
    """

    __slots__ = ("_result", "_error")

    def __init__(self, result: T | None = None, error: AWSError | None = None) -> None:
        if error is not None and result is not None:
            raise ValueError("Outcome cannot carry both a result and an error")
        self._result = result
        self._error = error

    @classmethod
    def success(cls, result: T) -> Outcome[T]:
        return cls(result=result)

    @classmethod
    def failure(cls, error: AWSError) -> Outcome[T]:
        return cls(error=error)

    def is_success(self) -> bool:
        return self._error is None

    @property
    def result(self) -> T | None:
        return self._result

    @property
    def error(self) -> AWSError | None:
        return self._error

    def get_result(self) -> T:
        """Return the result, raising the carried error on failure."""
        if self._error is not None:
            raise self._error
        return self._result  # type: ignore[return-value]

    def __bool__(self) -> bool:
        return self.is_success()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Outcome):
            return NotImplemented
        return self._result == other._result and self._error == other._error

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._error is not None:
            return f"Outcome(error={self._error!r})"
        return f"Outcome(result={self._result!r})"
