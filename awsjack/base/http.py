"""HTTP client used by every service client."""

from __future__ import annotations

from typing import TYPE_CHECKING

from botocore.awsrequest import AWSRequest, AWSResponse
from botocore.httpsession import URLLib3Session

from awsjack.base.retry import retry

if TYPE_CHECKING:
    from awsjack.base.config import ClientConfiguration


class HttpClient:
    """Pooled HTTPS transport built on botocore's urllib3 session.

    ``send`` retries connection-level failures up to
    ``config.max_attempts`` times; any HTTP response, including 5xx, is
    returned as-is.
    """

    def __init__(self, config: ClientConfiguration) -> None:
        self._session = URLLib3Session(
            verify=config.verify_ssl,
            proxies=config.proxies,
            timeout=(config.connect_timeout, config.read_timeout),
            max_pool_connections=config.max_connections,
        )
        self._send_with_retry = retry(max_attempts=config.max_attempts)(self._send_once)

    def _send_once(self, request: AWSRequest) -> AWSResponse:
        return self._session.send(request.prepare())

    def send(self, request: AWSRequest) -> AWSResponse:
        return self._send_with_retry(request)

    def close(self) -> None:
        self._session.close()
