"""Connection to the management API.

A :class:`Connection` couples an ``httpx.Client`` bound to the endpoint's
base URL with the middleware pipeline every request goes through.
"""

import json
import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from ...exceptions import ConnectionFailedError, RequestTimeoutError
from .endpoint import Endpoint, parse_endpoint
from .middleware import BasicAuth, FollowRedirects, JSONResponse, Pipeline, RaiseError
from .response import HTTPResponse
from .transport import AdapterSpec, build_http_client

logger = logging.getLogger(__name__)

MAX_REDIRECTS = 3
JSON_CONTENT_TYPE = "application/json"

NO_BODY = object()


class Connection:
    """HTTP connection bound to one management API endpoint.

    :param endpoint: Resolved endpoint
    :param http: httpx client whose base URL is ``endpoint.base_url``
    """

    def __init__(self, endpoint: Endpoint, http: httpx.Client):
        self.endpoint = endpoint
        self.http = http
        self.pipeline = Pipeline(
            [
                BasicAuth(endpoint.username, endpoint.password),
                FollowRedirects(limit=MAX_REDIRECTS),
                RaiseError(),
                JSONResponse(content_type=r"\bjson$"),
            ],
            self._transmit,
        )

    def _transmit(self, request: httpx.Request) -> HTTPResponse:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("=== SEND: %s %s", request.method, request.url)
            for k, v in request.headers.items():
                if k.lower() == "authorization":
                    logger.debug("  %s: [REDACTED]", k)
                else:
                    logger.debug("  %s: %s", k, v)
        try:
            response = self.http.send(request, follow_redirects=False)
        except httpx.TimeoutException as e:
            raise RequestTimeoutError(
                f"{request.method} {request.url} timed out: {e}", url=str(request.url)
            ) from e
        except httpx.TransportError as e:
            raise ConnectionFailedError(
                f"{request.method} {request.url} failed: {e}", url=str(request.url)
            ) from e
        logger.debug(
            "=== RECV: %s %s -> %d", request.method, request.url, response.status_code
        )
        return HTTPResponse(response)

    def request(
        self,
        method: str,
        path: str,
        body: Any = NO_BODY,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> HTTPResponse:
        """Send a request through the pipeline.

        :param method: HTTP method
        :param path: Path relative to the endpoint base URL, already encoded
        :param body: JSON-serializable body; ``str``/``bytes`` are sent as-is
        :param params: Optional query parameters
        :param headers: Optional extra request headers
        :return: Response with its body decoded when it was JSON
        """
        request_headers = dict(headers or {})
        content = None
        if body is not NO_BODY:
            request_headers.setdefault("Content-Type", JSON_CONTENT_TYPE)
            if isinstance(body, (str, bytes)):
                content = body
            else:
                content = json.dumps(body)

        request = self.http.build_request(
            method,
            path,
            content=content,
            params=params,
            headers=request_headers,
        )
        return self.pipeline(request)

    def close(self) -> None:
        self.http.close()


def open_connection(
    endpoint: str,
    username: Optional[str] = None,
    password: Optional[str] = None,
    adapter: AdapterSpec = None,
    **options: Any,
) -> Connection:
    """Parse ``endpoint`` and build a ready-to-use connection.

    :param endpoint: Management API URL, optionally with ``user:password@``
    :param username: Username when the URL carries none
    :param password: Password when the URL carries none
    :param adapter: Transport adapter, see
        :func:`~rabbitmq_http_api.utils.http.transport.resolve_adapter`
    :param options: Extra ``httpx.Client`` options
    :return: Connection bound to the resolved base URL
    :raises ConfigurationError: If the URL, adapter or options are unusable
    """
    resolved = parse_endpoint(endpoint, username=username, password=password)
    http = build_http_client(resolved.base_url, adapter=adapter, **options)
    logger.debug("Opened connection to %r", resolved)
    return Connection(resolved, http)
