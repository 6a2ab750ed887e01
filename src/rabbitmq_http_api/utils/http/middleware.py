"""Request/response middleware for the management API connection.

Each stage is a callable taking the outgoing ``httpx.Request`` and the next
handler in the chain, and returning an :class:`HTTPResponse`. Stages are
composed by :class:`Pipeline`; the first stage listed is the outermost, so
it sees the request first and the response last.

The connection uses, outermost first::

    BasicAuth -> FollowRedirects -> RaiseError -> JSONResponse -> transport

so a response is JSON-decoded before the error stage inspects it, and the
redirect stage only ever sees 3xx responses (errors were already raised).
"""

import json
import logging
import re
from functools import reduce
from typing import Callable, Optional, Sequence, Union

import httpx

from ...exceptions import DecodingError, HTTPError, NotFoundError, RedirectLimitError
from .response import HTTPResponse

logger = logging.getLogger(__name__)

Handler = Callable[[httpx.Request], HTTPResponse]


class Middleware:
    """Base class for a pipeline stage."""

    def __call__(self, request: httpx.Request, call_next: Handler) -> HTTPResponse:
        raise NotImplementedError


class BasicAuth(Middleware):
    """Add an HTTP basic ``Authorization`` header to every request.

    A header already present on the request is left alone.
    """

    def __init__(self, username: str, password: str):
        self._auth = httpx.BasicAuth(username, password)

    def __call__(self, request: httpx.Request, call_next: Handler) -> HTTPResponse:
        if "authorization" not in request.headers:
            request = next(self._auth.auth_flow(request))
        return call_next(request)


class FollowRedirects(Middleware):
    """Follow redirect responses up to ``limit`` hops.

    301, 302 and 303 are re-issued as GET without a body; 307 and 308
    repeat the original method and body. The ``Authorization`` header is
    dropped when a redirect leaves the original scheme, host and port.
    Exceeding the limit raises :class:`RedirectLimitError`.
    """

    REDIRECT_CODES = frozenset({301, 302, 303, 307, 308})
    METHOD_CHANGING_CODES = frozenset({301, 302, 303})

    def __init__(self, limit: int = 3):
        self.limit = limit

    def __call__(self, request: httpx.Request, call_next: Handler) -> HTTPResponse:
        response = call_next(request)
        hops = 0
        while self._is_followable(response):
            if hops >= self.limit:
                logger.warning(
                    "Redirect limit (%d) reached for %s %s",
                    self.limit,
                    request.method,
                    request.url,
                )
                raise RedirectLimitError(
                    f"Too many redirects (limit {self.limit})",
                    limit=self.limit,
                    status_code=response.status_code,
                    method=request.method,
                    url=str(request.url),
                    body=response.body,
                )
            request = self._redirect_request(request, response)
            hops += 1
            logger.debug(
                "Following %d redirect (%d/%d) to %s",
                response.status_code,
                hops,
                self.limit,
                request.url,
            )
            response = call_next(request)
        return response

    def _is_followable(self, response: HTTPResponse) -> bool:
        return (
            response.status_code in self.REDIRECT_CODES
            and "location" in response.headers
        )

    def _redirect_request(
        self, request: httpx.Request, response: HTTPResponse
    ) -> httpx.Request:
        url = request.url.join(response.headers["location"])
        method = request.method
        content: Optional[bytes] = request.content
        headers = httpx.Headers(request.headers)
        headers.pop("host", None)
        if not self._same_origin(request.url, url):
            headers.pop("authorization", None)

        if response.status_code in self.METHOD_CHANGING_CODES and method != "HEAD":
            method = "GET"
            content = None
            headers.pop("content-type", None)
            headers.pop("content-length", None)

        return httpx.Request(
            method,
            url,
            headers=headers,
            content=content,
            extensions=request.extensions,
        )

    @staticmethod
    def _same_origin(original: httpx.URL, target: httpx.URL) -> bool:
        return (
            original.scheme == target.scheme
            and original.host == target.host
            and original.port == target.port
        )


class RaiseError(Middleware):
    """Turn responses with a status of 400 or above into exceptions."""

    def __call__(self, request: httpx.Request, call_next: Handler) -> HTTPResponse:
        response = call_next(request)
        if response.status_code >= 400:
            raise error_for_response(request, response)
        return response


def error_for_response(request: httpx.Request, response: HTTPResponse) -> HTTPError:
    """Build the exception matching an error response.

    :param request: Request that produced the response
    :param response: Error response
    :return: NotFoundError for 404, HTTPError otherwise
    """
    message = f"{request.method} {request.url} failed with status {response.status_code}"
    reason = response.body.get("reason") if isinstance(response.body, dict) else None
    if reason:
        message = f"{message}: {reason}"

    if response.status_code == 404:
        return NotFoundError(
            message, method=request.method, url=str(request.url), body=response.body
        )
    return HTTPError(
        message,
        status_code=response.status_code,
        method=request.method,
        url=str(request.url),
        body=response.body,
    )


class JSONResponse(Middleware):
    """Decode response bodies whose media type matches ``content_type``.

    Empty bodies decode to ``None``; anything else that fails to parse
    raises :class:`DecodingError`.
    """

    def __init__(self, content_type: Union[str, "re.Pattern[str]"] = r"\bjson$"):
        self.content_type = re.compile(content_type)

    def __call__(self, request: httpx.Request, call_next: Handler) -> HTTPResponse:
        response = call_next(request)
        if self.content_type.search(response.media_type):
            response.body = self.parse(response)
        return response

    def parse(self, response: HTTPResponse):
        text = response.text
        if not text.strip():
            return None
        try:
            return json.loads(text)
        except ValueError as e:
            raise DecodingError(
                f"Invalid JSON in response from {response.request.url}: {e}",
                content_type=response.headers.get("content-type"),
                body=text,
            ) from e


class Pipeline:
    """Ordered chain of middleware in front of a terminal handler.

    :param middleware: Stages, outermost first
    :param handler: Terminal handler that actually sends the request
    """

    def __init__(self, middleware: Sequence[Middleware], handler: Handler):
        self.middleware = list(middleware)
        self.handler = handler
        self._chain = reduce(self._wrap, reversed(self.middleware), handler)

    @staticmethod
    def _wrap(call_next: Handler, stage: Middleware) -> Handler:
        def handle(request: httpx.Request) -> HTTPResponse:
            return stage(request, call_next)

        return handle

    def __call__(self, request: httpx.Request) -> HTTPResponse:
        return self._chain(request)
