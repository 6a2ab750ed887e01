"""Response wrapper passed through the middleware pipeline."""

from typing import Any

import httpx


class HTTPResponse:
    """Wrapper for HTTP responses with a decodable body.

    ``body`` starts as the raw text (``None`` when the response had no
    content) and is replaced by the decoded value when the JSON stage of
    the pipeline recognises the content type.
    """

    def __init__(self, response: httpx.Response):
        """Initialize the response wrapper.

        :param response: The underlying httpx.Response object
        :type response: httpx.Response
        """
        self.response = response
        self.body: Any = response.text if response.content else None

    @property
    def status_code(self) -> int:
        """Get the HTTP status code of the response.

        :return: HTTP status code
        :rtype: int
        """
        return self.response.status_code

    @property
    def headers(self) -> httpx.Headers:
        """Get the response headers.

        :return: Response headers
        :rtype: httpx.Headers
        """
        return self.response.headers

    @property
    def text(self) -> str:
        return self.response.text

    @property
    def request(self) -> httpx.Request:
        return self.response.request

    @property
    def media_type(self) -> str:
        """Content type without parameters, lower-cased."""
        content_type = self.headers.get("content-type", "")
        return content_type.split(";", 1)[0].strip().lower()

    def is_success(self) -> bool:
        """Check if the response indicates success (2xx status code).

        :return: True if status code is in 200-299 range
        :rtype: bool
        """
        return 200 <= self.status_code < 300

    def __repr__(self) -> str:
        return f"<HTTPResponse [{self.status_code}]>"
