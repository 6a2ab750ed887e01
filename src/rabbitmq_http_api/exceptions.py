"""Structured exception classes for the RabbitMQ HTTP API client."""

import json
from typing import Any, Dict, Optional


class RabbitMQHTTPAPIError(Exception):
    """Base exception for all RabbitMQ HTTP API client errors.

    :param message: Human-readable error message
    :param code: Optional error code for programmatic handling
    :param details: Optional dictionary containing additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format.

        :return: Dictionary containing error code, message, and details
        """
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }

    def to_json(self) -> str:
        """Convert exception to JSON string.

        :return: JSON-encoded string representation of the exception
        """
        return json.dumps(self.to_dict(), default=str)


class ConfigurationError(RabbitMQHTTPAPIError):
    """Raised when a client cannot be built from the given endpoint or options.

    Covers malformed endpoint URLs, unknown transport adapters and
    transport options rejected by httpx.

    :param message: Description of the configuration error
    :param setting: Optional name of the problematic setting
    """

    def __init__(self, message: str, setting: Optional[str] = None):
        details = {}
        if setting:
            details["setting"] = setting
        super().__init__(message=message, code="CONFIGURATION_ERROR", details=details)
        self.setting = setting


class HTTPError(RabbitMQHTTPAPIError):
    """Raised when the management API answers with an error status.

    :param message: Description of the failure
    :param status_code: HTTP status code of the response
    :param method: HTTP method of the failed request
    :param url: URL of the failed request
    :param body: Response body, already JSON-decoded when it was JSON
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        method: Optional[str] = None,
        url: Optional[str] = None,
        body: Any = None,
    ):
        details: Dict[str, Any] = {}
        if status_code:
            details["status_code"] = status_code
        if method:
            details["method"] = method
        if url:
            details["url"] = url
        if body:
            details["response_body"] = body
        super().__init__(message=message, code="HTTP_ERROR", details=details)
        self.status_code = status_code
        self.method = method
        self.url = url
        self.body = body

    @property
    def reason(self) -> Optional[str]:
        """Server-supplied reason, when the error body carries one."""
        if isinstance(self.body, dict):
            return self.body.get("reason")
        return None


class NotFoundError(HTTPError):
    """Raised when the requested resource does not exist (HTTP 404)."""

    def __init__(self, message: str, **kwargs: Any):
        super().__init__(message, status_code=404, **kwargs)
        self.code = "NOT_FOUND"


class RedirectLimitError(HTTPError):
    """Raised when a request is redirected more times than allowed.

    :param message: Description of the error
    :param limit: Maximum number of redirects that were allowed
    """

    def __init__(self, message: str, limit: int, **kwargs: Any):
        super().__init__(message, **kwargs)
        self.code = "REDIRECT_LIMIT_REACHED"
        self.details["limit"] = limit
        self.limit = limit


class DecodingError(RabbitMQHTTPAPIError):
    """Raised when a response body cannot be decoded as expected.

    :param message: Description of the decoding failure
    :param content_type: Optional content type of the offending response
    :param body: Optional raw body text
    """

    def __init__(
        self,
        message: str,
        content_type: Optional[str] = None,
        body: Optional[str] = None,
    ):
        details = {}
        if content_type:
            details["content_type"] = content_type
        if body:
            details["body"] = body
        super().__init__(message=message, code="DECODING_ERROR", details=details)
        self.content_type = content_type
        self.body = body


class ConnectionFailedError(RabbitMQHTTPAPIError):
    """Raised when the request never got a response from the server.

    :param message: Description of the failure
    :param url: Optional URL that was being requested
    """

    def __init__(self, message: str, url: Optional[str] = None):
        details = {}
        if url:
            details["url"] = url
        super().__init__(message=message, code="CONNECTION_FAILED", details=details)
        self.url = url


class RequestTimeoutError(ConnectionFailedError):
    """Raised when a request exceeds the configured transport timeout."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message, url=url)
        self.code = "TIMEOUT_ERROR"
