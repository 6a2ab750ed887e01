"""RabbitMQ HTTP API client package.

This package provides a synchronous client for the RabbitMQ management
plugin HTTP API. Each client method maps to one management API resource
and returns the decoded JSON response as dynamic :class:`Resource` records.

:var __version__: Current package version
:type __version__: str
"""

from .client import Client, connect
from .exceptions import (
    ConfigurationError,
    ConnectionFailedError,
    DecodingError,
    HTTPError,
    NotFoundError,
    RabbitMQHTTPAPIError,
    RedirectLimitError,
    RequestTimeoutError,
)
from .models import Resource

__version__ = "0.1.0"

__all__ = [
    "Client",
    "connect",
    "Resource",
    "RabbitMQHTTPAPIError",
    "ConfigurationError",
    "ConnectionFailedError",
    "DecodingError",
    "HTTPError",
    "NotFoundError",
    "RedirectLimitError",
    "RequestTimeoutError",
]
