"""HTTP utilities public API (barrel module).

This package provides:
- Endpoint URL parsing and credential resolution
- Path segment encoding
- The request/response middleware pipeline
- The connection that ties an httpx client to the pipeline
- Transport adapter resolution and the timeout helper

Recommended import pattern for consumers:
    from rabbitmq_http_api.utils.http import open_connection, encode_segment
"""

from .connection import MAX_REDIRECTS, Connection, open_connection
from .endpoint import Endpoint, parse_endpoint
from .middleware import (
    BasicAuth,
    FollowRedirects,
    JSONResponse,
    Middleware,
    Pipeline,
    RaiseError,
)
from .paths import build_path, encode_segment
from .response import HTTPResponse
from .transport import ADAPTERS, build_http_client, create_timeout, resolve_adapter

__all__ = [
    "ADAPTERS",
    "MAX_REDIRECTS",
    "BasicAuth",
    "Connection",
    "Endpoint",
    "FollowRedirects",
    "HTTPResponse",
    "JSONResponse",
    "Middleware",
    "Pipeline",
    "RaiseError",
    "build_http_client",
    "build_path",
    "create_timeout",
    "encode_segment",
    "open_connection",
    "parse_endpoint",
    "resolve_adapter",
]
