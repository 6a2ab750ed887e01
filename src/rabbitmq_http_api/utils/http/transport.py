"""Transport adapter resolution and httpx client construction.

The adapter decides how requests reach the server. By default httpx
builds its own connection-pooling transport from the transport options
(``verify``, ``cert``, ``limits``, ...). Callers can pass their own
``httpx.BaseTransport`` instead, which is how tests plug in
``httpx.MockTransport``.
"""

import logging
from typing import Any, Dict, Optional, Type, Union

import httpx

from ...exceptions import ConfigurationError

logger = logging.getLogger(__name__)

AdapterSpec = Union[None, str, httpx.BaseTransport, Type[httpx.BaseTransport]]

ADAPTERS: Dict[str, Type[httpx.BaseTransport]] = {
    "httpx": httpx.HTTPTransport,
    "default": httpx.HTTPTransport,
}


def resolve_adapter(adapter: AdapterSpec) -> Optional[httpx.BaseTransport]:
    """Resolve an adapter spec to a transport instance.

    :param adapter: ``None`` for the httpx default, a registered adapter
        name, a transport instance or a transport class
    :return: Transport instance, or ``None`` to let httpx build its own
    :raises ConfigurationError: If the adapter is not usable
    """
    if adapter is None:
        return None
    if isinstance(adapter, httpx.BaseTransport):
        return adapter
    if isinstance(adapter, str):
        try:
            transport_class = ADAPTERS[adapter]
        except KeyError:
            raise ConfigurationError(
                f"Unknown adapter {adapter!r}; expected one of {sorted(ADAPTERS)}",
                setting="adapter",
            ) from None
        return transport_class()
    if isinstance(adapter, type) and issubclass(adapter, httpx.BaseTransport):
        try:
            return adapter()
        except TypeError as e:
            raise ConfigurationError(
                f"Cannot instantiate adapter {adapter.__name__}: {e}",
                setting="adapter",
            ) from e
    raise ConfigurationError(
        f"Adapter must be an httpx transport or adapter name, got {type(adapter).__name__}",
        setting="adapter",
    )


def build_http_client(
    base_url: str, adapter: AdapterSpec = None, **options: Any
) -> httpx.Client:
    """Create the httpx client a connection sends requests through.

    Redirects are left to the middleware pipeline, so httpx's own
    redirect following is always disabled.

    :param base_url: Base URL resource paths are resolved against
    :param adapter: Transport adapter spec, see :func:`resolve_adapter`
    :param options: Extra ``httpx.Client`` options (timeout, verify, headers, ...)
    :return: Configured client
    :raises ConfigurationError: If httpx rejects the options
    """
    transport = resolve_adapter(adapter)
    client_config: Dict[str, Any] = {**options, "base_url": base_url}
    client_config["follow_redirects"] = False
    if transport is not None:
        client_config["transport"] = transport

    try:
        client = httpx.Client(**client_config)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid transport options: {e}") from e

    logger.debug(
        "Created HTTP client for %s using %s",
        base_url,
        type(transport).__name__ if transport is not None else "default transport",
    )
    return client


def create_timeout(seconds: float, connect: Optional[float] = None) -> httpx.Timeout:
    """Timeout applying ``seconds`` to every phase of a request.

    :param seconds: Read, write and pool timeout in seconds
    :param connect: Connect timeout; defaults to ``seconds``
    :return: httpx timeout
    :raises ConfigurationError: If a timeout is not greater than zero
    """
    connect = seconds if connect is None else connect
    if seconds <= 0 or connect <= 0:
        raise ConfigurationError("Timeouts must be greater than zero", setting="timeout")
    return httpx.Timeout(seconds, connect=connect)
