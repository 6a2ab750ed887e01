"""Unit tests for transport adapter resolution and client construction."""

import httpx
import pytest

from rabbitmq_http_api import Client
from rabbitmq_http_api.exceptions import ConfigurationError
from rabbitmq_http_api.utils.http import (
    build_http_client,
    create_timeout,
    resolve_adapter,
)


def _ok(request):
    return httpx.Response(200, json={})


@pytest.mark.unit
class TestResolveAdapter:
    def test_none_lets_httpx_choose(self):
        assert resolve_adapter(None) is None

    def test_transport_instance_is_used_as_is(self):
        transport = httpx.MockTransport(_ok)
        assert resolve_adapter(transport) is transport

    def test_named_adapter(self):
        transport = resolve_adapter("httpx")
        assert isinstance(transport, httpx.HTTPTransport)
        transport.close()

    def test_transport_class_is_instantiated(self):
        transport = resolve_adapter(httpx.HTTPTransport)
        assert isinstance(transport, httpx.HTTPTransport)
        transport.close()

    def test_unknown_name_raises(self):
        with pytest.raises(ConfigurationError) as exc_info:
            resolve_adapter("net_http")
        assert exc_info.value.setting == "adapter"

    def test_unusable_object_raises(self):
        with pytest.raises(ConfigurationError):
            resolve_adapter(object())

    def test_transport_class_needing_arguments_raises(self):
        with pytest.raises(ConfigurationError):
            resolve_adapter(httpx.MockTransport)


@pytest.mark.unit
class TestBuildHTTPClient:
    def test_base_url_and_redirects(self):
        client = build_http_client(
            "http://localhost:15672/api", adapter=httpx.MockTransport(_ok)
        )
        assert str(client.base_url) == "http://localhost:15672/api/"
        assert client.follow_redirects is False
        client.close()

    def test_passes_transport_options(self):
        client = build_http_client(
            "http://localhost:15672/api",
            adapter=httpx.MockTransport(_ok),
            timeout=create_timeout(10.0, connect=1.0),
            headers={"X-Trace": "1"},
        )
        assert client.timeout.connect == 1.0
        assert client.headers["x-trace"] == "1"
        client.close()

    def test_unknown_option_raises_configuration_error(self):
        with pytest.raises(ConfigurationError):
            build_http_client("http://localhost:15672/api", no_such_option=True)

    def test_client_constructor_surfaces_bad_adapter(self):
        with pytest.raises(ConfigurationError):
            Client("http://localhost:15672", adapter="excon")


@pytest.mark.unit
def test_create_timeout_applies_to_every_phase():
    timeout = create_timeout(2.5)
    assert timeout.connect == 2.5
    assert timeout.read == 2.5
    assert timeout.write == 2.5
    assert timeout.pool == 2.5


@pytest.mark.unit
def test_create_timeout_separate_connect():
    timeout = create_timeout(30.0, connect=5.0)
    assert timeout.connect == 5.0
    assert timeout.read == 30.0


@pytest.mark.unit
@pytest.mark.parametrize("seconds, connect", [(0, None), (-1.0, None), (5.0, 0)])
def test_create_timeout_rejects_non_positive(seconds, connect):
    with pytest.raises(ConfigurationError) as exc_info:
        create_timeout(seconds, connect=connect)
    assert exc_info.value.details["setting"] == "timeout"
