import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rabbitmq_http_api import Client  # noqa: E402


def pytest_configure(config):
    # Add custom markers for test organization
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


@pytest.fixture(autouse=True)
def clean_env_vars(monkeypatch):
    """Keep the developer's RABBITMQ_HTTP_* variables out of the tests."""
    for name in (
        "RABBITMQ_HTTP_ENDPOINT",
        "RABBITMQ_HTTP_USERNAME",
        "RABBITMQ_HTTP_PASSWORD",
        "RABBITMQ_HTTP_TIMEOUT",
        "RABBITMQ_HTTP_VERIFY_TLS",
    ):
        monkeypatch.delenv(name, raising=False)
    yield


class FakeManagementAPI:
    """In-memory stand-in for the management API, used via httpx.MockTransport.

    Routes are keyed by method and raw (still percent-encoded) path, so
    tests can assert on exactly what went over the wire.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._routes: Dict[Tuple[str, str], httpx.Response] = {}

    def add(
        self,
        method: str,
        path: str,
        status: int = 200,
        json: Any = None,
        headers: Optional[Dict[str, str]] = None,
        content: Optional[bytes] = None,
    ) -> None:
        if json is not None:
            response = httpx.Response(status, json=json, headers=headers)
        else:
            response = httpx.Response(status, content=content or b"", headers=headers)
        self._routes[(method, path)] = response

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        path = request.url.raw_path.decode("ascii").split("?", 1)[0]
        route = self._routes.get((request.method, path))
        if route is None:
            return httpx.Response(
                404, json={"error": "Object Not Found", "reason": "Not Found"}
            )
        return httpx.Response(
            route.status_code, headers=route.headers, content=route.content
        )

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_raw_path(self) -> str:
        return self.last.url.raw_path.decode("ascii")

    @property
    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def fake_api():
    return FakeManagementAPI()


@pytest.fixture
def client(fake_api):
    c = Client("http://localhost:15672", adapter=httpx.MockTransport(fake_api))
    yield c
    c.close()
