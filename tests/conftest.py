"""Pytest configuration and shared fixtures."""

import itertools
import json
import sys
from pathlib import Path

import httpx
import pytest
import pytest_asyncio

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from etoro_mcp.gateway import EtoroClient, GatewayConfig, TradingMode  # noqa: E402

TEST_BASE_URL = "https://api.test/api/v1"


class RecordingTransport:
    """httpx MockTransport wrapper that records requests.

    ``routes`` maps (method, path) to a response, or to a callable taking
    the request. Unknown routes answer 404 with a JSON error body.
    """

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.requests: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"message": "no route"})
        if callable(route):
            return route(request)
        return route

    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]

    def last_json(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def request_ids():
    """Deterministic request id factory: req-1, req-2, ..."""
    counter = itertools.count(1)
    return lambda: f"req-{next(counter)}"


class ClientFactory:
    """Builds EtoroClients over RecordingTransports and owns their httpx clients.

    EtoroClient leaves injected clients open, so the factory closes them.
    """

    def __init__(self, request_id_factory):
        self.request_id_factory = request_id_factory
        self.http_clients: list[httpx.AsyncClient] = []

    def __call__(self, routes=None, trading_mode=TradingMode.DEMO, api_key="api-key", user_key="user-key"):
        recorder = RecordingTransport(routes)
        config = GatewayConfig(
            api_key=api_key,
            user_key=user_key,
            trading_mode=trading_mode,
            base_url=TEST_BASE_URL,
        )
        http_client = httpx.AsyncClient(transport=recorder.transport)
        self.http_clients.append(http_client)
        client = EtoroClient(config, http_client=http_client, request_id_factory=self.request_id_factory)
        return client, recorder

    async def aclose(self) -> None:
        for http_client in self.http_clients:
            await http_client.aclose()


@pytest_asyncio.fixture
async def make_client(request_ids):
    """Factory building an EtoroClient over a RecordingTransport."""
    factory = ClientFactory(request_ids)
    yield factory
    await factory.aclose()
