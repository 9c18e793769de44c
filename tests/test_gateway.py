"""Tests for the eToro gateway client.

Routing, authentication headers, outcome classification and the
exception hierarchy.
"""

import httpx
import pytest

from etoro_mcp.gateway import (
    ApiError,
    ConfigError,
    EtoroClient,
    EtoroError,
    GatewayConfig,
    TradingMode,
    TransportError,
)
from etoro_mcp.gateway.exceptions import (
    ErrorCode,
    NotFoundError,
    PositionNotFoundError,
    UserNotFoundError,
)

from conftest import ClientFactory


# ═══════════════════════════════════════════════════════════════════════
# Test: Configuration
# ═══════════════════════════════════════════════════════════════════════


class TestGatewayConfig:

    def test_defaults(self):
        config = GatewayConfig()
        assert config.api_key == ""
        assert config.user_key == ""
        assert config.trading_mode == TradingMode.DEMO
        assert config.base_url == "https://public-api.etoro.com/api/v1"
        assert config.request_timeout == 30.0

    def test_frozen(self):
        config = GatewayConfig()
        with pytest.raises(AttributeError):
            config.api_key = "changed"

    def test_parse_mode(self):
        assert TradingMode.parse("demo") == TradingMode.DEMO
        assert TradingMode.parse("real") == TradingMode.REAL

    def test_parse_invalid_mode(self):
        with pytest.raises(ConfigError, match="Invalid trading mode: paper"):
            TradingMode.parse("paper")


# ═══════════════════════════════════════════════════════════════════════
# Test: Routing
# ═══════════════════════════════════════════════════════════════════════


class TestRouting:

    def test_demo_paths(self):
        client = EtoroClient(GatewayConfig(trading_mode=TradingMode.DEMO))
        assert client.execution_path("/market-open-orders/by-amount") == (
            "/trading/execution/demo/market-open-orders/by-amount"
        )
        assert client.info_path("/portfolio") == "/trading/info/demo/portfolio"

    def test_real_paths(self):
        client = EtoroClient(GatewayConfig(trading_mode=TradingMode.REAL))
        assert client.execution_path("/market-open-orders/by-amount") == (
            "/trading/execution/market-open-orders/by-amount"
        )
        assert client.info_path("/portfolio") == "/trading/info/portfolio"

    def test_trading_mode_property(self):
        client = EtoroClient(GatewayConfig(trading_mode=TradingMode.REAL))
        assert client.trading_mode == TradingMode.REAL


# ═══════════════════════════════════════════════════════════════════════
# Test: Headers
# ═══════════════════════════════════════════════════════════════════════


class TestHeaders:

    @pytest.mark.asyncio
    async def test_key_headers(self, make_client):
        client, recorder = make_client({("GET", "/api/v1/watchlists"): httpx.Response(200, json={})})
        await client.get("/watchlists")
        headers = recorder.requests[0].headers
        assert headers["x-api-key"] == "user-key"
        assert headers["x-user-key"] == "api-key"
        assert headers["x-request-id"] == "req-1"
        assert headers["content-type"] == "application/json"

    @pytest.mark.asyncio
    async def test_fresh_request_id_per_call(self, make_client):
        client, recorder = make_client({("GET", "/api/v1/watchlists"): httpx.Response(200, json={})})
        await client.get("/watchlists")
        await client.get("/watchlists")
        ids = [r.headers["x-request-id"] for r in recorder.requests]
        assert ids == ["req-1", "req-2"]

    @pytest.mark.asyncio
    async def test_empty_keys_omitted(self, make_client):
        client, recorder = make_client(
            {("GET", "/api/v1/watchlists"): httpx.Response(200, json={})},
            api_key="",
            user_key="",
        )
        await client.get("/watchlists")
        headers = recorder.requests[0].headers
        assert "x-api-key" not in headers
        assert "x-user-key" not in headers

    @pytest.mark.asyncio
    async def test_caller_headers_override(self, make_client):
        client, recorder = make_client({("GET", "/api/v1/watchlists"): httpx.Response(200, json={})})
        await client.request("/watchlists", headers={"x-request-id": "custom"})
        assert recorder.requests[0].headers["x-request-id"] == "custom"


# ═══════════════════════════════════════════════════════════════════════
# Test: Outcome classification
# ═══════════════════════════════════════════════════════════════════════


class TestRequest:

    @pytest.mark.asyncio
    async def test_json_success(self, make_client):
        client, _ = make_client(
            {("GET", "/api/v1/market-data/exchanges"): httpx.Response(200, json={"exchanges": [1]})}
        )
        assert await client.get("/market-data/exchanges") == {"exchanges": [1]}

    @pytest.mark.asyncio
    async def test_query_params(self, make_client):
        client, recorder = make_client(
            {("GET", "/api/v1/market-data/search"): httpx.Response(200, json={})}
        )
        await client.get("/market-data/search", params={"searchText": "apple", "pageSize": 10})
        params = recorder.requests[0].url.params
        assert params["searchText"] == "apple"
        assert params["pageSize"] == "10"

    @pytest.mark.asyncio
    async def test_empty_body_is_none(self, make_client):
        client, _ = make_client({("DELETE", "/api/v1/watchlists/5"): httpx.Response(204)})
        assert await client.delete("/watchlists/5") is None

    @pytest.mark.asyncio
    async def test_plain_text_success(self, make_client):
        client, _ = make_client({("POST", "/api/v1/watchlists"): httpx.Response(200, text="Created")})
        assert await client.post("/watchlists", params={"name": "Tech"}) == "Created"

    @pytest.mark.asyncio
    async def test_get_sends_no_body(self, make_client):
        client, recorder = make_client({("GET", "/api/v1/curated-lists"): httpx.Response(200, json=[])})
        await client.get("/curated-lists")
        assert recorder.requests[0].content == b""

    @pytest.mark.asyncio
    async def test_delete_with_array_body(self, make_client):
        client, recorder = make_client({("DELETE", "/api/v1/watchlists/5/items"): httpx.Response(200)})
        await client.delete("/watchlists/5/items", [{"ItemId": 100, "ItemType": "Instrument"}])
        assert recorder.last_json() == [{"ItemId": 100, "ItemType": "Instrument"}]

    @pytest.mark.asyncio
    async def test_error_with_json_body(self, make_client):
        client, _ = make_client(
            {("GET", "/api/v1/watchlists"): httpx.Response(401, json={"errorCode": "Unauthorized"})}
        )
        with pytest.raises(ApiError) as exc_info:
            await client.get("/watchlists")
        err = exc_info.value
        assert err.status_code == 401
        assert err.response_body == {"errorCode": "Unauthorized"}
        assert err.message == "Request failed: 401 Unauthorized"
        assert err.error_code == ErrorCode.API_ERROR

    @pytest.mark.asyncio
    async def test_error_with_text_body(self, make_client):
        client, _ = make_client(
            {("GET", "/api/v1/watchlists"): httpx.Response(502, text="<html>Bad Gateway</html>")}
        )
        with pytest.raises(ApiError) as exc_info:
            await client.get("/watchlists")
        assert exc_info.value.status_code == 502
        assert exc_info.value.response_body == "<html>Bad Gateway</html>"

    @pytest.mark.asyncio
    async def test_transport_failure(self, make_client):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        client, _ = make_client({("GET", "/api/v1/watchlists"): refuse})
        with pytest.raises(TransportError) as exc_info:
            await client.get("/watchlists")
        err = exc_info.value
        assert err.method == "GET"
        assert err.url == "https://api.test/api/v1/watchlists"
        assert isinstance(err, EtoroError)

    @pytest.mark.asyncio
    async def test_owned_http_client_closed(self):
        client = EtoroClient(GatewayConfig())
        async with client:
            pass
        assert client._http_client.is_closed

    @pytest.mark.asyncio
    async def test_injected_http_client_left_open(self, make_client):
        client, _ = make_client()
        await client.aclose()
        assert not client._http_client.is_closed

    @pytest.mark.asyncio
    async def test_factory_closes_injected_clients(self):
        factory = ClientFactory(lambda: "req")
        client, _ = factory()
        await client.aclose()
        await factory.aclose()
        assert client._http_client.is_closed


# ═══════════════════════════════════════════════════════════════════════
# Test: Exceptions
# ═══════════════════════════════════════════════════════════════════════


class TestExceptions:

    def test_user_not_found(self):
        err = UserNotFoundError("ghost")
        assert str(err) == "User ghost not found"
        assert err.error_code == ErrorCode.USER_NOT_FOUND
        assert err.resource_type == "user"
        assert err.details == [{"resource_type": "user", "resource_id": "ghost"}]
        assert isinstance(err, NotFoundError)

    def test_position_not_found(self):
        err = PositionNotFoundError(42)
        assert str(err) == "Position 42 not found in portfolio"
        assert err.resource_id == "42"
        assert err.error_code == ErrorCode.POSITION_NOT_FOUND

    def test_config_error_code(self):
        assert ConfigError("bad").error_code == ErrorCode.CONFIG_ERROR
