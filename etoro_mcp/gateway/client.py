"""eToro REST API Client.

One authenticated HTTP exchange per call against the eToro public API,
with demo/real routing for the trading namespaces and uniform
classification of the outcome. No retries, no caching: every call
surfaces exactly what the upstream returned.
"""

import json
import logging
from typing import Any, Callable, Optional

import httpx

from etoro_mcp.gateway.config import GatewayConfig, TradingMode
from etoro_mcp.gateway.exceptions import ApiError, TransportError
from etoro_mcp.logging_config import generate_request_id, log_performance

logger = logging.getLogger(__name__)


class EtoroClient:
    """eToro public API client.

    Example:
        async with EtoroClient(GatewayConfig(api_key="...", user_key="...")) as client:
            portfolio = await client.get(client.info_path("/portfolio"))
    """

    def __init__(
        self,
        config: GatewayConfig,
        http_client: Optional[httpx.AsyncClient] = None,
        request_id_factory: Callable[[], str] = generate_request_id,
    ):
        self._config = config
        self._request_id_factory = request_id_factory
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(
            timeout=config.request_timeout,
        )

    @property
    def config(self) -> GatewayConfig:
        return self._config

    @property
    def trading_mode(self) -> TradingMode:
        return self._config.trading_mode

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> "EtoroClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    # ── Routing ──────────────────────────────────────────────────────

    def execution_path(self, sub_path: str) -> str:
        """Trading execution path for the configured mode.

        execution_path("/market-open-orders/by-amount") gives
        "/trading/execution/demo/market-open-orders/by-amount" in demo
        mode and "/trading/execution/market-open-orders/by-amount" in real.
        """
        if self._config.trading_mode == TradingMode.DEMO:
            return f"/trading/execution/demo{sub_path}"
        return f"/trading/execution{sub_path}"

    def info_path(self, sub_path: str) -> str:
        """Trading info path for the configured mode.

        info_path("/portfolio") gives "/trading/info/demo/portfolio" in
        demo mode and "/trading/info/portfolio" in real.
        """
        if self._config.trading_mode == TradingMode.DEMO:
            return f"/trading/info/demo{sub_path}"
        return f"/trading/info{sub_path}"

    # ── Transport ────────────────────────────────────────────────────

    def _build_headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "x-request-id": self._request_id_factory(),
        }
        # eToro's header naming: the user key travels as x-api-key and the
        # API key as x-user-key.
        if self._config.user_key:
            headers["x-api-key"] = self._config.user_key
        if self._config.api_key:
            headers["x-user-key"] = self._config.api_key
        return headers

    @log_performance()
    async def request(
        self,
        path: str,
        method: str = "GET",
        body: Any = None,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Any:
        """Perform one exchange and classify the outcome.

        Args:
            path: Resource path, already routed for trading namespaces.
            method: HTTP method.
            body: JSON-serializable body, sent only when not None.
            params: Query parameters.
            headers: Extra headers, overriding the defaults.

        Returns:
            The decoded JSON body, the raw text when the body is not JSON,
            or None when the body is empty.

        Raises:
            ApiError: The response status was outside 200-299.
            TransportError: The exchange could not complete.
        """
        url = f"{self._config.base_url}{path}"
        request_headers = {**self._build_headers(), **(headers or {})}
        content = json.dumps(body) if body is not None else None

        logger.debug(
            f"{method} {url} request_id={request_headers.get('x-request-id')}"
        )

        try:
            response = await self._http_client.request(
                method,
                url,
                params=params,
                content=content,
                headers=request_headers,
            )
        except httpx.TransportError as e:
            raise TransportError(
                f"{method} {url} failed: {type(e).__name__}: {e}",
                method=method,
                url=url,
            ) from e

        text = response.text

        if not response.is_success:
            error_body: Any = text
            try:
                error_body = json.loads(text)
            except ValueError:
                pass
            raise ApiError(
                f"Request failed: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
                response_body=error_body,
            )

        if not text:
            return None

        try:
            return json.loads(text)
        except ValueError:
            # Some endpoints answer with a plain-text success body.
            return text

    async def get(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        return await self.request(path, method="GET", params=params)

    async def post(
        self,
        path: str,
        body: Any = None,
        params: Optional[dict[str, Any]] = None,
    ) -> Any:
        return await self.request(path, method="POST", body=body, params=params)

    async def put(
        self,
        path: str,
        body: Any = None,
        params: Optional[dict[str, Any]] = None,
    ) -> Any:
        return await self.request(path, method="PUT", body=body, params=params)

    async def delete(self, path: str, body: Any = None) -> Any:
        """DELETE with an optional body; item removal sends an array payload."""
        return await self.request(path, method="DELETE", body=body)
