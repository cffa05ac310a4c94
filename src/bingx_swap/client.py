"""Async BingX perpetual swap client with signed query strings."""

from __future__ import annotations

import time
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from bingx_swap.constants import (
    API_KEY_HEADER,
    DEFAULT_BASE_URL,
    PATH_CANCEL_ALL_ORDERS,
    PATH_CLOSE_ALL_POSITIONS,
    PATH_CONTRACTS,
    PATH_MARGIN_TYPE,
    PATH_PLACE_ORDER,
    PATH_SET_LEVERAGE,
    PATH_TICKER_PRICE,
)
from bingx_swap.errors import ConfigurationError, DecodeError, ProtocolError, TransportError
from bingx_swap.logging import get_logger, new_request_id
from bingx_swap.models import (
    CancelAllOrdersRequest,
    CancelAllOrdersResponse,
    CloseAllPositionsRequest,
    CloseAllPositionsResponse,
    GetContractsResponse,
    ListSymbolsResponse,
    PlaceOrderRequest,
    PlaceOrderResponse,
    SetLeverageRequest,
    SetLeverageResponse,
    SetMarginTypeRequest,
    SetMarginTypeResponse,
)
from bingx_swap.signing.params import signed_query, to_params

if TYPE_CHECKING:
    from types import TracebackType

    from bingx_swap.settings import Settings

__all__ = ["BingXClient"]

logger = get_logger(component="bingx_swap.client")

ResponseT = TypeVar("ResponseT", bound=BaseModel)


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class BingXClient:
    """Signed REST client for the BingX perpetual swap API.

    Credentials are fixed at construction. The instance holds no other
    mutable state, so one client can be shared by concurrent tasks.

    *timeout* configures the httpx client created here. An injected
    *http_client* keeps its own timeout and is never closed by this class.
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
        clock: Callable[[], int] | None = None,
    ) -> None:
        if not api_key or not api_secret:
            raise ConfigurationError("BingX API key and secret are both required")
        self._api_key = api_key
        self._api_secret = api_secret
        self._base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self._clock = clock or _now_ms
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> BingXClient:
        """Build a client from environment-derived settings."""
        return cls(
            settings.api_key,
            settings.api_secret,
            base_url=settings.base_url,
            http_client=http_client,
            timeout=settings.timeout,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    # ── Trading operations ──────────────────────────────

    async def place_order(self, req: PlaceOrderRequest) -> PlaceOrderResponse:
        """Place a new order."""
        return await self.request("POST", PATH_PLACE_ORDER, req, PlaceOrderResponse)

    async def cancel_all_orders(self, req: CancelAllOrdersRequest) -> CancelAllOrdersResponse:
        """Cancel every open order for a symbol."""
        return await self.request("DELETE", PATH_CANCEL_ALL_ORDERS, req, CancelAllOrdersResponse)

    async def set_leverage(self, req: SetLeverageRequest) -> SetLeverageResponse:
        return await self.request("POST", PATH_SET_LEVERAGE, req, SetLeverageResponse)

    async def list_symbols(self) -> ListSymbolsResponse:
        """Fetch the latest price of every symbol."""
        return await self.request("GET", PATH_TICKER_PRICE, None, ListSymbolsResponse)

    async def get_contracts(self) -> GetContractsResponse:
        """Fetch the static description of every perpetual contract."""
        return await self.request("GET", PATH_CONTRACTS, None, GetContractsResponse)

    async def close_all_positions(self, req: CloseAllPositionsRequest) -> CloseAllPositionsResponse:
        return await self.request("POST", PATH_CLOSE_ALL_POSITIONS, req, CloseAllPositionsResponse)

    async def set_margin_type(self, req: SetMarginTypeRequest) -> SetMarginTypeResponse:
        return await self.request("POST", PATH_MARGIN_TYPE, req, SetMarginTypeResponse)

    # ── Signed transport ────────────────────────────────

    def build_query(self, params: Mapping[str, Any]) -> str:
        """Stamp, sign and encode *params*; return the final query string."""
        return signed_query(params, self._api_secret, self._clock()).query

    async def request(
        self,
        method: str,
        path: str,
        request: BaseModel | Mapping[str, Any] | None,
        response_model: type[ResponseT],
    ) -> ResponseT:
        """Send one signed request and decode the 200 body into *response_model*.

        All parameters travel in the query string; the body is always empty.

        Raises:
            TransportError: the HTTP exchange itself failed.
            ProtocolError: the venue answered with a non-200 status.
            DecodeError: the 200 body is not the expected JSON shape.
        """
        new_request_id()
        params = to_params(request)
        query = self.build_query(params)
        url = f"{self._base_url}{path}?{query}"

        logger.debug("bingx_request", method=method, path=path, params=sorted(params))
        try:
            resp = await self._client.request(method, url, headers={API_KEY_HEADER: self._api_key})
        except httpx.HTTPError as exc:
            logger.warning("bingx_transport_error", method=method, path=path, error=str(exc))
            raise TransportError(f"{method} {path} failed: {exc}") from exc

        if resp.status_code != httpx.codes.OK:
            logger.warning("bingx_unexpected_status", method=method, path=path, status=resp.status_code)
            raise ProtocolError(resp.status_code, resp.text)

        try:
            return response_model.model_validate_json(resp.content)
        except ValidationError as exc:
            logger.warning("bingx_decode_error", method=method, path=path, errors=exc.error_count())
            raise DecodeError(f"{method} {path}: invalid response body: {exc}", resp.text) from exc

    # ── Lifecycle ───────────────────────────────────────

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> BingXClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()
