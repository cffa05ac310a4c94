"""Request and response shapes for the BingX perpetual swap endpoints.

Requests use snake_case attributes and serialise to the venue's camelCase
names. A field left at its zero value is treated as not provided and never
reaches the query string.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

__all__ = [
    "CancelAllOrdersRequest",
    "CancelAllOrdersResponse",
    "CloseAllPositionsData",
    "CloseAllPositionsRequest",
    "CloseAllPositionsResponse",
    "Contract",
    "GetContractsResponse",
    "ListSymbolsResponse",
    "OrderData",
    "PlaceOrderRequest",
    "PlaceOrderResponse",
    "SetLeverageRequest",
    "SetLeverageResponse",
    "SetMarginTypeRequest",
    "SetMarginTypeResponse",
    "TickerPrice",
]


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class _Request(_WireModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class _Response(_WireModel):
    code: int = 0
    msg: str = ""


# ── Requests ────────────────────────────────────────────


class PlaceOrderRequest(_Request):
    """Parameters for POST /openApi/swap/v2/trade/order."""

    symbol: str  # e.g. "BTC-USDT"
    type: str  # MARKET, LIMIT, STOP_MARKET, ...
    side: str  # BUY | SELL
    position_side: str = ""  # LONG | SHORT, hedge mode only
    reduce_only: str = ""  # "true" | "false"
    price: float = 0.0
    quantity: float = 0.0
    stop_price: float = 0.0
    price_rate: float = 0.0  # trailing stop rate
    # JSON sub-documents, either pre-serialised or as a mapping
    stop_loss: str | dict[str, Any] = ""
    take_profit: str | dict[str, Any] = ""
    working_type: str = ""  # MARK_PRICE | CONTRACT_PRICE
    client_order_id: str = ""
    recv_window: int = 0  # milliseconds
    time_in_force: str = ""  # GTC | IOC | FOK | GTX
    close_position: str = ""
    activation_price: float = 0.0
    stop_guaranteed: str = ""  # "TRUE" | "FALSE"
    position_id: int = 0


class CancelAllOrdersRequest(_Request):
    symbol: str
    recv_window: int = 0


class SetLeverageRequest(_Request):
    symbol: str
    side: str  # LONG | SHORT
    leverage: int


class CloseAllPositionsRequest(_Request):
    symbol: str
    recv_window: int = 0


class SetMarginTypeRequest(_Request):
    symbol: str
    margin_type: str  # CROSSED | ISOLATED
    recv_window: int = 0


# ── Responses ───────────────────────────────────────────


class OrderData(_WireModel):
    symbol: str = ""
    side: str = ""
    type: str = ""
    position_side: str = ""
    reduce_only: str = ""
    order_id: str = ""
    working_type: str = ""
    client_order_id: str = ""
    stop_guaranteed: str = ""
    status: str = ""  # NEW, PARTIALLY_FILLED, FILLED, CANCELED, REJECTED, EXPIRED
    avg_price: str = ""
    executed_qty: str = ""


class PlaceOrderResponse(_Response):
    data: OrderData | None = None


class CancelAllOrdersResponse(_Response):
    pass


class SetLeverageResponse(_Response):
    pass


class TickerPrice(_WireModel):
    symbol: str = ""
    price: str = ""
    time: int = 0  # milliseconds


class ListSymbolsResponse(_Response):
    data: list[TickerPrice] | None = None


class Contract(_WireModel):
    """Static description of one perpetual contract."""

    contract_id: str = ""
    symbol: str = ""
    quantity_precision: int = 0
    price_precision: int = 0
    taker_fee_rate: float = 0.0
    maker_fee_rate: float = 0.0
    trade_min_quantity: float = 0.0
    trade_min_usdt: float = Field(default=0.0, alias="tradeMinUSDT")
    currency: str = ""
    asset: str = ""
    status: int = 0  # 0 offline, 1 online
    api_state_open: str = ""
    api_state_close: str = ""
    ensure_trigger: bool = False
    trigger_fee_rate: str = ""
    broker_state: bool = False
    launch_time: int = 0
    maintain_time: int = 0
    off_time: int = 0
    display_name: str = ""


class GetContractsResponse(_Response):
    data: list[Contract] | None = None


class CloseAllPositionsData(_WireModel):
    success: list[int] | None = None  # order ids that were closed
    failed: list[Any] | None = None


class CloseAllPositionsResponse(_Response):
    data: CloseAllPositionsData | None = None


class SetMarginTypeResponse(_Response):
    pass
