"""BingX perpetual swap wire constants."""

from __future__ import annotations

DEFAULT_BASE_URL = "https://open-api.bingx.com"
API_KEY_HEADER = "X-BX-APIKEY"

# ── Endpoints ───────────────────────────────────────────

PATH_PLACE_ORDER = "/openApi/swap/v2/trade/order"
PATH_CANCEL_ALL_ORDERS = "/openApi/swap/v2/trade/allOpenOrders"
PATH_SET_LEVERAGE = "/openApi/swap/v2/trade/leverage"
PATH_TICKER_PRICE = "/openApi/swap/v1/ticker/price"
PATH_CONTRACTS = "/openApi/swap/v2/quote/contracts"
PATH_CLOSE_ALL_POSITIONS = "/openApi/swap/v2/trade/closeAllPositions"
PATH_MARGIN_TYPE = "/openApi/swap/v2/trade/marginType"

# ── Order types ─────────────────────────────────────────

ORDER_TYPE_MARKET = "MARKET"
ORDER_TYPE_LIMIT = "LIMIT"
ORDER_TYPE_STOP_MARKET = "STOP_MARKET"
ORDER_TYPE_STOP = "STOP"
ORDER_TYPE_TAKE_PROFIT_MARKET = "TAKE_PROFIT_MARKET"
ORDER_TYPE_TAKE_PROFIT = "TAKE_PROFIT"
ORDER_TYPE_TRIGGER_LIMIT = "TRIGGER_LIMIT"
ORDER_TYPE_TRIGGER_MARKET = "TRIGGER_MARKET"

SIDE_BUY = "BUY"
SIDE_SELL = "SELL"

POSITION_SIDE_LONG = "LONG"
POSITION_SIDE_SHORT = "SHORT"

WORKING_TYPE_MARK_PRICE = "MARK_PRICE"  # mark price, resists manipulation
WORKING_TYPE_CONTRACT_PRICE = "CONTRACT_PRICE"  # last traded price

TIME_IN_FORCE_GTC = "GTC"
TIME_IN_FORCE_IOC = "IOC"
TIME_IN_FORCE_FOK = "FOK"
TIME_IN_FORCE_GTX = "GTX"  # post only

ORDER_STATUS_NEW = "NEW"
ORDER_STATUS_PARTIALLY_FILLED = "PARTIALLY_FILLED"
ORDER_STATUS_FILLED = "FILLED"
ORDER_STATUS_CANCELED = "CANCELED"
ORDER_STATUS_REJECTED = "REJECTED"
ORDER_STATUS_EXPIRED = "EXPIRED"

CONTRACT_STATUS_OFFLINE = 0
CONTRACT_STATUS_ONLINE = 1

MARGIN_TYPE_CROSSED = "CROSSED"
MARGIN_TYPE_ISOLATED = "ISOLATED"

# Flags the venue takes as strings, not JSON booleans
BOOL_TRUE = "true"
BOOL_FALSE = "false"
STOP_GUARANTEED_TRUE = "TRUE"
STOP_GUARANTEED_FALSE = "FALSE"
