"""Order kinds and the request parameters sent for spot orders."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class OrderType(str, Enum):
    LIMIT = "LIMIT"
    MARKET = "MARKET"
    STOP_LOSS_LIMIT = "STOP_LOSS_LIMIT"

    def __str__(self) -> str:
        return self.value


class OrderSide(str, Enum):
    BUY = "BUY"
    SELL = "SELL"

    def __str__(self) -> str:
        return self.value


class TimeInForce(str, Enum):
    GTC = "GTC"
    IOC = "IOC"
    FOK = "FOK"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class OrderRequest:
    """An order expressed in base-asset quantity."""

    symbol: str
    qty: float
    order_side: OrderSide
    order_type: OrderType
    price: float = 0.0
    stop_price: float | None = None
    time_in_force: TimeInForce = TimeInForce.GTC
    new_client_order_id: str | None = None


@dataclass(frozen=True)
class QuoteOrderRequest:
    """An order expressed in quote-asset quantity."""

    symbol: str
    quote_order_qty: float
    order_side: OrderSide
    order_type: OrderType
    price: float = 0.0
    time_in_force: TimeInForce = TimeInForce.GTC
    new_client_order_id: str | None = None


def format_number(value: float) -> str:
    """Render a number as plain decimal text with the shortest exact digits."""
    number = float(value)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    text = format(Decimal(repr(number)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _finish(params: dict[str, str], price: float, time_in_force: TimeInForce,
            new_client_order_id: str | None) -> dict[str, str]:
    if float(price) != 0.0:
        params["price"] = format_number(price)
        params["timeInForce"] = TimeInForce(time_in_force).value
    if new_client_order_id is not None:
        params["newClientOrderId"] = new_client_order_id
    return dict(sorted(params.items()))


def build_order(order: OrderRequest) -> dict[str, str]:
    """Return the request parameters for an order, sorted by name."""
    params = {
        "symbol": order.symbol,
        "side": OrderSide(order.order_side).value,
        "type": OrderType(order.order_type).value,
        "quantity": format_number(order.qty),
    }
    if order.stop_price is not None:
        params["stopPrice"] = format_number(order.stop_price)
    return _finish(params, order.price, order.time_in_force, order.new_client_order_id)


def build_quote_quantity_order(order: QuoteOrderRequest) -> dict[str, str]:
    """Return the request parameters for a quote-quantity order, sorted by name."""
    params = {
        "symbol": order.symbol,
        "side": OrderSide(order.order_side).value,
        "type": OrderType(order.order_type).value,
        "quoteOrderQty": format_number(order.quote_order_qty),
    }
    return _finish(params, order.price, order.time_in_force, order.new_client_order_id)