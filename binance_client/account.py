"""Signed spot account endpoints: balances, orders and trade history."""

from __future__ import annotations

import time
from typing import Any, Mapping

from .api import Spot
from .client import Client
from .config import Config
from .errors import BinanceError
from .orders import (
    OrderRequest,
    OrderSide,
    OrderType,
    QuoteOrderRequest,
    TimeInForce,
    build_order,
    build_quote_quantity_order,
)


def _signed_query(params: Mapping[str, str], recv_window: int) -> str:
    """Join parameters with the receive window and a millisecond timestamp, sorted by name."""
    merged = dict(params)
    merged["recvWindow"] = str(recv_window)
    merged["timestamp"] = str(int(time.time() * 1000))
    return "&".join(f"{key}={value}" for key, value in sorted(merged.items()))


class Account:
    """Access to the signed spot account endpoints.

    Responses are returned as the decoded JSON documents sent by the exchange.
    """

    def __init__(
        self,
        api_key: str | None = None,
        secret_key: str | None = None,
        config: Config | None = None,
    ) -> None:
        config = config or Config()
        self.client = Client(api_key, secret_key, config.rest_api_endpoint)
        self.recv_window = config.recv_window

    def __enter__(self) -> "Account":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.client.close()

    def _query(self, **params: str) -> str:
        return _signed_query(params, self.recv_window)

    def _submit(self, params: Mapping[str, str], test: bool) -> Any:
        request = _signed_query(params, self.recv_window)
        if test:
            self.client.post_signed(Spot.ORDER_TEST, request)
            return None
        return self.client.post_signed(Spot.ORDER, request)

    def _order(self, order: OrderRequest, test: bool = False) -> Any:
        return self._submit(build_order(order), test)

    def _quote_order(self, order: QuoteOrderRequest, test: bool = False) -> Any:
        return self._submit(build_quote_quantity_order(order), test)

    def get_account(self) -> dict[str, Any]:
        """Return the account information, including every balance."""
        return self.client.get_signed(Spot.ACCOUNT, self._query())

    def get_balance(self, asset: str) -> dict[str, Any]:
        """Return the balance of one asset; raise BinanceError if it is absent."""
        account = self.get_account()
        found = next(
            (b for b in account.get("balances", []) if b.get("asset") == asset), None
        )
        if found is None:
            raise BinanceError("Asset not found")
        return found

    def get_open_orders(self, symbol: str) -> list[dict[str, Any]]:
        """Return the open orders for one symbol."""
        return self.client.get_signed(Spot.OPEN_ORDERS, self._query(symbol=symbol))

    def get_all_open_orders(self) -> list[dict[str, Any]]:
        """Return the open orders for every symbol."""
        return self.client.get_signed(Spot.OPEN_ORDERS, self._query())

    def cancel_all_open_orders(self, symbol: str) -> list[dict[str, Any]]:
        """Cancel every open order for one symbol."""
        return self.client.delete_signed(Spot.OPEN_ORDERS, self._query(symbol=symbol))

    def order_status(self, symbol: str, order_id: int) -> dict[str, Any]:
        """Return the state of one order."""
        return self.client.get_signed(
            Spot.ORDER, self._query(symbol=symbol, orderId=str(order_id))
        )

    def test_order_status(self, symbol: str, order_id: int) -> None:
        """Query an order status against the test endpoint."""
        self.client.get_signed(
            Spot.ORDER_TEST, self._query(symbol=symbol, orderId=str(order_id))
        )

    def limit_buy(self, symbol: str, qty: float, price: float) -> dict[str, Any]:
        """Place a good-till-cancelled limit buy order."""
        return self._order(OrderRequest(symbol, qty, OrderSide.BUY, OrderType.LIMIT, price))

    def test_limit_buy(self, symbol: str, qty: float, price: float) -> None:
        """Validate a limit buy order without executing it."""
        self._order(OrderRequest(symbol, qty, OrderSide.BUY, OrderType.LIMIT, price), test=True)

    def limit_sell(self, symbol: str, qty: float, price: float) -> dict[str, Any]:
        """Place a good-till-cancelled limit sell order."""
        return self._order(OrderRequest(symbol, qty, OrderSide.SELL, OrderType.LIMIT, price))

    def test_limit_sell(self, symbol: str, qty: float, price: float) -> None:
        """Validate a limit sell order without executing it."""
        self._order(OrderRequest(symbol, qty, OrderSide.SELL, OrderType.LIMIT, price), test=True)

    def market_buy(self, symbol: str, qty: float) -> dict[str, Any]:
        """Place a market buy order."""
        return self._order(OrderRequest(symbol, qty, OrderSide.BUY, OrderType.MARKET))

    def test_market_buy(self, symbol: str, qty: float) -> None:
        """Validate a market buy order without executing it."""
        self._order(OrderRequest(symbol, qty, OrderSide.BUY, OrderType.MARKET), test=True)

    def market_buy_using_quote_quantity(
        self, symbol: str, quote_order_qty: float
    ) -> dict[str, Any]:
        """Place a market buy order sized in the quote asset."""
        return self._quote_order(
            QuoteOrderRequest(symbol, quote_order_qty, OrderSide.BUY, OrderType.MARKET)
        )

    def test_market_buy_using_quote_quantity(
        self, symbol: str, quote_order_qty: float
    ) -> None:
        """Validate a quote-sized market buy order without executing it."""
        self._quote_order(
            QuoteOrderRequest(symbol, quote_order_qty, OrderSide.BUY, OrderType.MARKET),
            test=True,
        )

    def market_sell(self, symbol: str, qty: float) -> dict[str, Any]:
        """Place a market sell order."""
        return self._order(OrderRequest(symbol, qty, OrderSide.SELL, OrderType.MARKET))

    def test_market_sell(self, symbol: str, qty: float) -> None:
        """Validate a market sell order without executing it."""
        self._order(OrderRequest(symbol, qty, OrderSide.SELL, OrderType.MARKET), test=True)

    def market_sell_using_quote_quantity(
        self, symbol: str, quote_order_qty: float
    ) -> dict[str, Any]:
        """Place a market sell order sized in the quote asset."""
        return self._quote_order(
            QuoteOrderRequest(symbol, quote_order_qty, OrderSide.SELL, OrderType.MARKET)
        )

    def test_market_sell_using_quote_quantity(
        self, symbol: str, quote_order_qty: float
    ) -> None:
        """Validate a quote-sized market sell order without executing it."""
        self._quote_order(
            QuoteOrderRequest(symbol, quote_order_qty, OrderSide.SELL, OrderType.MARKET),
            test=True,
        )

    def _stop_limit(
        self,
        side: OrderSide,
        symbol: str,
        qty: float,
        price: float,
        stop_price: float,
        time_in_force: TimeInForce,
    ) -> OrderRequest:
        return OrderRequest(
            symbol,
            qty,
            side,
            OrderType.STOP_LOSS_LIMIT,
            price,
            stop_price=stop_price,
            time_in_force=TimeInForce(time_in_force),
        )

    def stop_limit_buy_order(
        self, symbol: str, qty: float, price: float, stop_price: float,
        time_in_force: TimeInForce,
    ) -> dict[str, Any]:
        """Place a stop-loss limit buy order."""
        return self._order(
            self._stop_limit(OrderSide.BUY, symbol, qty, price, stop_price, time_in_force)
        )

    def test_stop_limit_buy_order(
        self, symbol: str, qty: float, price: float, stop_price: float,
        time_in_force: TimeInForce,
    ) -> None:
        """Validate a stop-loss limit buy order without executing it."""
        self._order(
            self._stop_limit(OrderSide.BUY, symbol, qty, price, stop_price, time_in_force),
            test=True,
        )

    def stop_limit_sell_order(
        self, symbol: str, qty: float, price: float, stop_price: float,
        time_in_force: TimeInForce,
    ) -> dict[str, Any]:
        """Place a stop-loss limit sell order."""
        return self._order(
            self._stop_limit(OrderSide.SELL, symbol, qty, price, stop_price, time_in_force)
        )

    def test_stop_limit_sell_order(
        self, symbol: str, qty: float, price: float, stop_price: float,
        time_in_force: TimeInForce,
    ) -> None:
        """Validate a stop-loss limit sell order without executing it."""
        self._order(
            self._stop_limit(OrderSide.SELL, symbol, qty, price, stop_price, time_in_force),
            test=True,
        )

    def custom_order(
        self, symbol: str, qty: float, price: float, stop_price: float | None,
        order_side: OrderSide, order_type: OrderType, time_in_force: TimeInForce,
        new_client_order_id: str | None,
    ) -> dict[str, Any]:
        """Place an order with every parameter given explicitly."""
        return self._order(
            OrderRequest(
                symbol, qty, OrderSide(order_side), OrderType(order_type), price,
                stop_price, TimeInForce(time_in_force), new_client_order_id,
            )
        )

    def test_custom_order(
        self, symbol: str, qty: float, price: float, stop_price: float | None,
        order_side: OrderSide, order_type: OrderType, time_in_force: TimeInForce,
        new_client_order_id: str | None,
    ) -> None:
        """Validate a fully specified order without executing it."""
        self._order(
            OrderRequest(
                symbol, qty, OrderSide(order_side), OrderType(order_type), price,
                stop_price, TimeInForce(time_in_force), new_client_order_id,
            ),
            test=True,
        )

    def cancel_order(self, symbol: str, order_id: int) -> dict[str, Any]:
        """Cancel one order by its exchange id."""
        return self.client.delete_signed(
            Spot.ORDER, self._query(symbol=symbol, orderId=str(order_id))
        )

    def cancel_order_with_client_id(
        self, symbol: str, orig_client_order_id: str
    ) -> dict[str, Any]:
        """Cancel one order by the client id it was placed with."""
        return self.client.delete_signed(
            Spot.ORDER,
            self._query(symbol=symbol, origClientOrderId=orig_client_order_id),
        )

    def test_cancel_order(self, symbol: str, order_id: int) -> None:
        """Validate an order cancellation without executing it."""
        self.client.delete_signed(
            Spot.ORDER_TEST, self._query(symbol=symbol, orderId=str(order_id))
        )

    def trade_history(self, symbol: str) -> list[dict[str, Any]]:
        """Return the account's trades for one symbol."""
        return self.client.get_signed(Spot.MY_TRADES, self._query(symbol=symbol))