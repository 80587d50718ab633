import pytest

from binance_client.orders import (
    OrderRequest,
    OrderSide,
    OrderType,
    QuoteOrderRequest,
    TimeInForce,
    build_order,
    build_quote_quantity_order,
    format_number,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (1, "1"),
        (1.0, "1"),
        (0.1, "0.1"),
        (0.09, "0.09"),
        (0.002, "0.002"),
        (10.5, "10.5"),
        (7.4, "7.4"),
        (0.0000001, "0.0000001"),
        (9223372036854776000.0, "9223372036854776000"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_format_number_round_trips():
    for value in (0.1, 4.000001, 12345.678, 0.00000123):
        assert float(format_number(value)) == value
        assert "e" not in format_number(value).lower()


def test_enum_values():
    assert OrderType("STOP_LOSS_LIMIT") is OrderType.STOP_LOSS_LIMIT
    assert str(OrderSide("SELL")) == "SELL"
    assert TimeInForce("IOC") is TimeInForce.IOC
    assert [t.value for t in TimeInForce] == ["GTC", "IOC", "FOK"]


def _query(params):
    return "&".join(f"{k}={v}" for k, v in params.items())


@pytest.mark.parametrize("side", [OrderSide.BUY, OrderSide.SELL])
def test_limit_order(side):
    params = build_order(
        OrderRequest("LTCBTC", 1, side, OrderType.LIMIT, price=0.1)
    )
    assert _query(params) == (
        f"price=0.1&quantity=1&side={side.value}&symbol=LTCBTC&timeInForce=GTC&type=LIMIT"
    )


@pytest.mark.parametrize("side", [OrderSide.BUY, OrderSide.SELL])
def test_market_order_omits_price(side):
    params = build_order(OrderRequest("LTCBTC", 1, side, OrderType.MARKET))
    assert _query(params) == f"quantity=1&side={side.value}&symbol=LTCBTC&type=MARKET"


@pytest.mark.parametrize("side", [OrderSide.BUY, OrderSide.SELL])
def test_stop_limit_order(side):
    params = build_order(
        OrderRequest(
            "LTCBTC",
            1,
            side,
            OrderType.STOP_LOSS_LIMIT,
            price=0.1,
            stop_price=0.09,
            time_in_force=TimeInForce.GTC,
        )
    )
    assert _query(params) == (
        f"price=0.1&quantity=1&side={side.value}&stopPrice=0.09&symbol=LTCBTC"
        "&timeInForce=GTC&type=STOP_LOSS_LIMIT"
    )


def test_custom_order_with_client_id():
    params = build_order(
        OrderRequest(
            "LTCBTC",
            1,
            OrderSide.BUY,
            OrderType.MARKET,
            price=0.1,
            stop_price=None,
            time_in_force=TimeInForce.GTC,
            new_client_order_id="6gCrw2kRUAF9CvJDGP16IP",
        )
    )
    assert _query(params) == (
        "newClientOrderId=6gCrw2kRUAF9CvJDGP16IP&price=0.1&quantity=1&side=BUY"
        "&symbol=LTCBTC&timeInForce=GTC&type=MARKET"
    )


def test_custom_order_without_client_id():
    params = build_order(
        OrderRequest("LTCBTC", 1, OrderSide.BUY, OrderType.MARKET, price=0.1)
    )
    assert "newClientOrderId" not in params
    assert params["timeInForce"] == "GTC"


@pytest.mark.parametrize("side", [OrderSide.BUY, OrderSide.SELL])
def test_quote_quantity_order(side):
    params = build_quote_quantity_order(
        QuoteOrderRequest("BNBBTC", 0.002, side, OrderType.MARKET)
    )
    assert _query(params) == f"quoteOrderQty=0.002&side={side.value}&symbol=BNBBTC&type=MARKET"


def test_quote_quantity_order_with_price_and_id():
    params = build_quote_quantity_order(
        QuoteOrderRequest(
            "BNBBTC",
            0.002,
            OrderSide.BUY,
            OrderType.LIMIT,
            price=0.1,
            time_in_force=TimeInForce.IOC,
            new_client_order_id="myOrder1",
        )
    )
    assert params["price"] == "0.1"
    assert params["timeInForce"] == "IOC"
    assert params["newClientOrderId"] == "myOrder1"
    assert list(params) == sorted(params)


def test_time_in_force_respected():
    params = build_order(
        OrderRequest(
            "LTCBTC", 2, OrderSide.SELL, OrderType.LIMIT, price=0.5,
            time_in_force=TimeInForce.FOK,
        )
    )
    assert params["timeInForce"] == "FOK"
    assert params["quantity"] == "2"