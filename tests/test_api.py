import pytest

from binance_client.api import Futures, Sapi, Spot


@pytest.mark.parametrize(
    "endpoint, path",
    [
        (Spot.PING, "/api/v3/ping"),
        (Spot.ACCOUNT, "/api/v3/account"),
        (Spot.ORDER, "/api/v3/order"),
        (Spot.ORDER_TEST, "/api/v3/order/test"),
        (Spot.OPEN_ORDERS, "/api/v3/openOrders"),
        (Spot.MY_TRADES, "/api/v3/myTrades"),
        (Spot.TICKER_24HR, "/api/v3/ticker/24hr"),
        (Sapi.ALL_COINS, "/sapi/v1/capital/config/getall"),
        (Sapi.DEPOSIT_ADDRESS, "/sapi/v1/capital/deposit/address"),
        (Futures.CHANGE_INITIAL_LEVERAGE, "/fapi/v1/leverage"),
        (Futures.POSITION_SIDE, "/fapi/v1/positionSide/dual"),
        (Futures.OPEN_INTEREST_HIST, "/futures/data/openInterestHist"),
        (Futures.USER_DATA_STREAM, "/fapi/v1/listenKey"),
        (Futures.ALL_OPEN_ORDERS, "/fapi/v1/allOpenOrders"),
    ],
)
def test_endpoint_paths(endpoint, path):
    assert endpoint.value == path
    assert str(endpoint) == path


def test_endpoint_formats_as_path():
    endpoint = Spot("/api/v3/time")
    assert endpoint is Spot.TIME
    assert f"https://api.binance.com{endpoint}" == "https://api.binance.com/api/v3/time"


@pytest.mark.parametrize("group", [Spot, Sapi, Futures])
def test_paths_are_unique_and_absolute(group):
    paths = [member.value for member in group]
    assert len(paths) == len(set(paths))
    assert all(path.startswith("/") for path in paths)


def test_spot_paths_share_prefix():
    for member in Spot:
        looked_up = Spot(member.value)
        assert looked_up is member
        assert str(looked_up).startswith("/api/v3/")


def test_lookup_by_path():
    assert Spot("/api/v3/order") is Spot.ORDER
    assert Futures("/fapi/v1/order") is Futures.ORDER


def test_unknown_path_rejected():
    with pytest.raises(ValueError):
        Spot("/api/v3/unknown")