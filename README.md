# binance_client

A small blocking client for the Binance REST API. It signs requests with
HMAC-SHA256, sends them with `requests`, and raises Python exceptions for
error replies. Responses come back as the decoded JSON documents (dicts and
lists) that the exchange sends.

## Installation

```
pip install .
```

To install the test dependencies too, run `pip install .[test]`.

## Configuration

`binance_client.config.Config` is a frozen dataclass. It holds
`rest_api_endpoint`, `ws_endpoint`, `futures_rest_api_endpoint`,
`futures_ws_endpoint` and `recv_window`. The defaults point at the production
exchange and set a receive window of 5000 ms. `Config.testnet()` returns a
configuration that points at the public test networks. To get a variant, use
`dataclasses.replace`:

```python
from dataclasses import replace
from binance_client.config import Config

config = replace(Config.testnet(), recv_window=1234)
```

## Account and orders

`binance_client.account.Account(api_key, secret_key, config)` wraps the signed
spot account endpoints:

```python
from binance_client.account import Account
from binance_client.config import Config
from binance_client.orders import OrderSide, OrderType, TimeInForce

with Account("placeholder", "secret", Config()) as account:
    info = account.get_account()
    btc = account.get_balance("BTC")   # BinanceError("Asset not found") if absent

    account.get_open_orders("LTCBTC")
    account.get_all_open_orders()
    account.order_status("LTCBTC", 1)

    account.limit_buy("LTCBTC", 1, 0.1)
    account.limit_sell("LTCBTC", 1, 0.1)
    account.market_buy("LTCBTC", 1)
    account.market_sell("LTCBTC", 1)
    account.market_buy_using_quote_quantity("BNBBTC", 0.002)
    account.market_sell_using_quote_quantity("BNBBTC", 0.002)
    account.stop_limit_buy_order("LTCBTC", 1, 0.1, 0.09, TimeInForce.GTC)
    account.stop_limit_sell_order("LTCBTC", 1, 0.1, 0.09, TimeInForce.GTC)
    account.custom_order("LTCBTC", 1, 0.1, None, OrderSide.BUY,
                         OrderType.MARKET, TimeInForce.GTC, "my-order-1")

    account.cancel_order("LTCBTC", 1)
    account.cancel_order_with_client_id("LTCBTC", "my-order-1")
    account.cancel_all_open_orders("LTCBTC")
    history = account.trade_history("LTCBTC")
```

Each order method has a `test_` twin, such as `test_limit_buy` or
`test_custom_order`. The same goes for `test_order_status` and
`test_cancel_order`. A test call sends the request to the exchange's test
endpoint, which checks it but never passes it to the matching engine. Test
calls return `None`.

Every signed query carries `recvWindow` and a millisecond `timestamp`. The
parameters are joined in order of name and `signature` comes last. Price and
`timeInForce` are sent only when the price is not zero. Numbers are written
as plain decimals (`0.1`, `1`, `0.002`).

`binance_client.orders` has the `OrderType`, `OrderSide` and `TimeInForce`
enums. It also has the `OrderRequest` and `QuoteOrderRequest` dataclasses and
`build_order` / `build_quote_quantity_order`, which return the parameter
dicts that get sent.

## Lower-level access

`binance_client.api` lists the REST paths as string enums: `Spot`, `Sapi` and
`Futures`. `binance_client.client.Client(api_key, secret_key, host)` sends
requests to any of them. Use `get`, `post`, `put` and `delete` for public or
key-only endpoints. Use `get_signed`, `post_signed` and `delete_signed` for
signed ones:

```python
from binance_client.api import Spot
from binance_client.client import Client

with Client(host="https://api.binance.com") as client:
    server_time = client.get(Spot.TIME)
    depth = client.get(Spot.DEPTH, "symbol=LTCBTC&limit=10")
```

## Errors

Every failure raises a subclass of `binance_client.errors.BinanceError`:

- `400 Bad Request` raises `ApiError`, which carries the exchange's `code` and `msg`.
- 401, 500 and 503 raise `BinanceError("Unauthorized")`,
  `BinanceError("Internal Server Error")` and `BinanceError("Service Unavailable")`.
- Any other non-200 status raises `BinanceError("Received response: <status>")`.
- Connection failures and invalid JSON also raise `BinanceError`.

```python
from binance_client.errors import ApiError

try:
    account.limit_buy("LTCBTC", 1, 0.1)
except ApiError as err:
    print(err.code, err.msg)
```

## What it does not do

Only the signed spot account endpoints have wrapper methods. Market data,
general exchange information, savings, futures and user data streams have no
wrapper methods, and responses are not turned into typed models. To reach
those endpoints, call them through `Client` with the paths in
`binance_client.api`. There is no websocket support and no command-line tool.