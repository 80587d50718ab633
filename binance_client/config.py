"""Endpoint and timing settings shared by the REST and stream clients."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Config:
    """Endpoints and the receive window used when building clients.

    Instances are immutable; derive variants with ``dataclasses.replace``.
    """

    rest_api_endpoint: str = "https://api.binance.com"
    ws_endpoint: str = "wss://stream.binance.com:9443/ws"
    futures_rest_api_endpoint: str = "https://fapi.binance.com"
    futures_ws_endpoint: str = "wss://fstream.binance.com/ws"
    recv_window: int = 5000

    @classmethod
    def testnet(cls) -> "Config":
        """Return a configuration pointing at the public test networks."""
        return replace(
            cls(),
            rest_api_endpoint="https://testnet.binance.vision",
            ws_endpoint="wss://testnet.binance.vision/ws",
            futures_rest_api_endpoint="https://testnet.binancefuture.com",
            futures_ws_endpoint="https://testnet.binancefuture.com/ws",
        )