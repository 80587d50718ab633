"""Blocking client for the Binance REST API: configuration, signing, spot account and order endpoints."""

__version__ = "0.1.0"
__all__ = ["account", "api", "client", "config", "errors", "orders"]