"""Exceptions raised by the client."""

from __future__ import annotations


class BinanceError(Exception):
    """Base class for every error raised by this package."""


class ApiError(BinanceError):
    """An error payload returned by the exchange (``code`` and ``msg``)."""

    def __init__(self, code: int, msg: str) -> None:
        super().__init__(f"{code}: {msg}")
        self.code = code
        self.msg = msg


class KlineValueMissingError(BinanceError):
    """A kline row lacks the value expected at a given position."""

    def __init__(self, index: int, name: str) -> None:
        super().__init__(f"{name} at {index} is missing")
        self.index = index
        self.name = name