"""HTTP transport: request signing, headers and response handling."""

from __future__ import annotations

import hashlib
import hmac
from typing import Any

import requests

from .errors import ApiError, BinanceError

USER_AGENT = "binance-client"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def _valid_header_value(value: str) -> bool:
    return all(ch == "\t" or 32 <= ord(ch) <= 126 for ch in value)


class Client:
    """A blocking REST client bound to one host and one key pair."""

    def __init__(
        self,
        api_key: str | None = None,
        secret_key: str | None = None,
        host: str = "https://api.binance.com",
    ) -> None:
        self.api_key = api_key or ""
        self.secret_key = secret_key or ""
        self.host = host
        self._session = requests.Session()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Release the pooled connections."""
        self._session.close()

    def get_signed(self, endpoint: str, request: str | None = None) -> Any:
        """GET a signed endpoint and return the decoded JSON body."""
        return self._send("GET", self._sign_request(endpoint, request), self._headers(True))

    def post_signed(self, endpoint: str, request: str) -> Any:
        """POST to a signed endpoint and return the decoded JSON body."""
        return self._send("POST", self._sign_request(endpoint, request), self._headers(True))

    def delete_signed(self, endpoint: str, request: str | None = None) -> Any:
        """DELETE on a signed endpoint and return the decoded JSON body."""
        return self._send("DELETE", self._sign_request(endpoint, request), self._headers(True))

    def get(self, endpoint: str, request: str | None = None) -> Any:
        """GET a public endpoint, with an optional query string."""
        url = f"{self.host}{endpoint}"
        if request:
            url = f"{url}?{request}"
        return self._send("GET", url, None)

    def post(self, endpoint: str) -> Any:
        """POST to an endpoint that needs only the API key."""
        return self._send("POST", f"{self.host}{endpoint}", self._headers(False))

    def put(self, endpoint: str, listen_key: str) -> Any:
        """PUT a listen key to an endpoint that needs only the API key."""
        return self._send(
            "PUT",
            f"{self.host}{endpoint}",
            self._headers(False),
            data=f"listenKey={listen_key}",
        )

    def delete(self, endpoint: str, listen_key: str) -> Any:
        """DELETE a listen key on an endpoint that needs only the API key."""
        return self._send(
            "DELETE",
            f"{self.host}{endpoint}",
            self._headers(False),
            data=f"listenKey={listen_key}",
        )

    def _signature(self, payload: str) -> str:
        return hmac.new(
            self.secret_key.encode(), payload.encode(), hashlib.sha256
        ).hexdigest()

    def _sign_request(self, endpoint: str, request: str | None) -> str:
        signature = self._signature(request or "")
        body = f"{request or ''}&signature={signature}"
        return f"{self.host}{endpoint}?{body}"

    def _headers(self, content_type: bool) -> dict[str, str]:
        if not _valid_header_value(self.api_key):
            raise BinanceError("invalid API key header value")
        headers = {"User-Agent": USER_AGENT}
        if content_type:
            headers["Content-Type"] = FORM_CONTENT_TYPE
        headers["X-MBX-APIKEY"] = self.api_key
        return headers

    def _send(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None,
        data: str | None = None,
    ) -> Any:
        try:
            response = self._session.request(method, url, headers=headers, data=data)
        except requests.RequestException as exc:
            raise BinanceError(str(exc)) from exc
        return self._handle(response)

    @staticmethod
    def _json(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise BinanceError(f"invalid JSON response: {exc}") from exc

    def _handle(self, response: requests.Response) -> Any:
        status = response.status_code
        if status == 200:
            return self._json(response)
        if status == 500:
            raise BinanceError("Internal Server Error")
        if status == 503:
            raise BinanceError("Service Unavailable")
        if status == 401:
            raise BinanceError("Unauthorized")
        if status == 400:
            payload = self._json(response)
            try:
                raise ApiError(int(payload["code"]), str(payload["msg"]))
            except (KeyError, TypeError, ValueError) as exc:
                raise BinanceError("malformed error payload") from exc
        raise BinanceError(f"Received response: {status}")