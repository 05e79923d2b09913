"""
GenderAPI.io phone validation client.

A `Client` holds an API key and a base URL and sends one POST per `validate`
call. The response body is returned as parsed JSON with no interpretation;
its schema (E.164/national formats, country, number type, ...) belongs to the
remote service.

Failures surface as `PhoneValidatorError` subclasses:

- `ServerErrorOrTimeout`: the service answered 500/502/503/504/408.
- `InvalidResponseError`: the body is not valid JSON.
- `RequestFailedError`: the HTTP exchange itself failed (DNS, connect, decoding, ...).
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

import httpx

from phonevalidator.net.http import HttpClientConfig, build_client

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.genderapi.io"
PHONE_ENDPOINT = "/api/phone"

SERVER_ERROR_STATUSES = frozenset({500, 502, 503, 504, 408})


class PhoneValidatorError(RuntimeError):
    """Base class for every failure raised by `Client.validate`."""


class ServerErrorOrTimeout(PhoneValidatorError):
    """Raised when the service responds with a server error or timeout status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"GenderAPI Server Error or Timeout: HTTP {status_code} - {body}")
        self.status_code = status_code
        self.body = body


class InvalidResponseError(PhoneValidatorError):
    """Raised when the response body cannot be parsed as JSON."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__("GenderAPI Response is not valid JSON")
        self.status_code = status_code
        self.body = body


class RequestFailedError(PhoneValidatorError):
    """Raised when the HTTP exchange could not be completed."""


def clean_payload(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is None."""

    return {k: v for k, v in payload.items() if v is not None}


class Client:
    """
    Client for the phone number validation endpoint.

    Args:
        api_key: GenderAPI API key, sent as a Bearer token.
        base_url: Optional override for the API host (default: production).
        http_config: Transport settings (timeout, User-Agent).
        transport: Optional httpx transport used for every request.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        *,
        http_config: HttpClientConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if not api_key or not api_key.strip():
            raise ValueError("api_key must be a non-empty string")

        self._api_key = api_key
        self._base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self._headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
        self._http_config = http_config or HttpClientConfig()
        self._transport = transport

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._base_url!r})"

    def validate(self, number: str, address: str = "") -> Any:
        """
        Validate and format a phone number.

        Args:
            number: Phone number as entered by a user; not checked locally.
            address: Optional country code, country name or city that helps the
                service parse numbers without a leading `+`. Omitted from the
                request when empty.

        Returns:
            The parsed JSON response, unchanged.

        Raises:
            ServerErrorOrTimeout: HTTP 500/502/503/504/408.
            InvalidResponseError: the body is not valid JSON.
            RequestFailedError: the request could not be sent or completed.
        """

        payload = {"number": number, "address": address or None}
        return self._post(PHONE_ENDPOINT, payload)

    def _post(self, endpoint: str, payload: Mapping[str, Any]) -> Any:
        body = json.dumps(clean_payload(payload))
        url = f"{self._base_url}{endpoint}"
        logger.debug("POST %s", url, extra={"endpoint": endpoint})

        try:
            with build_client(
                self._http_config,
                base_url=self._base_url,
                headers=self._headers,
                transport=self._transport,
            ) as client:
                resp = client.post(endpoint, content=body)
        except httpx.RequestError as exc:
            raise RequestFailedError(f"GenderAPI Request failed: {exc}") from exc

        logger.debug(
            "POST %s -> HTTP %s",
            url,
            resp.status_code,
            extra={"endpoint": endpoint, "status_code": resp.status_code},
        )

        if resp.status_code in SERVER_ERROR_STATUSES:
            raise ServerErrorOrTimeout(resp.status_code, resp.text)

        try:
            return resp.json()
        except ValueError as exc:
            raise InvalidResponseError(resp.status_code, resp.text) from exc
