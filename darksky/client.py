"""Dark Sky forecast API client.

One call is one GET round trip: no retries and no caching. Errors are raised
to the caller and never logged here.
"""

import base64
import json
import logging
from typing import Protocol

import httpx

from darksky.config.schema import ClientConfig
from darksky.errors import BadRequestError
from darksky.models.forecast import Forecast, decode_forecast

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class Transport(Protocol):
    """Anything that can execute a prepared request, e.g. httpx.Client."""

    def send(self, request: httpx.Request) -> httpx.Response: ...


def basic_auth(api_key: str) -> str:
    """Authorization header value carrying the key as username, no password."""
    token = base64.b64encode(f"{api_key}:".encode()).decode("ascii")
    return f"Basic {token}"


class DarkSkyClient:
    """Thin wrapper around the Dark Sky /forecast endpoint.

    The configuration is resolved once at construction and is read-only
    afterwards, so one client can be shared between threads as long as the
    transport allows it (httpx.Client does).
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "",
        timeout: float = 30.0,
        transport: Transport | None = None,
    ):
        self.config = ClientConfig(api_key=api_key, base_url=base_url, timeout=timeout)
        self._owns_transport = transport is None
        if transport is None:
            transport = httpx.Client(follow_redirects=True)
        self.transport: Transport = transport

    @classmethod
    def from_config(
        cls, config: ClientConfig, transport: Transport | None = None
    ) -> "DarkSkyClient":
        return cls(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout,
            transport=transport,
        )

    @property
    def api_key(self) -> str:
        return self.config.api_key

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def forecast_url(self, latitude: float, longitude: float) -> str:
        """Endpoint for a coordinate pair, with 6 decimal places per coordinate.

        Coordinates are not range-checked; the API rejects invalid ones.
        """
        return f"{self.base_url}/forecast/{self.api_key}/{latitude:.6f},{longitude:.6f}"

    def build_request(
        self, method: str, url: str, timeout: float | None = None
    ) -> httpx.Request:
        """Prepare an authenticated request.

        Non-GET requests are sent as form posts.
        """
        method = method.upper()
        headers = {"Authorization": basic_auth(self.api_key)}
        if method != "GET":
            headers["Content-Type"] = FORM_CONTENT_TYPE
        if timeout is None:
            timeout = self.config.timeout
        return httpx.Request(
            method,
            url,
            headers=headers,
            extensions={"timeout": httpx.Timeout(timeout).as_dict()},
        )

    def get_forecast(
        self, latitude: float, longitude: float, timeout: float | None = None
    ) -> Forecast:
        """Fetch and decode the forecast for a coordinate pair.

        Raises:
            httpx.RequestError: the request could not be sent or completed.
            BadRequestError: the API answered with a status code >= 400.
            DecodeError: the body is not a forecast document.
        """
        request = self.build_request(
            "GET", self.forecast_url(latitude, longitude), timeout=timeout
        )
        logger.debug("GET forecast lat=%.6f long=%.6f", latitude, longitude)

        response = self.transport.send(request)
        try:
            body = response.read()
        finally:
            response.close()

        logger.debug(
            "Forecast response %d (%d bytes) for lat=%.6f long=%.6f",
            response.status_code, len(body), latitude, longitude,
        )
        if response.status_code >= 400:
            raise _bad_request(response.status_code, body)
        return decode_forecast(body)

    def close(self) -> None:
        """Close the default transport. A caller-supplied one is left open."""
        if self._owns_transport and isinstance(self.transport, httpx.Client):
            self.transport.close()

    def __enter__(self) -> "DarkSkyClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def _bad_request(status_code: int, body: bytes) -> BadRequestError:
    """Build the error for a failed response, keeping the API's code if present.

    Dark Sky error bodies look like {"code": 400, "error": "..."}; the
    {"error": {"code": ..., "message": ...}} form is accepted too.
    """
    try:
        payload = json.loads(body)
    except ValueError:
        return BadRequestError(status_code)
    if not isinstance(payload, dict):
        return BadRequestError(status_code)

    error = payload.get("error")
    if isinstance(error, dict):
        code, message = error.get("code"), error.get("message")
    else:
        code, message = payload.get("code"), error
    if isinstance(code, bool) or not isinstance(code, (int, str)):
        code = None
    if not isinstance(message, str):
        message = None
    return BadRequestError(status_code, code=code, message=message)
