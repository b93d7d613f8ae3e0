"""Error types raised by the Dark Sky client.

Transport failures are not wrapped: they surface as ``httpx.RequestError``.
"""


class DarkSkyError(Exception):
    """Base class for errors raised by this library."""


class BadRequestError(DarkSkyError):
    """Raised when the API answers with a status code >= 400."""

    def __init__(
        self,
        status_code: int,
        code: int | str | None = None,
        message: str | None = None,
    ):
        super().__init__(f"Bad HTTP Request (status {status_code})")
        self.status_code = status_code
        self.code = code
        self.message = message


class DecodeError(DarkSkyError):
    """Raised when a response body is not a forecast document."""


class TimezoneUnavailableError(DarkSkyError):
    """Raised when the forecast's timezone cannot be loaded."""

    def __init__(self, timezone: str):
        super().__init__(f"Unable to load timezone data for {timezone!r}")
        self.timezone = timezone
