"""Exceptions raised while fetching organization costs."""

from __future__ import annotations


class CostsError(Exception):
    """Base exception for all action errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ConfigurationError(CostsError):
    """A required input is missing."""


class InvalidDateFormat(CostsError, ValueError):
    """A date input could not be parsed as a calendar date."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid date format: {value!r}")
        self.value = value


class APIError(CostsError):
    """The costs endpoint answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str = "") -> None:
        super().__init__(f"OpenAI API returned {status_code}: {body}", status_code=status_code)
        self.body = body


class AuthenticationError(APIError):
    """Invalid or insufficiently privileged admin key (401/403)."""


class RateLimitError(APIError):
    """Rate limit exceeded (429)."""

    def __init__(
        self,
        status_code: int = 429,
        body: str = "",
        retry_after: int | None = None,
    ) -> None:
        super().__init__(status_code, body)
        self.retry_after = retry_after
        if retry_after is not None:
            self.message = f"{self.message} (retry after {retry_after}s)"
            self.args = (self.message,)


class ServerError(APIError):
    """Server-side error (5xx)."""


class APIConnectionError(CostsError):
    """The request never produced a response (connect error, timeout)."""


class ResponseDecodeError(CostsError):
    """A successful response did not carry a JSON object."""
