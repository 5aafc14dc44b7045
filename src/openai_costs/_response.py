"""Shared HTTP response handling for sync and async clients."""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from openai_costs.exceptions import (
    APIError,
    AuthenticationError,
    RateLimitError,
    ResponseDecodeError,
    ServerError,
)

logger = structlog.get_logger()


def handle_response(response: httpx.Response) -> None:
    """Raise the appropriate exception for non-2xx responses.

    The exception message embeds the status code and the raw body text.
    """
    if response.is_success:
        return

    status = response.status_code
    body = response.text

    if status in (401, 403):
        raise AuthenticationError(status, body)

    if status == 429:
        retry_after: int | None = None
        raw = response.headers.get("Retry-After")
        if raw is not None:
            try:
                retry_after = int(raw)
            except ValueError:
                pass
        raise RateLimitError(status, body, retry_after=retry_after)

    if status >= 500:
        raise ServerError(status, body)

    raise APIError(status, body)


def decode_json_object(response: httpx.Response) -> dict[str, Any]:
    """Parse a successful response body.

    Malformed JSON is fatal. Valid JSON that is not an object is treated as
    an empty object so normalization falls back to its defaults.
    """
    try:
        data = response.json()
    except ValueError as exc:
        raise ResponseDecodeError(f"Response body is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        logger.warning("costs_body_not_object", body_type=type(data).__name__)
        return {}
    return data
