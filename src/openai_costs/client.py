"""Synchronous client for the OpenAI organization costs endpoint."""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from openai_costs._response import decode_json_object, handle_response
from openai_costs.exceptions import APIConnectionError
from openai_costs.models import CostResponse

logger = structlog.get_logger()

DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_TIMEOUT = 30.0
COSTS_PATH = "/organization/costs"
USER_AGENT = "openai-costs-action/0.1.0"


def build_headers(api_key: str) -> dict[str, str]:
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
        "User-Agent": USER_AGENT,
    }


class CostsClient:
    """Issues the single authenticated GET against ``/organization/costs``.

    Usage::

        with CostsClient(api_key="sk-admin-...") as client:
            costs = client.get_costs({"start_time": "1704067200"})
            print(costs.total_usage)
    """

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._http = httpx.Client(
            base_url=base_url,
            headers=build_headers(api_key),
            timeout=timeout,
        )

    # -- Context manager --------------------------------------------------

    def __enter__(self) -> CostsClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP transport."""
        self._http.close()

    # -- Requests ---------------------------------------------------------

    def get_costs(self, params: dict[str, str] | None = None) -> CostResponse:
        """Fetch costs; an empty ``params`` sends no query string."""
        request = self._http.build_request("GET", COSTS_PATH, params=params or None)
        logger.debug("costs_request", url=str(request.url))
        try:
            response = self._http.send(request)
        except httpx.TimeoutException as exc:
            raise APIConnectionError(f"Request to {request.url} timed out") from exc
        except httpx.TransportError as exc:
            raise APIConnectionError(f"Could not reach {request.url}: {exc}") from exc
        handle_response(response)
        return CostResponse.model_validate(decode_json_object(response))
