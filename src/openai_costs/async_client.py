"""Asynchronous client for the OpenAI organization costs endpoint."""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from openai_costs._response import decode_json_object, handle_response
from openai_costs.client import COSTS_PATH, DEFAULT_BASE_URL, DEFAULT_TIMEOUT, build_headers
from openai_costs.exceptions import APIConnectionError
from openai_costs.models import CostResponse

logger = structlog.get_logger()


class AsyncCostsClient:
    """Async counterpart of :class:`~openai_costs.client.CostsClient`.

    Usage::

        async with AsyncCostsClient(api_key="sk-admin-...") as client:
            costs = await client.get_costs({"start_time": "1704067200"})
    """

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._http = httpx.AsyncClient(
            base_url=base_url,
            headers=build_headers(api_key),
            timeout=timeout,
        )

    # -- Async context manager --------------------------------------------

    async def __aenter__(self) -> AsyncCostsClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP transport."""
        await self._http.aclose()

    async def get_costs(self, params: dict[str, str] | None = None) -> CostResponse:
        request = self._http.build_request("GET", COSTS_PATH, params=params or None)
        logger.debug("costs_request", url=str(request.url))
        try:
            response = await self._http.send(request)
        except httpx.TimeoutException as exc:
            raise APIConnectionError(f"Request to {request.url} timed out") from exc
        except httpx.TransportError as exc:
            raise APIConnectionError(f"Could not reach {request.url}: {exc}") from exc
        handle_response(response)
        return CostResponse.model_validate(decode_json_object(response))
