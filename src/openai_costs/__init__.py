"""Fetch OpenAI organization costs and publish them as a GitHub Actions output."""

from __future__ import annotations

from openai_costs.async_client import AsyncCostsClient
from openai_costs.client import CostsClient
from openai_costs.exceptions import (
    APIConnectionError,
    APIError,
    AuthenticationError,
    ConfigurationError,
    CostsError,
    InvalidDateFormat,
    RateLimitError,
    ResponseDecodeError,
    ServerError,
)
from openai_costs.fetcher import CostFetcher
from openai_costs.models import CostOutput, CostResponse, DateRange, FilterMode

__all__ = [
    "APIConnectionError",
    "APIError",
    "AsyncCostsClient",
    "AuthenticationError",
    "ConfigurationError",
    "CostFetcher",
    "CostOutput",
    "CostResponse",
    "CostsClient",
    "CostsError",
    "DateRange",
    "FilterMode",
    "InvalidDateFormat",
    "RateLimitError",
    "ResponseDecodeError",
    "ServerError",
]
__version__ = "0.1.0"
