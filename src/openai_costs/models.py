"""Pydantic models for the costs request and the published output."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, field_validator

# --- Enums ---


class FilterMode(StrEnum):
    """How the requested dates are sent to the costs endpoint."""

    BUCKETED = "bucketed"  # start_time/end_time Unix seconds, grouped per project
    DATE = "date"  # start_date/end_date calendar strings


# --- Request ---


class DateRange(BaseModel):
    """Calendar boundaries in ``YYYY-MM-DD`` form; either side may be unset.

    ``date_from <= date_to`` is assumed, not enforced.
    """

    date_from: str | None = None
    date_to: str | None = None


# --- Response ---


class CostResponse(BaseModel):
    """Raw body of the costs endpoint.

    Only ``total_usage`` and ``project_id`` are read. Missing, null, falsy or
    non-numeric totals fall back to ``0``; other project ids are stringified.
    """

    total_usage: int | float = 0
    project_id: str = ""

    model_config = {"extra": "allow"}

    @field_validator("total_usage", mode="before")
    @classmethod
    def _default_usage(cls, v: Any) -> Any:
        if isinstance(v, bool) or not v:
            return 0
        if isinstance(v, (int, float)):
            return v
        try:
            return float(v)
        except (TypeError, ValueError):
            return 0

    @field_validator("project_id", mode="before")
    @classmethod
    def _default_project(cls, v: Any) -> Any:
        return str(v) if v else ""


# --- Output ---


class Amount(BaseModel):
    value: int | float = 0
    currency: str = "usd"


class CostOutput(BaseModel):
    """Normalized envelope published as the action output."""

    amount: Amount = Field(default_factory=Amount)
    project_id: str = ""

    model_config = {"frozen": True}

    @classmethod
    def from_response(cls, response: CostResponse) -> CostOutput:
        # Currency is fixed regardless of what the upstream reports.
        return cls(
            amount=Amount(value=response.total_usage, currency="usd"),
            project_id=response.project_id,
        )

    def to_json(self) -> str:
        """Compact JSON text, e.g. ``{"amount":{"value":0,"currency":"usd"},"project_id":""}``."""
        return self.model_dump_json()
