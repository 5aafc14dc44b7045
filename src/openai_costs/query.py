"""Query-string construction for the costs endpoint."""

from __future__ import annotations

from collections.abc import Callable

import structlog

from openai_costs.dates import start_of_day_utc_seconds, start_of_next_day_utc_seconds
from openai_costs.exceptions import InvalidDateFormat
from openai_costs.models import DateRange, FilterMode

logger = structlog.get_logger()

GROUP_BY = "project_id"
BUCKET_WIDTH = "1d"


def build_query_params(date_range: DateRange, mode: FilterMode = FilterMode.BUCKETED) -> dict[str, str]:
    """Return the ordered query parameters for one costs request.

    ``FilterMode.DATE`` passes the calendar dates through as
    ``start_date``/``end_date``. ``FilterMode.BUCKETED`` converts them to
    ``start_time``/``end_time`` (end exclusive) and asks for daily buckets
    grouped by project. A boundary that fails to parse is dropped with a
    warning; the rest of the request is still built.
    """
    params: dict[str, str] = {}

    if mode == FilterMode.DATE:
        if date_range.date_from:
            params["start_date"] = date_range.date_from
        if date_range.date_to:
            params["end_date"] = date_range.date_to
        return params

    _add_boundary(params, "start_time", date_range.date_from, start_of_day_utc_seconds)
    _add_boundary(params, "end_time", date_range.date_to, start_of_next_day_utc_seconds)
    params["group_by"] = GROUP_BY
    params["bucket_width"] = BUCKET_WIDTH
    return params


def _add_boundary(
    params: dict[str, str],
    name: str,
    value: str | None,
    convert: Callable[[str], int],
) -> None:
    if not value:
        return
    try:
        params[name] = str(convert(value))
    except InvalidDateFormat:
        logger.warning("date_boundary_omitted", param=name, date=value)
