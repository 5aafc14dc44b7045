"""Calendar date helpers.

All conversions use UTC calendar fields. A single ``date`` input expands to a
one-day range, and bucket boundaries are the UTC midnight that opens the first
day and the UTC midnight that closes the last one.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone

import structlog

from openai_costs.exceptions import InvalidDateFormat
from openai_costs.models import DateRange

logger = structlog.get_logger()

_DATE_FORMAT = "%Y-%m-%d"


def parse_calendar_date(value: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` string."""
    try:
        return datetime.strptime(value, _DATE_FORMAT).date()
    except (TypeError, ValueError) as exc:
        raise InvalidDateFormat(value) from exc


def _utc_midnight(day: date) -> int:
    return int(datetime.combine(day, time.min, tzinfo=timezone.utc).timestamp())


def start_of_day_utc_seconds(value: str) -> int:
    """Seconds since the epoch at ``<value>T00:00:00Z``."""
    return _utc_midnight(parse_calendar_date(value))


def start_of_next_day_utc_seconds(value: str) -> int:
    """Exclusive end boundary: UTC midnight of the day after ``value``."""
    return _utc_midnight(parse_calendar_date(value) + timedelta(days=1))


def expand_single_date(value: str) -> str:
    """Normalize a single date input to the ``YYYY-MM-DD`` of its UTC day.

    Accepts an ISO date or datetime. Time of day is dropped; an aware datetime
    is moved to UTC first.
    """
    try:
        parsed = datetime.fromisoformat(value.strip())
    except (AttributeError, ValueError) as exc:
        raise InvalidDateFormat(value) from exc
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date().strftime(_DATE_FORMAT)


def resolve_date_range(
    date_from: str | None,
    date_to: str | None,
    single_date: str | None = None,
) -> DateRange:
    """Resolve explicit boundaries, falling back to a one-day range.

    Explicit ``date_from``/``date_to`` are used verbatim. When either is
    missing and ``single_date`` is given, the missing side(s) take that day.
    An unparseable ``single_date`` is logged and ignored.
    """
    date_from = date_from or None
    date_to = date_to or None

    if date_from and date_to:
        return DateRange(date_from=date_from, date_to=date_to)

    if single_date:
        try:
            day = expand_single_date(single_date)
        except InvalidDateFormat as exc:
            logger.warning("single_date_unparseable", date=exc.value)
        else:
            date_from = date_from or day
            date_to = date_to or day

    return DateRange(date_from=date_from, date_to=date_to)
