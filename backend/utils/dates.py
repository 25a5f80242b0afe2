import logging
from collections.abc import Mapping
from datetime import date, datetime, time, timedelta
from typing import Any, List, Tuple

from dateutil import parser as date_parser

import config

logger = logging.getLogger(__name__)

# Stand-in date for an opening balance that has no as-of date.
EPOCH = datetime(1970, 1, 1)

# Methods a stored timestamp object may expose to hand back a datetime
# (Firestore/protobuf timestamps, pandas Timestamps, ...).
_TIMESTAMP_CONVERTERS = ("to_datetime", "ToDatetime", "to_pydatetime", "toDate")


def local_now() -> datetime:
    """Current wall-clock time in the dairy's timezone, without tzinfo."""
    return datetime.now(config.DAIRY_TIMEZONE).replace(tzinfo=None)


def _to_local_naive(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(config.DAIRY_TIMEZONE).replace(tzinfo=None)


def _from_epoch_seconds(seconds: float) -> datetime:
    return datetime.fromtimestamp(seconds, tz=config.DAIRY_TIMEZONE).replace(tzinfo=None)


def parse_entry_date(value: Any) -> datetime:
    """
    Coerce a stored date of unknown representation into a naive local datetime.

    Accepts datetime/date objects, timestamp objects exposing a conversion
    method, serialized timestamps ({"seconds": ..., "nanoseconds": ...}),
    strings (parsed with dateutil) and epoch numbers in milliseconds.

    Missing or unparseable values never raise: they fall back to the current
    time and a warning is logged, so one bad record cannot abort a report.
    """
    if value is None:
        logger.warning("parse_entry_date received None, returning current time as fallback.")
        return local_now()

    if isinstance(value, datetime):
        return _to_local_naive(value)

    if isinstance(value, date):
        return datetime.combine(value, time.min)

    for attr in _TIMESTAMP_CONVERTERS:
        converter = getattr(value, attr, None)
        if callable(converter):
            try:
                converted = converter()
            except (TypeError, ValueError, OverflowError) as exc:
                logger.warning(f"Timestamp conversion via {attr}() failed for {value!r}: {exc}. Returning current time as fallback.")
                return local_now()
            if isinstance(converted, (datetime, date)):
                return parse_entry_date(converted)
            break

    if isinstance(value, Mapping):
        seconds = value.get("seconds", value.get("_seconds"))
        if seconds is not None:
            nanos = value.get("nanoseconds", value.get("_nanoseconds")) or 0
            try:
                return _from_epoch_seconds(float(seconds) + float(nanos) / 1e9)
            except (TypeError, ValueError, OverflowError, OSError):
                pass
    elif isinstance(value, bool):
        pass
    elif isinstance(value, (int, float)):
        try:
            return _from_epoch_seconds(value / 1000)
        except (ValueError, OverflowError, OSError):
            pass
    elif isinstance(value, str) and value.strip():
        try:
            return _to_local_naive(date_parser.parse(value))
        except (ValueError, OverflowError):
            pass

    logger.warning(f"parse_entry_date received an unexpected type or invalid date, returning current time as fallback. Value: {value!r}")
    return local_now()


def to_day(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_entry_date(value).date()


def period_bounds(start_date: date, end_date: date) -> Tuple[datetime, datetime]:
    """Start of the first day and end of the last day of an inclusive period."""
    return (
        datetime.combine(to_day(start_date), time.min),
        datetime.combine(to_day(end_date), time.max),
    )


def days_in_range(start_date: date, end_date: date) -> List[date]:
    """Every calendar day from start_date to end_date, both inclusive."""
    first, last = to_day(start_date), to_day(end_date)
    return [first + timedelta(days=offset) for offset in range((last - first).days + 1)]


def day_label(day: date) -> str:
    return day.strftime(config.CHART_DATE_FORMAT)
