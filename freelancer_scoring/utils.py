import math
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Iterable, List, Optional, Tuple

from dateutil.relativedelta import relativedelta

logger = logging.getLogger(__name__)


def round_half_up(value: float, digits: int = 1) -> float:
    """Round with halves going up, e.g. 80.25 -> 80.3 at one decimal.

    Unlike round(), which rounds halves to even.
    """
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def mean(values: Iterable[float]) -> Optional[float]:
    """Arithmetic mean, or None for an empty sequence."""
    items = list(values)
    if not items:
        return None
    return sum(items) / len(items)


def as_naive_utc(dt: datetime) -> datetime:
    """Drop tzinfo after converting aware datetimes to UTC.

    Report timestamps arrive both with and without offsets; comparing them
    requires a single convention.
    """
    if dt.tzinfo is not None:
        return dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt


def month_windows(now: datetime, month_count: int) -> List[Tuple[datetime, datetime]]:
    """
    Calendar month windows ending with the month containing ``now``.

    Returns (start, end) pairs ordered oldest to newest, where start is the
    first instant of the month and end the last microsecond of the month.
    """
    current_start = as_naive_utc(now).replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    windows = []
    for offset in range(month_count - 1, -1, -1):
        start = current_start - relativedelta(months=offset)
        end = start + relativedelta(months=1) - timedelta(microseconds=1)
        windows.append((start, end))
    return windows


def utc_now() -> datetime:
    """Current time as naive UTC, the convention every report date is compared in."""
    return as_naive_utc(datetime.now(timezone.utc))


def none_as_empty(value: Any) -> Any:
    """Map an explicit null from the data store to an empty list."""
    return [] if value is None else value


def id_as_str(value: Any) -> Any:
    """Numeric record ids are compared and sorted as strings."""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value
