"""Monday-aligned week arithmetic.

A week start is a ``date`` that is always a Monday. Dates carry no time of
day, so a week start is midnight by construction.
"""
from datetime import date, datetime, timedelta
from typing import List, Union

from roomrates.utilities.constants import DAYS_IN_WEEK

DateLike = Union[date, datetime]


def _as_date(d: DateLike) -> date:
    # datetime is a subclass of date; drop the time part
    return d.date() if isinstance(d, datetime) else d


def monday_of(d: DateLike) -> date:
    """Return the Monday on or before d."""
    d = _as_date(d)
    return d - timedelta(days=d.weekday())


def shift_week(week_start: DateLike, delta_weeks: int) -> date:
    """Move a week start by whole weeks. No bounds: any past or future week is fine."""
    return _as_date(week_start) + timedelta(days=DAYS_IN_WEEK * delta_weeks)


def is_in_week(d: DateLike, week_start: DateLike) -> bool:
    """True when week_start <= d <= week_start + 6 days."""
    start = _as_date(week_start)
    return start <= _as_date(d) <= start + timedelta(days=DAYS_IN_WEEK - 1)


def week_dates(week_start: DateLike) -> List[date]:
    start = _as_date(week_start)
    return [start + timedelta(days=i) for i in range(DAYS_IN_WEEK)]


def is_weekend(d: DateLike) -> bool:
    return _as_date(d).weekday() >= 5


# Latest Monday whose whole week is representable (9999-12-20)
LAST_WEEK_START: date = monday_of(date.max - timedelta(days=DAYS_IN_WEEK - 1))
