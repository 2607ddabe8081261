# backend/zengym/clock.py
"""
Time helpers. Every day boundary in ZenGym is a UTC calendar day, and
timestamps are stored as naive UTC datetimes.
"""
import calendar
from datetime import date, datetime, time, timedelta, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def utc_today() -> date:
    return utc_now().date()


def day_of(ts) -> date:
    """Calendar day of a timestamp (time-of-day stripped)."""
    if isinstance(ts, datetime):
        if ts.tzinfo is not None:
            ts = ts.astimezone(timezone.utc).replace(tzinfo=None)
        return ts.date()
    return ts


def window_start(today: date, days: int) -> datetime:
    """Midnight of the first day of a `days`-long window ending on `today`."""
    first_day = today - timedelta(days=max(1, days) - 1)
    return datetime.combine(first_day, time.min)


def add_months(ts: datetime, months: int) -> datetime:
    # clamp to the last day of the target month (Jan 31 + 1 -> Feb 28/29)
    month_index = ts.month - 1 + months
    year = ts.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return ts.replace(year=year, month=month, day=min(ts.day, last_day))
