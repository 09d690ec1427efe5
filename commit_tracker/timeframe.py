"""
Time window computation.

Derives the "today" and "this week" windows from the current moment. Weeks
start on Monday (ISO convention), so a Sunday belongs to the week that began
six days earlier.
"""

import datetime
from typing import Optional

from .models import ReportWindows, TimeWindow


def _midnight(day: datetime.date, tz: Optional[datetime.tzinfo]) -> datetime.datetime:
    """Return 00:00:00 on ``day``, as an aware datetime."""
    if tz is None:
        # Naive local time; astimezone() attaches the system offset valid at that midnight
        return datetime.datetime.combine(day, datetime.time.min).astimezone()
    return datetime.datetime.combine(day, datetime.time.min, tzinfo=tz)


def compute_windows(now: Optional[datetime.datetime] = None) -> ReportWindows:
    """
    Compute the today and this-week windows containing ``now``.

    Args:
        now: Current moment. Defaults to the current local time. A naive value
             is interpreted as system local time.

    Returns:
        ReportWindows with half-open ``today`` and ``week`` intervals.
    """
    if now is None:
        now = datetime.datetime.now()

    today = now.date()
    today_start = _midnight(today, now.tzinfo)
    today_end = today_start + datetime.timedelta(hours=24)

    monday = today - datetime.timedelta(days=today.isoweekday() - 1)
    week_start = _midnight(monday, now.tzinfo)
    week_end = week_start + datetime.timedelta(days=7)

    return ReportWindows(
        today=TimeWindow(today_start, today_end),
        week=TimeWindow(week_start, week_end),
    )
