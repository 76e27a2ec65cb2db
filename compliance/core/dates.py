"""
Clock helpers shared across the compliance rules.
"""

from datetime import date, datetime
from zoneinfo import ZoneInfo

DEFAULT_TZ = "America/New_York"


def now_in_tz(tz_name: str = DEFAULT_TZ) -> datetime:
    """
    Return the current time in the given IANA timezone.
    """
    return datetime.now(ZoneInfo(tz_name))


def today_in_tz(tz_name: str = DEFAULT_TZ) -> date:
    """
    Return today's calendar date in the given IANA timezone.

    Recency checks compare calendar dates, so "today" has to be taken in the
    issuing state's timezone rather than the server's.
    """
    return now_in_tz(tz_name).date()


def as_date(value: date | datetime | None, tz_name: str = DEFAULT_TZ) -> date:
    """
    Normalize a reference "now" to a calendar date.

    Args:
      value: A date, a datetime (aware or naive), or None for today.
      tz_name: Timezone used when ``value`` is None or an aware datetime.

    Returns:
      The calendar date the value falls on.
    """
    if value is None:
        return today_in_tz(tz_name)
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(ZoneInfo(tz_name))
        return value.date()
    return value
