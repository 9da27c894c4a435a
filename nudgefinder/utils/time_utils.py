"""Time, timezone and clock utilities."""

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil.relativedelta import relativedelta

from nudgefinder.utils.constants import DEFAULT_TIMEZONE


def to_utc(dt: datetime, tz: str) -> datetime:
    """Convert a timezone-aware datetime to UTC."""
    if dt.tzinfo is None:
        # Assume it's in the given timezone
        dt = dt.replace(tzinfo=ZoneInfo(tz))
    return dt.astimezone(ZoneInfo("UTC"))


def from_utc(dt: datetime, tz: str) -> datetime:
    """Convert a UTC datetime to the given timezone."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=ZoneInfo("UTC"))
    return dt.astimezone(ZoneInfo(tz))


class Clock:
    """Calendar and clock service in a single local timezone.

    The resolver and urgency classifier never read the system time directly,
    so a whole extraction can be pinned to one instant with FixedClock.
    """

    def __init__(self, timezone: str = DEFAULT_TIMEZONE):
        try:
            ZoneInfo(timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {timezone}") from e
        self.timezone = timezone

    def now(self) -> datetime:
        """Current instant in the clock's timezone."""
        return from_utc(datetime.now(ZoneInfo("UTC")), self.timezone)

    def add(self, dt: datetime, **interval: int) -> datetime:
        """Calendar arithmetic (days, weeks, months, hours, minutes...)."""
        return dt + relativedelta(**interval)

    def next_weekday(self, after: datetime, weekday: int) -> datetime:
        """Start of the next day strictly after `after` falling on `weekday` (Monday=0)."""
        days_ahead = weekday - after.weekday()
        if days_ahead <= 0:  # Target day already happened this week
            days_ahead += 7

        result = after + timedelta(days=days_ahead)
        return result.replace(hour=0, minute=0, second=0, microsecond=0)

    @staticmethod
    def same_week(first: datetime, second: datetime) -> bool:
        """Check whether two datetimes fall in the same ISO week."""
        return first.isocalendar()[:2] == second.isocalendar()[:2]


class FixedClock(Clock):
    """Clock frozen at a single instant."""

    def __init__(self, instant: datetime, timezone: str = DEFAULT_TIMEZONE):
        super().__init__(timezone)
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=ZoneInfo(timezone))
        self.instant = instant

    def now(self) -> datetime:
        return from_utc(self.instant, self.timezone)


def format_medium_date(dt: datetime) -> str:
    """Format a date like "Mar 15, 2026"."""
    return f"{dt:%b} {dt.day}, {dt.year}"


def format_relative_time(dt: datetime, now: datetime) -> str:
    """Format a future datetime relative to now.

    Examples:
        "In 5 minutes"
        "In 2 hours"
        "In 3 days"
        "Mar 15, 2026" (a week or more away, or already past)
    """
    total_seconds = (dt - now).total_seconds()

    if total_seconds < 0:
        return format_medium_date(dt)
    elif total_seconds < 3600:
        minutes = int(total_seconds / 60)
        return f"In {minutes} minute{'s' if minutes != 1 else ''}"
    elif total_seconds < 86400:
        hours = int(total_seconds / 3600)
        return f"In {hours} hour{'s' if hours != 1 else ''}"
    elif total_seconds < 604800:
        days = int(total_seconds / 86400)
        return f"In {days} day{'s' if days != 1 else ''}"
    else:
        return format_medium_date(dt)
