"""Date and time normalization."""

import logging
from datetime import datetime

from dateutil import parser
from dateutil.relativedelta import relativedelta

from nudgefinder.parser.patterns import (
    CALENDAR_DATE_PATTERNS,
    CLOCK_COMPONENTS,
    CLOCK_TIME_PATTERNS,
    DAY_PART_PHRASES,
)
from nudgefinder.utils.constants import DEFAULT_DUE_HOUR

logger = logging.getLogger(__name__)


def find_day_part(sentence: str) -> str | None:
    """Find a day-part phrase ("this morning", "tonight"), title-cased."""
    lowercased = sentence.lower()
    for phrase in DAY_PART_PHRASES:
        if phrase in lowercased:
            return phrase.title()
    return None


def find_clock_time(sentence: str) -> str | None:
    """Find a clock expression ("at 3pm", "by 5:30", "9 o'clock") as written."""
    for pattern in CLOCK_TIME_PATTERNS:
        match = pattern.search(sentence)
        if match:
            return match.group(0)
    return None


def find_time_of_day(sentence: str) -> str | None:
    """Find a day part, or failing that a clock expression."""
    return find_day_part(sentence) or find_clock_time(sentence)


def apply_clock_time(date: datetime, clock_text: str) -> datetime:
    """Set the hour and minute of `date` from a clock expression."""
    match = CLOCK_COMPONENTS.search(clock_text)
    if not match:
        return date

    hour = int(match.group('hour'))
    minute = int(match.group('minute') or 0)
    meridiem = (match.group('meridiem') or '').lower()

    if meridiem == 'p' and hour < 12:
        hour += 12
    elif meridiem == 'a' and hour == 12:
        hour = 0

    if hour > 23 or minute > 59:
        return date
    return date.replace(hour=hour, minute=minute, second=0, microsecond=0)


def detect_calendar_date(sentence: str, now: datetime) -> datetime | None:
    """Detect an absolute calendar date in a sentence. See find_calendar_date()."""
    found = find_calendar_date(sentence, now)
    return found[0] if found else None


def find_calendar_date(sentence: str, now: datetime) -> tuple[datetime, str] | None:
    """Find an absolute calendar date (with optional clock time) in a sentence.

    Recognizes "March 15", "15th of March", "2026-03-15" and "3/15/2026".
    Dates given without a year that already passed this year roll forward to
    next year. Bare clock times and relative words ("tomorrow") are not
    calendar dates and are left to the later resolution steps.

    Args:
        sentence: Text to scan
        now: Current instant (timezone-aware); supplies the zone and the
            missing year

    The clock time is looked up in the rest of the sentence only, so the
    date's own digits ("by 15 March", "by 4/15") are never read as a time.

    Returns:
        (timezone-aware datetime, sentence with the date blanked out),
        or None if no date was found
    """
    default = now.replace(
        hour=DEFAULT_DUE_HOUR, minute=0, second=0, microsecond=0, tzinfo=None
    )

    for pattern in CALENDAR_DATE_PATTERNS:
        match = pattern.search(sentence)
        if not match:
            continue

        try:
            date = parser.parse(match.group(0), default=default, ignoretz=True)
        except (ValueError, OverflowError) as e:
            # Implausible dates (February 30) just aren't dates
            logger.debug(f"Rejected date phrase {match.group(0)!r}: {e}")
            continue

        date = date.replace(tzinfo=now.tzinfo)
        remainder = f"{sentence[:match.start()]} {sentence[match.end():]}"

        clock_text = find_clock_time(remainder)
        if clock_text:
            date = apply_clock_time(date, clock_text)

        # If date is in the past this year, assume next year
        if match.group('year') is None and date.date() < now.date():
            date += relativedelta(years=1)

        return date, remainder

    return None
