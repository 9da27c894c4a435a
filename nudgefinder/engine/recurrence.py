"""RRULE-based recurrence handling."""

import re
from datetime import datetime

from dateutil.rrule import rrule, rrulestr

from nudgefinder.parser.patterns import WEEKDAY_NAMES

_WEEKDAY_CODES = ['MO', 'TU', 'WE', 'TH', 'FR', 'SA', 'SU']

_FREQUENCIES = {
    'day': 'DAILY',
    'morning': 'DAILY',
    'evening': 'DAILY',
    'week': 'WEEKLY',
    'month': 'MONTHLY',
    'year': 'YEARLY',
}


def parse_rrule(rrule_str: str, dtstart: datetime) -> rrule:
    """Parse an RRULE body anchored at dtstart."""
    return rrulestr(rrule_str, dtstart=dtstart)


def get_next_occurrence(rrule_str: str, after: datetime) -> datetime | None:
    """Get the first occurrence strictly after `after`.

    Args:
        rrule_str: RRULE body (e.g., "FREQ=WEEKLY;BYDAY=MO")
        after: Anchor datetime (timezone-aware)

    Returns:
        Next occurrence, or None if the rule has ended
    """
    rule = parse_rrule(rrule_str, after.replace(microsecond=0))
    return rule.after(after)


def build_rrule_from_text(recurrence_text: str) -> str | None:
    """Build an RRULE string from a periodicity phrase.

    Examples:
        "daily" / "every day" / "every morning" -> "FREQ=DAILY"
        "weekly" -> "FREQ=WEEKLY"
        "annually" -> "FREQ=YEARLY"
        "every monday" -> "FREQ=WEEKLY;BYDAY=MO"

    Returns:
        RRULE string or None for phrases without a fixed period ("regularly")
    """
    text = recurrence_text.lower().strip()

    # Simple frequencies
    if text == 'daily':
        return "FREQ=DAILY"
    elif text == 'weekly':
        return "FREQ=WEEKLY"
    elif text == 'monthly':
        return "FREQ=MONTHLY"
    elif text in ('yearly', 'annually'):
        return "FREQ=YEARLY"

    match = re.fullmatch(r'every\s+(\w+)', text)
    if not match:
        return None

    unit = match.group(1)
    if unit in WEEKDAY_NAMES:
        return f"FREQ=WEEKLY;BYDAY={_WEEKDAY_CODES[WEEKDAY_NAMES[unit]]}"

    freq = _FREQUENCIES.get(unit)
    return f"FREQ={freq}" if freq else None
