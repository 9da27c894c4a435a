"""Temporal reference resolution.

Resolution tries, in order, returning on the first success:
1. Absolute calendar date (with optional clock time)
2. Relative phrase (today, tomorrow, next week...)
3. Weekday name
4. Time of day (tonight, at 3pm...)
5. Vague adverbial (soon, later...), else "No specific time"
"""

from datetime import datetime

from nudgefinder.models import TimeReference
from nudgefinder.parser.normalizer import find_calendar_date, find_time_of_day
from nudgefinder.parser.patterns import RELATIVE_PHRASES, VAGUE_TIME_PATTERNS, WEEKDAY_NAMES
from nudgefinder.utils.constants import NO_SPECIFIC_TIME, SPECIFIC_TIME
from nudgefinder.utils.time_utils import Clock, format_relative_time


def resolve_time_reference(
    sentence: str, clock: Clock, now: datetime | None = None
) -> TimeReference:
    """Resolve the time reference of a sentence.

    Args:
        sentence: A single sentence
        clock: Calendar service used for date arithmetic
        now: Instant to resolve against; read from the clock once if omitted

    Returns:
        TimeReference, never with empty original_text
    """
    if now is None:
        now = clock.now()

    return (
        _resolve_calendar_date(sentence, now)
        or _resolve_relative_phrase(sentence, now, clock)
        or _resolve_weekday(sentence, now, clock)
        or _resolve_time_of_day(sentence)
        or TimeReference(original_text=find_vague_time(sentence) or NO_SPECIFIC_TIME)
    )


def _resolve_calendar_date(sentence: str, now: datetime) -> TimeReference | None:
    found = find_calendar_date(sentence, now)
    if found is None:
        return None

    parsed_date, remainder = found
    return TimeReference(
        original_text=find_time_of_day(remainder) or SPECIFIC_TIME,
        parsed_date=parsed_date,
        relative_time=format_relative_time(parsed_date, now),
    )


def _resolve_relative_phrase(sentence: str, now: datetime, clock: Clock) -> TimeReference | None:
    lowercased = sentence.lower()

    for phrase, interval, label in RELATIVE_PHRASES:
        if phrase in lowercased:
            return TimeReference(
                original_text=phrase,
                parsed_date=clock.add(now, **interval),
                relative_time=label,
            )

    return None


def _resolve_weekday(sentence: str, now: datetime, clock: Clock) -> TimeReference | None:
    lowercased = sentence.lower()

    for day_name, weekday in WEEKDAY_NAMES.items():
        if day_name in lowercased:
            next_date = clock.next_weekday(now, weekday)
            prefix = "This" if clock.same_week(next_date, now) else "Next"
            return TimeReference(
                original_text=day_name,
                parsed_date=next_date,
                relative_time=f"{prefix} {day_name.capitalize()}",
            )

    return None


def _resolve_time_of_day(sentence: str) -> TimeReference | None:
    time_of_day = find_time_of_day(sentence)
    if time_of_day is None:
        return None
    return TimeReference(original_text=time_of_day, relative_time=time_of_day)


def find_vague_time(sentence: str) -> str | None:
    """Find a non-specific adverbial ("soon", "later"), capitalized."""
    for phrase, pattern in VAGUE_TIME_PATTERNS:
        if pattern.search(sentence):
            return phrase.capitalize()
    return None
