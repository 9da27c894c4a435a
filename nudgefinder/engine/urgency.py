"""Urgency tier classification."""

from datetime import datetime

from nudgefinder.models import TimeReference, Urgency
from nudgefinder.parser.patterns import URGENT_KEYWORDS


def classify_urgency(
    time_reference: TimeReference,
    sentence: str,
    now: datetime,
    hint: Urgency | None = None,
) -> Urgency:
    """Determine how soon a reminder matters.

    Checked in order:
    1. Urgency keywords in the sentence ("urgent", "asap") -> IMMEDIATE
    2. Time until parsed_date: < 1 hour, < 1 day, < 1 week. A date a week or
       more away gets no tier here and falls through to the text checks.
    3. Relative time label (today, tonight, tomorrow, this week)
    4. Original text (today, now, tomorrow, this week)
    5. The strategy's hint, else LATER

    Returns:
        Urgency tier
    """
    lowercased = sentence.lower()

    if any(keyword in lowercased for keyword in URGENT_KEYWORDS):
        return Urgency.IMMEDIATE

    if time_reference.parsed_date is not None:
        seconds_until = (time_reference.parsed_date - now).total_seconds()

        if seconds_until < 3600:
            return Urgency.IMMEDIATE
        elif seconds_until < 86400:
            return Urgency.TODAY
        elif seconds_until < 604800:
            return Urgency.THIS_WEEK

    if time_reference.relative_time:
        relative = time_reference.relative_time.lower()
        if any(term in relative for term in ("today", "this morning", "this afternoon", "tonight")):
            return Urgency.TODAY
        elif any(term in relative for term in ("tomorrow", "this week")):
            return Urgency.THIS_WEEK

    original = time_reference.original_text.lower()
    if "today" in original or "now" in original:
        return Urgency.TODAY
    elif "tomorrow" in original or "this week" in original:
        return Urgency.THIS_WEEK

    return hint or Urgency.LATER
