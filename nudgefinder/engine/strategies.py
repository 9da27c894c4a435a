"""Candidate extraction strategies.

Each strategy is a pure function of one sentence, the clock and the
extraction config, and returns only candidates that clear the configured
confidence threshold.
"""

import re
from typing import Callable

from nudgefinder.config import ExtractionConfig
from nudgefinder.engine.confidence import (
    score_event,
    score_explicit,
    score_recurring,
    score_time_based,
)
from nudgefinder.engine.recurrence import build_rrule_from_text
from nudgefinder.engine.urgency import classify_urgency
from nudgefinder.models import ReminderItem, TimeReference, Urgency
from nudgefinder.parser.patterns import (
    EVENT_PATTERNS,
    EXPLICIT_REMINDER_PHRASES,
    RECURRING_PATTERNS,
    TIME_BASED_PATTERNS,
)
from nudgefinder.parser.temporal import resolve_time_reference
from nudgefinder.utils.time_utils import Clock

Strategy = Callable[[str, Clock, ExtractionConfig], list[ReminderItem]]


def format_reminder_text(text: str) -> str:
    """Trim, collapse whitespace and capitalize the first letter.

    No trailing punctuation is added; reminders are often fragments.
    """
    formatted = re.sub(r'\s+', ' ', text).strip()
    if formatted:
        formatted = formatted[0].upper() + formatted[1:]
    return formatted


def extract_explicit(sentence: str, clock: Clock, config: ExtractionConfig) -> list[ReminderItem]:
    """Direct reminder phrasing ("remind me to", "note to self:").

    Returns at most one candidate: the first phrase in table order that is
    followed by some text wins.
    """
    # Transcripts often carry typographic apostrophes ("don’t")
    normalized = sentence.replace('’', "'")

    for phrase, base_confidence in EXPLICIT_REMINDER_PHRASES:
        match = re.search(re.escape(phrase), normalized, re.IGNORECASE)
        if not match:
            continue

        cleaned_text = format_reminder_text(normalized[match.end():].lstrip(' :,;-'))
        if not cleaned_text.strip('.!?'):
            # Phrase ends the sentence ("Remind me to."), nothing to remind about
            continue

        now = clock.now()
        time_reference = resolve_time_reference(sentence, clock, now)
        urgency = classify_urgency(time_reference, sentence, now)
        confidence = score_explicit(base_confidence, cleaned_text, time_reference)

        if confidence >= config.min_confidence_threshold:
            return [ReminderItem(cleaned_text, time_reference, urgency, confidence)]
        return []

    return []


def extract_time_based(sentence: str, clock: Clock, config: ExtractionConfig) -> list[ReminderItem]:
    """Appointment and deadline phrasing ("meeting at", "due by")."""
    reminders = []
    now = clock.now()

    for phrase, pattern, hint in TIME_BASED_PATTERNS:
        if not pattern.search(sentence):
            continue

        time_reference = resolve_time_reference(sentence, clock, now)

        # Only create a reminder if we have a meaningful time reference
        if not (time_reference.is_specific or time_reference.original_text):
            continue

        urgency = classify_urgency(time_reference, sentence, now, hint=Urgency[hint])
        confidence = score_time_based(sentence, time_reference)

        if confidence >= config.min_confidence_threshold:
            reminders.append(
                ReminderItem(format_reminder_text(sentence), time_reference, urgency, confidence)
            )

    return reminders


def extract_event_based(sentence: str, clock: Clock, config: ExtractionConfig) -> list[ReminderItem]:
    """Named occasions ("birthday", "interview"), prefixed with their category."""
    reminders = []
    now = clock.now()

    for phrase, pattern, category in EVENT_PATTERNS:
        if not pattern.search(sentence):
            continue

        time_reference = resolve_time_reference(sentence, clock, now)

        # Events need some time context
        if not time_reference.original_text:
            continue

        urgency = classify_urgency(time_reference, sentence, now)
        confidence = score_event(phrase, time_reference)

        if confidence >= config.min_confidence_threshold:
            text = f"{category}: {format_reminder_text(sentence)}"
            reminders.append(ReminderItem(text, time_reference, urgency, confidence))

    return reminders


def extract_recurring(sentence: str, clock: Clock, config: ExtractionConfig) -> list[ReminderItem]:
    """Periodicity phrasing ("daily", "every monday").

    Recurring reminders carry a synthesized time reference and are always LATER.
    """
    reminders = []

    for phrase, pattern in RECURRING_PATTERNS:
        if not pattern.search(sentence):
            continue

        confidence = score_recurring(phrase)
        if confidence < config.min_confidence_threshold:
            continue

        time_reference = TimeReference(
            original_text=phrase,
            relative_time=f"Recurring: {phrase}",
            recurrence_rule=build_rrule_from_text(phrase),
        )
        # Remove the periodicity phrase to avoid redundancy
        text = format_reminder_text(pattern.sub(' ', sentence))
        reminders.append(ReminderItem(text, time_reference, Urgency.LATER, confidence))

    return reminders


# Run order is part of the contract: it fixes candidate order within a sentence
STRATEGIES: tuple[Strategy, ...] = (
    extract_explicit,
    extract_time_based,
    extract_event_based,
    extract_recurring,
)
