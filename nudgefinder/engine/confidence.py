"""Per-strategy confidence scoring."""

from nudgefinder.models import TimeReference
from nudgefinder.parser.patterns import (
    CONNECTIVE_WORDS,
    IMPORTANT_EVENTS,
    STRONG_RECURRING_PHRASES,
    STRONG_TIME_PHRASES,
    TIME_BASED_PATTERNS,
)

TIME_BASED_BASE = 0.7
EVENT_BASE = 0.6
RECURRING_BASE = 0.5

SPECIFIC_TIME_BOOST = 0.2
EXPLICIT_SPECIFIC_BOOST = 0.1
EXPLICIT_CONNECTIVE_BOOST = 0.05
STRONG_PATTERN_BOOST = 0.1
IMPORTANT_EVENT_BOOST = 0.1
STRONG_RECURRING_BOOST = 0.2


def score_explicit(base: float, cleaned_text: str, time_reference: TimeReference) -> float:
    """Score an explicit reminder ("remind me to...") from its phrase weight."""
    confidence = base

    if time_reference.is_specific:
        confidence += EXPLICIT_SPECIFIC_BOOST

    # Boost when the reminder still names its object ("to the bank", "about rent")
    if CONNECTIVE_WORDS.intersection(cleaned_text.lower().split()):
        confidence += EXPLICIT_CONNECTIVE_BOOST

    return min(confidence, 1.0)


def score_time_based(sentence: str, time_reference: TimeReference) -> float:
    """Score an appointment or deadline mention."""
    confidence = TIME_BASED_BASE

    if time_reference.is_specific:
        confidence += SPECIFIC_TIME_BOOST

    if any(
        pattern.search(sentence)
        for phrase, pattern, _ in TIME_BASED_PATTERNS
        if phrase in STRONG_TIME_PHRASES
    ):
        confidence += STRONG_PATTERN_BOOST

    return min(confidence, 1.0)


def score_event(phrase: str, time_reference: TimeReference) -> float:
    """Score a named occasion (birthday, interview...)."""
    confidence = EVENT_BASE

    if time_reference.is_specific:
        confidence += SPECIFIC_TIME_BOOST

    if phrase in IMPORTANT_EVENTS:
        confidence += IMPORTANT_EVENT_BOOST

    return min(confidence, 1.0)


def score_recurring(phrase: str) -> float:
    """Score a periodicity phrase (daily, every monday...)."""
    confidence = RECURRING_BASE

    if phrase in STRONG_RECURRING_PHRASES:
        confidence += STRONG_RECURRING_BOOST

    return min(confidence, 1.0)
