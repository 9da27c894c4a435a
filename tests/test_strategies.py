"""Tests for the candidate extraction strategies and their scoring."""

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from nudgefinder.config import ExtractionConfig
from nudgefinder.engine.confidence import score_event, score_explicit, score_recurring, score_time_based
from nudgefinder.engine.strategies import (
    extract_event_based,
    extract_explicit,
    extract_recurring,
    extract_time_based,
    format_reminder_text,
)
from nudgefinder.models import TimeReference, Urgency
from nudgefinder.utils.time_utils import FixedClock

# Wednesday
NOW = datetime(2026, 3, 11, 10, 0, tzinfo=ZoneInfo("UTC"))
CLOCK = FixedClock(NOW)

PERMISSIVE = ExtractionConfig(min_confidence_threshold=0.0)


def test_format_reminder_text():
    """Test cleanup of reminder text."""
    assert format_reminder_text("  call   mom tomorrow ") == "Call mom tomorrow"
    assert format_reminder_text("") == ""


def test_explicit_reminder():
    """Test direct reminder phrasing."""
    [reminder] = extract_explicit("Remind me to call mom tomorrow", CLOCK, PERMISSIVE)

    assert reminder.text == "Call mom tomorrow"
    assert reminder.time_reference.relative_time == "Tomorrow"
    assert reminder.urgency == Urgency.THIS_WEEK
    assert reminder.confidence == 1.0  # 0.95 + specific boost, capped


def test_explicit_reminder_strips_phrase_after_preamble():
    """Test that anything before the reminder phrase is dropped too."""
    [reminder] = extract_explicit("Oh and note to self: renew passport", CLOCK, PERMISSIVE)

    assert reminder.text == "Renew passport"
    assert reminder.time_reference.original_text == "No specific time"
    assert reminder.confidence == pytest.approx(0.9)


def test_explicit_connective_boost():
    """Test the boost for reminders that still name their object."""
    [reminder] = extract_explicit("I need to remember to send the slides to Priya", CLOCK, PERMISSIVE)

    assert reminder.text == "Send the slides to Priya"
    assert reminder.confidence == pytest.approx(0.95)


def test_explicit_typographic_apostrophe():
    """Test that curly apostrophes still match."""
    [reminder] = extract_explicit("Don’t forget to water the plants", CLOCK, PERMISSIVE)
    assert reminder.text == "Water the plants"


def test_explicit_phrase_without_content():
    """Test that a phrase ending the sentence gives no reminder."""
    assert extract_explicit("Oh right, remind me to.", CLOCK, PERMISSIVE) == []
    assert extract_explicit("Mental note:", CLOCK, PERMISSIVE) == []

    # A later phrase with text after it still counts
    [reminder] = extract_explicit("Don't forget to remind me to", CLOCK, PERMISSIVE)
    assert reminder.text == "Remind me to"


def test_explicit_threshold():
    """Test that low-confidence candidates are dropped."""
    strict = ExtractionConfig(min_confidence_threshold=0.99)

    assert extract_explicit("Note to self: renew passport", CLOCK, strict) == []
    assert extract_explicit("We walked along the beach", CLOCK, PERMISSIVE) == []


def test_time_based_deadline():
    """Test a deadline with a relative date."""
    [reminder] = extract_time_based("The deadline for the grant is next week", CLOCK, PERMISSIVE)

    assert reminder.text == "The deadline for the grant is next week"
    assert reminder.urgency == Urgency.THIS_WEEK
    assert reminder.confidence == pytest.approx(1.0)


def test_time_based_emits_one_candidate_per_phrase():
    """Test that every matching phrase yields its own candidate, in table order."""
    reminders = extract_time_based("The conference starts at 9am and ends at 5pm", CLOCK, PERMISSIVE)

    assert len(reminders) == 2
    # "ends" precedes "starts" in the phrase table
    assert [r.urgency for r in reminders] == [Urgency.THIS_WEEK, Urgency.TODAY]
    assert all(r.time_reference.original_text == "at 9am" for r in reminders)
    assert all(r.confidence == pytest.approx(0.9) for r in reminders)


def test_time_based_matches_whole_words():
    """Test that "ends" inside "friends" or "weekends" does not match."""
    assert extract_time_based("My friends spend weekends hiking", CLOCK, PERMISSIVE) == []


def test_event_based():
    """Test named occasions with their category prefix."""
    [reminder] = extract_event_based("Sarah's birthday is on Friday", CLOCK, PERMISSIVE)

    assert reminder.text == "Birthday: Sarah's birthday is on Friday"
    assert reminder.time_reference.relative_time == "This Friday"
    assert reminder.urgency == Urgency.THIS_WEEK
    assert reminder.confidence == pytest.approx(0.9)


def test_event_based_without_specific_time():
    """Test an ordinary event with a vague time."""
    [reminder] = extract_event_based("Lunch with the team sometime", CLOCK, PERMISSIVE)

    assert reminder.text == "Lunch: Lunch with the team sometime"
    assert reminder.urgency == Urgency.LATER
    assert reminder.confidence == pytest.approx(0.6)


def test_event_based_matches_whole_words():
    """Test that "latest" does not count as a test."""
    assert extract_event_based("Read the latest news tomorrow", CLOCK, PERMISSIVE) == []


def test_recurring():
    """Test periodicity phrasing."""
    [reminder] = extract_recurring("Take vitamins daily", CLOCK, PERMISSIVE)

    assert reminder.text == "Take vitamins"
    assert reminder.time_reference.original_text == "daily"
    assert reminder.time_reference.relative_time == "Recurring: daily"
    assert reminder.time_reference.parsed_date is None
    assert reminder.time_reference.recurrence_rule == "FREQ=DAILY"
    assert reminder.urgency == Urgency.LATER
    assert reminder.confidence == pytest.approx(0.7)


def test_recurring_weekday_and_weak_phrases():
    """Test weekday recurrence and phrases without a fixed period."""
    [monday] = extract_recurring("Team sync every Monday", CLOCK, PERMISSIVE)
    assert monday.text == "Team sync"
    assert monday.time_reference.recurrence_rule == "FREQ=WEEKLY;BYDAY=MO"
    assert monday.confidence == pytest.approx(0.5)

    [regular] = extract_recurring("Water the plants regularly", CLOCK, PERMISSIVE)
    assert regular.time_reference.recurrence_rule is None

    assert extract_recurring("Water the plants regularly", CLOCK, ExtractionConfig(min_confidence_threshold=0.6)) == []


def test_scoring_caps_at_one():
    """Test that boosts never push confidence past 1.0."""
    specific = TimeReference("at 3pm")
    vague = TimeReference("Soon")

    assert score_explicit(0.95, "Talk to Dana", specific) == 1.0
    assert score_explicit(0.9, "Renew passport", vague) == pytest.approx(0.9)
    assert score_time_based("The meeting at noon is a deadline", specific) == pytest.approx(1.0)
    assert score_event("wedding", vague) == pytest.approx(0.7)
    assert score_recurring("periodically") == pytest.approx(0.5)
