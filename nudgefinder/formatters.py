"""Text formatters for extracted reminders."""

import json
from datetime import datetime

from nudgefinder.engine.recurrence import get_next_occurrence
from nudgefinder.models import ReminderItem, Urgency

URGENCY_EMOJI = {
    Urgency.IMMEDIATE: "🔥",
    Urgency.TODAY: "🚨",
    Urgency.THIS_WEEK: "⚠️",
    Urgency.LATER: "🔔",
}


def format_reminder(reminder: ReminderItem, now: datetime) -> str:
    """Format a reminder as a few lines of text."""
    ref = reminder.time_reference
    emoji = URGENCY_EMOJI[reminder.urgency]

    lines = [f"{emoji} {reminder.text}"]
    lines.append(f"   ⏰ {ref.display_text} ({reminder.urgency.value}, {reminder.confidence:.0%} confident)")

    if ref.parsed_date is not None:
        lines.append(f"   📅 {ref.parsed_date.strftime('%b %d, %Y at %I:%M %p')}")

    # Recurring
    if ref.recurrence_rule:
        next_date = get_next_occurrence(ref.recurrence_rule, now)
        if next_date is not None:
            lines.append(f"   🔁 Next: {next_date.strftime('%a %b %d')} ({ref.recurrence_rule})")

    return "\n".join(lines)


def format_reminder_list(reminders: list[ReminderItem], now: datetime) -> str:
    """Format a list of reminders."""
    if not reminders:
        return "No reminders found."

    lines = [f"Reminders ({len(reminders)})\n"]
    lines.extend(format_reminder(reminder, now) for reminder in reminders)
    return "\n\n".join(lines)


def format_reminders_json(reminders: list[ReminderItem]) -> str:
    """Format reminders as a JSON array."""
    return json.dumps([reminder.to_dict() for reminder in reminders], indent=2, ensure_ascii=False)
