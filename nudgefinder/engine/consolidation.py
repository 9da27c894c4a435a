"""Consolidation, ranking and merging of extracted reminders."""

from typing import Iterable

from nudgefinder.models import ReminderItem
from nudgefinder.utils.constants import BATCH_SIMILARITY_THRESHOLD, SIMILARITY_THRESHOLD


def jaccard_similarity(first: str, second: str) -> float:
    """Jaccard similarity of the lower-cased whitespace-separated word sets."""
    words1 = set(first.lower().split())
    words2 = set(second.lower().split())

    union = words1 | words2
    if not union:
        return 0.0
    return len(words1 & words2) / len(union)


def are_similar(first: ReminderItem, second: ReminderItem) -> bool:
    """Similar text, or the same time reference phrase."""
    if jaccard_similarity(first.text, second.text) > SIMILARITY_THRESHOLD:
        return True
    return (
        first.time_reference.original_text.lower()
        == second.time_reference.original_text.lower()
    )


def merge_group(group: list[ReminderItem]) -> ReminderItem:
    """Merge similar reminders into one.

    Takes the text of the most confident member, the most urgent tier, the
    first specific time reference and the mean confidence. Ties go to the
    earliest member.
    """
    best = max(group, key=lambda item: item.confidence)
    urgency = min((item.urgency for item in group), key=lambda u: u.sort_order)
    time_reference = next(
        (item.time_reference for item in group if item.time_reference.is_specific),
        group[0].time_reference,
    )
    confidence = sum(item.confidence for item in group) / len(group)

    return ReminderItem(
        text=best.text,
        time_reference=time_reference,
        urgency=urgency,
        confidence=confidence,
    )


def consolidate(reminders: list[ReminderItem]) -> list[ReminderItem]:
    """Merge near-duplicate reminders in a single ordered pass.

    Each unprocessed reminder claims every later unprocessed reminder similar
    to it; groups of one pass through unchanged.
    """
    consolidated = []
    processed: set[int] = set()

    for i, current in enumerate(reminders):
        if i in processed:
            continue

        group = [current]
        for j in range(i + 1, len(reminders)):
            if j not in processed and are_similar(current, reminders[j]):
                group.append(reminders[j])
                processed.add(j)

        consolidated.append(merge_group(group) if len(group) > 1 else current)
        processed.add(i)

    return consolidated


def rank(reminders: Iterable[ReminderItem]) -> list[ReminderItem]:
    """Sort most urgent first, then most confident first (stable)."""
    return sorted(reminders, key=lambda item: (item.urgency.sort_order, -item.confidence))


def merge_reminder_batches(
    batches: Iterable[list[ReminderItem]], limit: int
) -> list[ReminderItem]:
    """Combine reminders extracted from separate chunks of one transcript.

    A reminder whose text closely matches one already kept is dropped.

    Args:
        batches: Per-chunk reminder lists, in transcript order
        limit: Maximum number of reminders to return

    Returns:
        Ranked, de-duplicated reminders
    """
    unique: list[ReminderItem] = []

    for batch in batches:
        for reminder in batch:
            is_duplicate = any(
                jaccard_similarity(reminder.text, existing.text) > BATCH_SIMILARITY_THRESHOLD
                for existing in unique
            )
            if not is_duplicate:
                unique.append(reminder)

    return rank(unique)[:limit]
