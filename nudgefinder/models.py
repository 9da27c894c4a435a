"""Data models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from dateutil.parser import isoparse

from nudgefinder.parser.patterns import looks_specific
from nudgefinder.utils.constants import NO_TIME_SPECIFIED
from nudgefinder.utils.time_utils import to_utc


class Urgency(Enum):
    """How soon a reminder matters, most urgent first."""

    IMMEDIATE = "Immediate"
    TODAY = "Today"
    THIS_WEEK = "This Week"
    LATER = "Later"

    @property
    def sort_order(self) -> int:
        return list(Urgency).index(self)

    @classmethod
    def from_label(cls, label: str | None) -> "Urgency":
        """Look up an urgency by label ("today", "This Week"), defaulting to LATER."""
        if not label:
            return cls.LATER
        wanted = label.strip().lower().replace("_", " ")
        for urgency in cls:
            if urgency.value.lower() == wanted:
                return urgency
        return cls.LATER


@dataclass(frozen=True)
class TimeReference:
    """Normalized time reference found in a sentence."""

    original_text: str
    parsed_date: datetime | None = None
    relative_time: str | None = None
    recurrence_rule: str | None = None  # iCalendar RRULE body

    @property
    def is_specific(self) -> bool:
        """True for absolute instants, weekdays, clock times and calendar dates."""
        return self.parsed_date is not None or looks_specific(self.original_text)

    @property
    def display_text(self) -> str:
        if self.relative_time:
            return self.relative_time
        if self.parsed_date is not None:
            return self.parsed_date.strftime("%b %d, %Y at %I:%M %p")
        return self.original_text


@dataclass(frozen=True)
class ReminderItem:
    """A reminder extracted from transcript text."""

    text: str
    time_reference: TimeReference
    urgency: Urgency = Urgency.LATER
    confidence: float = 0.5  # 0-1 score

    def __post_init__(self) -> None:
        # Clamp confidence between 0 and 1
        object.__setattr__(self, "confidence", max(0.0, min(1.0, self.confidence)))

    @property
    def display_text(self) -> str:
        return f"{self.text} - {self.time_reference.display_text}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to JSON-compatible types (dates as UTC ISO strings)."""
        ref = self.time_reference
        return {
            "text": self.text,
            "urgency": self.urgency.value,
            "confidence": round(self.confidence, 4),
            "time_reference": {
                "original_text": ref.original_text,
                "parsed_date": to_utc(ref.parsed_date, "UTC").isoformat() if ref.parsed_date else None,
                "relative_time": ref.relative_time,
                "recurrence_rule": ref.recurrence_rule,
                "is_specific": ref.is_specific,
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ReminderItem":
        """Build a reminder from a dict, tolerating missing optional fields.

        Accepts both the nested shape produced by to_dict() and the flat shape
        summarization services return ({"text", "urgency", "timeReference",
        "confidence"}).
        """
        raw_ref = data.get("time_reference", data.get("timeReference"))
        if isinstance(raw_ref, dict):
            parsed_date = raw_ref.get("parsed_date")
            time_reference = TimeReference(
                original_text=raw_ref.get("original_text") or NO_TIME_SPECIFIED,
                parsed_date=isoparse(parsed_date) if parsed_date else None,
                relative_time=raw_ref.get("relative_time"),
                recurrence_rule=raw_ref.get("recurrence_rule"),
            )
        else:
            time_reference = TimeReference(original_text=raw_ref or NO_TIME_SPECIFIED)

        confidence = data.get("confidence")
        return cls(
            text=str(data.get("text", "")).strip(),
            time_reference=time_reference,
            urgency=Urgency.from_label(data.get("urgency")),
            confidence=0.8 if confidence is None else float(confidence),
        )
