"""Configuration management from environment variables."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from nudgefinder.utils.constants import (
    CONSERVATIVE_MIN_CONFIDENCE,
    DEFAULT_MAX_REMINDERS,
    DEFAULT_MIN_CONFIDENCE,
    DEFAULT_TIMEZONE,
)
from nudgefinder.utils.time_utils import Clock

# Load .env file if it exists
load_dotenv()


@dataclass(frozen=True)
class ExtractionConfig:
    """Output cap and quality gate for one extraction."""

    max_reminders: int = DEFAULT_MAX_REMINDERS
    min_confidence_threshold: float = DEFAULT_MIN_CONFIDENCE  # Applied before consolidation

    def validate(self) -> None:
        """Validate the limits."""
        if self.max_reminders < 0:
            raise ValueError(f"max_reminders must be >= 0, got {self.max_reminders}")

        if not 0.0 <= self.min_confidence_threshold <= 1.0:
            raise ValueError(
                f"min_confidence_threshold must be within [0, 1], got {self.min_confidence_threshold}"
            )


DEFAULT_CONFIG = ExtractionConfig()
CONSERVATIVE_CONFIG = ExtractionConfig(min_confidence_threshold=CONSERVATIVE_MIN_CONFIDENCE)


class Config:
    """Application configuration loaded from environment variables."""

    # Extraction
    MAX_REMINDERS: int = int(os.getenv("NUDGEFINDER_MAX_REMINDERS", str(DEFAULT_MAX_REMINDERS)))
    MIN_CONFIDENCE: float = float(os.getenv("NUDGEFINDER_MIN_CONFIDENCE", str(DEFAULT_MIN_CONFIDENCE)))

    # Calendar
    TIMEZONE: str = os.getenv("NUDGEFINDER_TIMEZONE", DEFAULT_TIMEZONE)

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def extraction_config(cls) -> ExtractionConfig:
        """Build the extraction limits from the environment."""
        return ExtractionConfig(
            max_reminders=cls.MAX_REMINDERS,
            min_confidence_threshold=cls.MIN_CONFIDENCE,
        )

    @classmethod
    def validate(cls) -> None:
        """Validate configuration."""
        cls.extraction_config().validate()

        # Raises ValueError for unknown zones
        Clock(cls.TIMEZONE)

        if cls.LOG_LEVEL.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown LOG_LEVEL: {cls.LOG_LEVEL}")
