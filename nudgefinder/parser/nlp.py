"""Reminder extraction - the main pipeline."""

import logging
from typing import Callable

from nudgefinder.config import DEFAULT_CONFIG, ExtractionConfig
from nudgefinder.engine.consolidation import consolidate, merge_reminder_batches, rank
from nudgefinder.engine.strategies import STRATEGIES
from nudgefinder.models import ReminderItem
from nudgefinder.parser.segmenter import chunk_sentences, split_sentences
from nudgefinder.utils.constants import DEFAULT_CHUNK_CHARS
from nudgefinder.utils.time_utils import Clock

logger = logging.getLogger(__name__)

Segmenter = Callable[[str], list[str]]


class ReminderExtractor:
    """Extracts ranked reminders from transcript text.

    Holds only read-only collaborators, so one instance can serve many
    callers.
    """

    def __init__(
        self,
        config: ExtractionConfig = DEFAULT_CONFIG,
        clock: Clock | None = None,
        segment: Segmenter = split_sentences,
    ):
        config.validate()
        self.config = config
        self.clock = clock or Clock()
        self.segment = segment

    def extract_reminders(self, text: str) -> list[ReminderItem]:
        """Extract reminders from text.

        Pipeline:
        1. Segment into sentences
        2. Run explicit, time-based, event-based and recurring strategies
           on each sentence (each drops candidates below the threshold)
        3. Consolidate similar candidates
        4. Rank by urgency, then confidence
        5. Truncate to max_reminders

        Returns:
            Ranked reminders; empty when nothing qualifies
        """
        sentences = self.segment(text)
        candidates = []

        for sentence in sentences:
            for strategy in STRATEGIES:
                candidates.extend(
                    candidate
                    for candidate in strategy(sentence, self.clock, self.config)
                    if candidate.confidence >= self.config.min_confidence_threshold
                )

        logger.debug(f"{len(candidates)} candidates from {len(sentences)} sentences")

        reminders = rank(consolidate(candidates))[: self.config.max_reminders]

        logger.info(f"Extracted {len(reminders)} reminders")
        return reminders

    def extract_reminders_chunked(
        self, text: str, max_chunk_chars: int = DEFAULT_CHUNK_CHARS
    ) -> list[ReminderItem]:
        """Extract reminders from a long transcript chunk by chunk.

        Each chunk is extracted on its own and the results are merged,
        dropping reminders that repeat across chunks.
        """
        chunks = chunk_sentences(self.segment(text), max_chunk_chars)
        logger.debug(f"Processing transcript in {len(chunks)} chunks")

        batches = [self.extract_reminders(chunk) for chunk in chunks]
        return merge_reminder_batches(batches, self.config.max_reminders)


def extract_reminders(
    text: str,
    config: ExtractionConfig = DEFAULT_CONFIG,
    clock: Clock | None = None,
) -> list[ReminderItem]:
    """Extract reminders with the default segmenter."""
    return ReminderExtractor(config, clock).extract_reminders(text)
