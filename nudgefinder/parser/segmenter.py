"""Sentence segmentation."""

import re

from nudgefinder.utils.constants import MIN_SENTENCE_LENGTH

# Sentence-ending punctuation, except between digits (3.5, 5.30)
_SENTENCE_BREAK = re.compile(r'[.!?]+(?!\d)|(?<!\d)[.!?]+|\n+')
_DOTTED_MERIDIEM = re.compile(r'\b([ap])\.m\.', re.IGNORECASE)


def split_sentences(text: str, min_length: int = MIN_SENTENCE_LENGTH) -> list[str]:
    """Split text into sentences, in order.

    Breaks on ".", "!", "?" and line breaks. Fragments of `min_length`
    characters or fewer are dropped.
    """
    # "3 p.m." would otherwise break mid-sentence
    text = _DOTTED_MERIDIEM.sub(r'\1m', text)

    sentences = (part.strip() for part in _SENTENCE_BREAK.split(text))
    return [sentence for sentence in sentences if len(sentence) > min_length]


def chunk_sentences(sentences: list[str], max_chars: int) -> list[str]:
    """Group consecutive sentences into chunks of at most `max_chars`.

    A single sentence longer than `max_chars` becomes its own chunk.
    """
    chunks: list[str] = []
    current: list[str] = []
    size = 0

    for sentence in sentences:
        added = len(sentence) + (2 if current else 0)
        if current and size + added > max_chars:
            chunks.append('. '.join(current))
            current, size = [], 0
            added = len(sentence)
        current.append(sentence)
        size += added

    if current:
        chunks.append('. '.join(current))

    return chunks
