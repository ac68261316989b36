from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable

from .tokenizer import WordTokenizer

logger = logging.getLogger(__name__)

# word -> occurrence count, every count >= 1
FrequencyMap = Counter


def record(counts: FrequencyMap[str], word: str) -> None:
    if not word:
        raise ValueError("Cannot record an empty word")
    counts[word] += 1


def merge_counts(*maps: FrequencyMap[str]) -> FrequencyMap[str]:
    """Sum partial frequency maps into a new one."""
    merged: FrequencyMap[str] = FrequencyMap()
    for counts in maps:
        merged.update(counts)
    return merged


class FrequencyAggregator:
    def __init__(self, tokenizer: WordTokenizer | None = None):
        self.tokenizer = tokenizer or WordTokenizer()
        self.counts: FrequencyMap[str] = FrequencyMap()
        self.line_count = 0

    @property
    def total_words(self) -> int:
        return sum(self.counts.values())

    def feed_line(self, line: str) -> None:
        for word in self.tokenizer.iter_words(line):
            record(self.counts, word)
        self.line_count += 1

    def feed(self, lines: Iterable[str]) -> FrequencyMap[str]:
        for line in lines:
            self.feed_line(line)
        logger.debug(
            "Ingested %d lines: %d words, %d distinct", self.line_count, self.total_words, len(self.counts)
        )
        return self.counts


__all__ = ["FrequencyMap", "record", "merge_counts", "FrequencyAggregator"]
