from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from .config import StatsConfig
from .frequency import FrequencyAggregator
from .ranking import RankedEntry, rank
from .tokenizer import WordTokenizer

logger = logging.getLogger(__name__)


@dataclass
class Statistics:
    distinct_words: int
    top: tuple[RankedEntry, ...]
    top_size: int
    singleton_count: int
    total_words: int
    line_count: int
    debug: dict | None = None


class WordStatsAnalyzer:
    def __init__(self, cfg: StatsConfig | None = None):
        self.cfg = cfg or StatsConfig()
        self.tokenizer = WordTokenizer(self.cfg.tokenizer)

    def analyze_lines(self, lines: Iterable[str]) -> Statistics:
        aggregator = FrequencyAggregator(self.tokenizer)
        counts = aggregator.feed(lines)
        ranking = rank(counts, self.cfg.ranking)
        debug = None
        if self.cfg.debug:
            debug = {
                "ranked": [[e.word, e.count] for e in ranking.entries],
                "config": self.cfg.to_dict(),
            }
        return Statistics(
            distinct_words=ranking.distinct_words,
            top=ranking.top,
            top_size=ranking.top_size,
            singleton_count=ranking.singleton_count,
            total_words=aggregator.total_words,
            line_count=aggregator.line_count,
            debug=debug,
        )

    def analyze(self, text: str) -> Statistics:
        return self.analyze_lines(text.splitlines())


__all__ = ["Statistics", "WordStatsAnalyzer"]
