from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Sequence

from .config import RankingConfig

logger = logging.getLogger(__name__)


class RankOutOfRange(IndexError):
    """Raised when more top entries are requested than were ranked."""


@dataclass(frozen=True)
class RankedEntry:
    word: str
    count: int


@dataclass
class RankingResult:
    entries: tuple[RankedEntry, ...]
    top: tuple[RankedEntry, ...]
    top_size: int
    singleton_count: int

    @property
    def distinct_words(self) -> int:
        return len(self.entries)


def sort_entries(counts: Mapping[str, int], tie_break: str = "alphabetical") -> list[RankedEntry]:
    entries = [RankedEntry(word, count) for word, count in counts.items()]
    if tie_break == "alphabetical":
        entries.sort(key=lambda e: e.word)
    elif tie_break != "first_seen":
        raise ValueError(f"Unknown tie-break policy: {tie_break}")
    # stable, so equal counts keep the order established above
    entries.sort(key=lambda e: e.count, reverse=True)
    return entries


def top_n_size(distinct_words: int, cfg: RankingConfig | None = None) -> int:
    cfg = cfg or RankingConfig()
    if cfg.base_top < 0 or cfg.max_top < cfg.base_top:
        raise ValueError(f"Invalid top-N tiers: base_top={cfg.base_top}, max_top={cfg.max_top}")
    if distinct_words > cfg.max_top:
        return cfg.max_top
    if distinct_words > cfg.base_top:
        return cfg.base_top
    if cfg.clamp_small:
        return min(distinct_words, cfg.base_top)
    return 0


def take_top(entries: Sequence[RankedEntry], n: int) -> tuple[RankedEntry, ...]:
    if n < 0 or n > len(entries):
        raise RankOutOfRange(f"Cannot take top {n} of {len(entries)} ranked entries")
    return tuple(entries[:n])


def singleton_threshold(entries: Sequence[RankedEntry]) -> int:
    """Count the leading entries seen more than once.

    ``entries`` must be sorted by descending count, so everything past
    this index occurs exactly once.
    """
    index = 0
    while index < len(entries) and entries[index].count > 1:
        index += 1
    return index


def rank(counts: Mapping[str, int], cfg: RankingConfig | None = None) -> RankingResult:
    cfg = cfg or RankingConfig()
    entries = sort_entries(counts, cfg.tie_break)
    size = top_n_size(len(entries), cfg)
    logger.debug("Ranking %d distinct words, reporting top %d", len(entries), size)
    return RankingResult(
        entries=tuple(entries),
        top=take_top(entries, size),
        top_size=size,
        singleton_count=len(entries) - singleton_threshold(entries),
    )


__all__ = [
    "RankOutOfRange",
    "RankedEntry",
    "RankingResult",
    "sort_entries",
    "top_n_size",
    "take_top",
    "singleton_threshold",
    "rank",
]
