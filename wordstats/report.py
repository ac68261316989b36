from __future__ import annotations

import json

from .analyzer import Statistics


class ReportFormatter:
    def __init__(self, stats: Statistics):
        self.stats = stats

    def render(self, fmt: str = "text", indent: int = 2) -> str:
        if fmt == "text":
            return self.to_text()
        if fmt == "json":
            return self.to_json(indent=indent)
        if fmt == "markdown":
            return self.to_markdown_tables()
        raise ValueError(f"Unknown report format: {fmt}")

    def to_text(self) -> str:
        s = self.stats
        ranked = ", ".join(f"{i}. {e.word}:{e.count}" for i, e in enumerate(s.top, start=1))
        lines = [
            "HERE are the word statistics of that text:",
            f"There are {s.distinct_words} distinct words used in that text.",
            f"The top {s.top_size} ranked words (with their frequencies) are:",
            ranked,
            f"Among its {s.distinct_words} words, {s.singleton_count} of them appear exactly once.",
        ]
        return "\n".join(lines)

    def to_json(self, indent: int = 2) -> str:
        payload = {
            "distinct_words": self.stats.distinct_words,
            "total_words": self.stats.total_words,
            "lines": self.stats.line_count,
            "top": [{"rank": i, "word": e.word, "count": e.count} for i, e in enumerate(self.stats.top, start=1)],
            "singleton_count": self.stats.singleton_count,
            "debug": self.stats.debug,
        }
        return json.dumps(payload, indent=indent)

    def to_markdown_tables(self) -> str:
        s = self.stats
        lines = [
            "### Summary",
            "| Statistic | Value |",
            "| --- | --- |",
            f"| Distinct words | {s.distinct_words} |",
            f"| Total words | {s.total_words} |",
            f"| Appearing once | {s.singleton_count} |",
            "",
            f"### Top {s.top_size}",
            "| Rank | Word | Count |",
            "| --- | --- | --- |",
        ]
        for i, e in enumerate(s.top, start=1):
            lines.append(f"| {i} | {e.word} | {e.count} |")
        lines.append("")
        return "\n".join(lines)


__all__ = ["ReportFormatter"]
