from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
import json

import yaml


@dataclass
class TokenizerConfig:
    terminators: str = ".!?"
    keep_apostrophes: bool = True


@dataclass
class RankingConfig:
    base_top: int = 10
    max_top: int = 100
    clamp_small: bool = True  # False reproduces the empty top list for tiny inputs
    tie_break: str = "alphabetical"  # "alphabetical" | "first_seen"


@dataclass
class ReportConfig:
    format: str = "text"  # "text" | "json" | "markdown"
    json_indent: int = 2


@dataclass
class StatsConfig:
    tokenizer: TokenizerConfig = field(default_factory=TokenizerConfig)
    ranking: RankingConfig = field(default_factory=RankingConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    debug: bool = False

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "StatsConfig":
        return cls(
            tokenizer=TokenizerConfig(**data.get("tokenizer", {})),
            ranking=RankingConfig(**data.get("ranking", {})),
            report=ReportConfig(**data.get("report", {})),
            debug=data.get("debug", False),
        )

    @classmethod
    def load(cls, path: str | Path) -> "StatsConfig":
        path = Path(path)
        if path.suffix.lower() in {".yaml", ".yml"}:
            data = yaml.safe_load(path.read_text())
        else:
            data = json.loads(path.read_text())
        return cls.from_mapping(data or {})

    def to_dict(self) -> dict[str, Any]:
        return {
            "tokenizer": dict(self.tokenizer.__dict__),
            "ranking": dict(self.ranking.__dict__),
            "report": dict(self.report.__dict__),
            "debug": self.debug,
        }


__all__ = [
    "TokenizerConfig",
    "RankingConfig",
    "ReportConfig",
    "StatsConfig",
]
