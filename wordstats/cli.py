from __future__ import annotations

import argparse
import io
import logging
import sys
from pathlib import Path

from .config import StatsConfig
from .analyzer import WordStatsAnalyzer
from .report import ReportFormatter

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Word frequency statistics for plain text")

    parser.add_argument("path", nargs="?", default=None, help="Text file to read (default: stdin)")
    parser.add_argument("--stdin", action="store_true", help="Read lines from stdin even if a path is given")
    parser.add_argument("--config", "-c", help="Path to YAML/JSON stats config", default=None)
    parser.add_argument(
        "--format", choices=["text", "json", "markdown"], default=None, help="Report format (overrides config)"
    )
    parser.add_argument("--encoding", default="utf-8", help="File encoding when reading a path (default: utf-8)")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level for stderr diagnostics",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")

    cfg = StatsConfig.load(args.config) if args.config else StatsConfig()
    fmt = args.format or cfg.report.format
    analyzer = WordStatsAnalyzer(cfg)

    if args.stdin or args.path is None:
        # undecodable bytes become separators instead of aborting the run
        if isinstance(sys.stdin, io.TextIOWrapper):
            sys.stdin.reconfigure(errors="replace")
        interactive = sys.stdin.isatty()
        if interactive:
            print("READING text from STDIN. Hit ctrl-d when done entering text.", file=sys.stderr)
        stats = analyzer.analyze_lines(sys.stdin)
        if interactive:
            print("DONE.", file=sys.stderr)
    else:
        path = Path(args.path)
        if not path.is_file():
            parser.error(f"no such file: {path}")
        logger.info("Reading %s", path)
        with path.open(encoding=args.encoding, errors="replace") as fh:
            stats = analyzer.analyze_lines(fh)

    print(ReportFormatter(stats).render(fmt, indent=cfg.report.json_indent))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
