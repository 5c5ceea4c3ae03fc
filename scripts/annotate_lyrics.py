#!/usr/bin/env python3
"""CLI helper that prints syllable counts and rhyme groups for a lyric file."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional, Sequence

if __package__ in {None, ""}:
    repo_root = Path(__file__).resolve().parents[1]
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))

from songpad.app.services.analysis_service import AnalysisService
from songpad.core import BREAK_MARKER
from songpad.utils.logging_config import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Annotate lyrics with syllable counts and rhyme groups."
    )
    parser.add_argument(
        "path",
        nargs="?",
        default="-",
        help="Lyrics file to read (defaults to stdin).",
    )
    parser.add_argument(
        "--break-marker",
        default=BREAK_MARKER,
        help="Line content that separates sections (defaults to ---).",
    )
    parser.add_argument(
        "--format",
        choices=("json", "table"),
        default="json",
        help="Output format.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level for diagnostic output on stderr.",
    )
    return parser


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        text = _read_source(args.path)
    except OSError as exc:
        print(f"Could not read {args.path}: {exc}", file=sys.stderr)
        return 1

    break_marker = args.break_marker.strip() or BREAK_MARKER
    service = AnalysisService(break_marker=break_marker)
    analysis = service.analyze(text)

    if args.format == "table":
        print(service.formatter.render_text(analysis))
    else:
        print(json.dumps(analysis.as_dict(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
