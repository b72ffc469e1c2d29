"""
CLI for turning formatter diff output into edits.

Usage:
    # Run the formatter and print edits as JSON
    python -m fmtdiff.cli edits src/main.rs

    # Interpret a saved report instead of running the formatter
    python -m fmtdiff.cli edits src/main.rs --report rustfmt.diff

    # Print the document with the edits applied
    python -m fmtdiff.cli preview src/main.rs
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List

from fmtdiff.config.settings import settings
from fmtdiff.domain.schemas.diff import EditOperation
from fmtdiff.domain.schemas.format import OutputMode
from fmtdiff.domain.tools.apply_edits import apply_edits
from fmtdiff.services.format_service import FormatService
from fmtdiff.shared.logging import setup_logging
from fmtdiff.tools.formatter import ToolReportedFailure

logger = logging.getLogger(__name__)


async def _collect_edits(args: argparse.Namespace) -> List[EditOperation]:
    service = FormatService()
    mode = OutputMode(args.mode)

    if args.report:
        report = Path(args.report).read_text(encoding="utf-8", errors="replace")
        return service.edits_from_output(args.path, report, mode)

    result = await service.format_file(args.path, mode)
    if result.advisory:
        print(result.advisory, file=sys.stderr)
    return result.edits


async def cmd_edits(args: argparse.Namespace) -> None:
    """Print edits as JSON."""
    edits = await _collect_edits(args)
    print(json.dumps([e.model_dump() for e in edits], indent=2, ensure_ascii=False))


async def cmd_preview(args: argparse.Namespace) -> None:
    """Print the document with edits applied."""
    edits = await _collect_edits(args)
    original = Path(args.path).read_text(encoding="utf-8")
    sys.stdout.write(apply_edits(original, edits))


def main():
    parser = argparse.ArgumentParser(
        description="Formatter diff -> text edits",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (("edits", "Print edits as JSON"), ("preview", "Print formatted document")):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("path", help="Source file to format")
        sub.add_argument("--report", help="Read formatter output from this file instead of running it")
        sub.add_argument(
            "--mode",
            choices=[m.value for m in OutputMode],
            default=settings.default_mode,
            help="Formatter write mode",
        )

    args = parser.parse_args()
    # stdout 은 결과 출력용
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, stream=sys.stderr)

    try:
        if args.command == "edits":
            asyncio.run(cmd_edits(args))
        elif args.command == "preview":
            asyncio.run(cmd_preview(args))
    except ToolReportedFailure as e:
        logger.error("FORMAT_FAILED path=%s error=%s", args.path, e)
        print(str(e), file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
