"""Command-line entrypoint: ``linkpreview URL [URL ...]`` or ``linkpreview --file urls.txt``."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

from linkpreview.config import get_settings
from linkpreview.logging_config import setup_logging
from linkpreview.scrape import InputError, ScrapeOrchestrator, ScrapeRecord

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def read_url_file(path: Path) -> list[str]:
    """One URL per line; blank lines and ``#`` comments are skipped."""
    urls = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            urls.append(line)
    return urls


def render_output(records: Sequence[ScrapeRecord]) -> str:
    """A single object for one URL, a JSON array for a batch."""
    payload: Any
    if len(records) == 1:
        payload = records[0].to_dict()
    else:
        payload = [record.to_dict() for record in records]
    return json.dumps(payload, indent=2, ensure_ascii=False)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linkpreview",
        description="Extract page title and preview image for one or more URLs.",
    )
    parser.add_argument("urls", nargs="*", metavar="URL", help="page URL(s) to scrape")
    parser.add_argument(
        "-f",
        "--file",
        type=Path,
        help="file with one URL per line (# starts a comment)",
    )
    parser.add_argument("--log-level", help="override LINKPREVIEW_LOG_LEVEL")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(args.log_level or settings.log_level, stream=sys.stderr)

    urls = list(args.urls)
    if args.file is not None:
        try:
            urls.extend(read_url_file(args.file))
        except OSError as exc:
            print(f"error: cannot read {args.file}: {exc}", file=sys.stderr)
            return EXIT_USAGE

    orchestrator = ScrapeOrchestrator(settings)
    try:
        records = asyncio.run(orchestrator.run(urls))
    except InputError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_USAGE
    except Exception:
        logger.exception("scrape run failed", extra={"url_count": len(urls)})
        return EXIT_FAILURE

    print(render_output(records))
    if len(records) == 1 and not records[0].ok:
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
