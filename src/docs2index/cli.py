"""Command line entry point for docs2index."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from docs2index.config import DOCS2INDEX_WORKERS
from docs2index.discovery import discover_pages
from docs2index.exceptions import ConfigError
from docs2index.pool import IndexPool
from docs2index.schemas import SearchIndex
from docs2index.versions import load_versions

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_NAME = "search-doc.json"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="docs2index",
        description="Extract search records from a built documentation site.",
    )
    parser.add_argument("build_dir", type=Path, help="Directory holding the rendered HTML pages")
    parser.add_argument("--base-url", default="/", help="URL prefix the site is served under")
    parser.add_argument("--versions", type=Path, help="JSON version table (list or object)")
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Glob pattern of routes to skip (repeatable)",
    )
    parser.add_argument("--workers", type=int, default=DOCS2INDEX_WORKERS, help="Number of worker processes")
    parser.add_argument("--output", type=Path, help=f"Output file (default: BUILD_DIR/{DEFAULT_OUTPUT_NAME})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.build_dir.is_dir():
        parser.error(f"Build directory not found: {args.build_dir}")
    if args.workers < 1:
        parser.error("--workers must be at least 1")

    versions = None
    if args.versions:
        try:
            versions = load_versions(args.versions)
        except ConfigError as exc:
            parser.error(str(exc))

    tasks = discover_pages(args.build_dir, args.base_url, args.exclude)
    result = IndexPool(workers=args.workers, versions=versions).run(tasks)

    output = args.output or args.build_dir / DEFAULT_OUTPUT_NAME
    document = SearchIndex(search_docs=result.records)
    output.write_text(document.model_dump_json(by_alias=True), encoding="utf-8")

    logger.info(
        "Indexed %d of %d pages (%d records) into %s",
        result.indexed_pages,
        result.total_pages,
        len(result.records),
        output,
    )
    return 0
