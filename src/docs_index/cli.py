"""docs-index command-line interface.

Builds an in-memory keyword index over a directory of Markdown documents
and answers queries against it.
"""

import argparse
import json
import logging
import sys
from dataclasses import asdict
from typing import TextIO

from .config import IndexerConfig, load_config
from .errors import DocsIndexError
from .holder import IndexHolder
from .observability.base import LoggingMetricsHook, MetricsHook, NoOpMetricsHook
from .pipeline import IndexBuild
from .search.types import SearchResult

logger = logging.getLogger(__name__)

RELOAD_COMMAND = ":reload"


def _print_build(build: IndexBuild, as_json: bool, out: TextIO) -> None:
    if as_json:
        payload = {
            "directory": build.directory,
            **asdict(build.index.stats()),
            "skipped": build.skipped_paths,
        }
        print(json.dumps(payload, indent=2), file=out)
        return

    stats = build.index.stats()
    print(f"Indexed {build.directory}:", file=out)
    print(f"  Documents: {stats.documents}", file=out)
    print(f"  Sections: {stats.sections}", file=out)
    print(f"  Terms: {stats.terms}", file=out)
    if build.skipped:
        print(f"  Skipped: {len(build.skipped)}", file=out)
        for error in build.skipped:
            print(f"    {error.path}: {error.reason}", file=out)


def _print_results(
    results: list[SearchResult],
    config: IndexerConfig,
    as_json: bool,
    out: TextIO,
) -> None:
    if as_json:
        payload = [r.to_dict(config.excerpt_length) for r in results]
        print(json.dumps(payload, indent=2), file=out)
        return

    if not results:
        print("No results.", file=out)
        return

    for rank, result in enumerate(results, start=1):
        heading = result.heading or "(untitled)"
        line = f"{rank}. [{result.score}] {result.document_path} :: {heading}"
        print(line, file=out)
        excerpt = result.excerpt(config.excerpt_length)
        if excerpt:
            print(f"   {excerpt}", file=out)


def cmd_index(args: argparse.Namespace, holder: IndexHolder, out: TextIO) -> int:
    _print_build(holder.reindex(args.directory), args.json, out)

    if args.interactive:
        return _interactive(args, holder, out)
    return 0


def _interactive(args: argparse.Namespace, holder: IndexHolder, out: TextIO) -> int:
    for line in sys.stdin:
        query = line.strip()
        if query == RELOAD_COMMAND:
            _print_build(holder.reindex(args.directory), args.json, out)
            out.flush()
            continue
        results = holder.search(query, limit=args.limit)
        _print_results(results, holder.config, args.json, out)
        out.flush()
    return 0


def cmd_query(args: argparse.Namespace, holder: IndexHolder, out: TextIO) -> int:
    holder.reindex(args.dir)
    results = holder.search(args.text, limit=args.limit)
    _print_results(results, holder.config, args.json, out)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docs-index",
        description="Index Markdown documents by section and search them by keyword",
    )
    parser.add_argument("--config", help="Path to YAML config file")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command")

    p_index = subparsers.add_parser(
        "index",
        help="Build the index for a directory",
        description="Build the index and print a summary. With --interactive, "
        f"read queries from stdin; '{RELOAD_COMMAND}' re-indexes the directory.",
    )
    p_index.add_argument("directory", help="Directory containing .md files")
    p_index.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Keep the index in memory and answer queries from stdin",
    )
    p_index.add_argument("--limit", type=int, help="Maximum results per query")
    p_index.add_argument("--json", action="store_true", help="Output JSON")

    p_query = subparsers.add_parser(
        "query",
        help="Search documents by keyword",
        description="Index a directory and print ranked sections matching TEXT",
    )
    p_query.add_argument("text", help="Query text (terms are OR-ed)")
    p_query.add_argument(
        "-d", "--dir", default=".", help="Directory to index (default: .)"
    )
    p_query.add_argument("--limit", type=int, help="Maximum number of results")
    p_query.add_argument("--json", action="store_true", help="Output JSON")

    return parser


def main(argv: list[str] | None = None, out: TextIO | None = None) -> int:
    out = out or sys.stdout
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if not args.command:
        parser.print_help()
        return 2
    if args.limit is not None and args.limit < 1:
        parser.error("--limit must be at least 1")

    metrics_hook: MetricsHook = (
        LoggingMetricsHook() if args.verbose else NoOpMetricsHook()
    )

    command_map = {
        "index": cmd_index,
        "query": cmd_query,
    }

    try:
        config = load_config(args.config)
        holder = IndexHolder(config=config, metrics_hook=metrics_hook)
        return command_map[args.command](args, holder, out)
    except (DocsIndexError, OSError) as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
