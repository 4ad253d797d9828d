"""Inspect a saved search response from the command line.

Examples:
- python -m edsapi inspect response.json
- python -m edsapi inspect response.json --facet SourceType
- python -m edsapi inspect response.json --json
"""

from __future__ import annotations

import argparse
from dataclasses import asdict
import json
import logging
from pathlib import Path
import sys
from typing import TYPE_CHECKING, Any

from edsapi.errors import EdsError, MissingFieldError
from edsapi.results import ALL_FACETS, ResultSet

if TYPE_CHECKING:
    from collections.abc import Sequence

EXIT_OK = 0
EXIT_BAD_INPUT = 2


def summarize(results: ResultSet[Any], facet_id: str = ALL_FACETS) -> dict[str, Any]:
    """Collect the headline views of ``results`` into a plain dict.

    Strict fields absent from the response are reported as None.
    """
    try:
        search_time: int | None = results.total_search_time_ms()
    except MissingFieldError:
        search_time = None

    return {
        "total_hits": results.total_hits(),
        "search_time_ms": search_time,
        "records": len(results.records),
        "research_starters": len(results.research_starters),
        "publication_match": len(results.publication_match),
        "did_you_mean": results.did_you_mean(),
        "search_terms": results.search_terms(),
        "facets": [asdict(f) for f in results.facets(facet_id)],
    }


def _print_text(summary: dict[str, Any]) -> None:
    print(f"Hits:              {summary['total_hits']}")
    if summary["search_time_ms"] is not None:
        print(f"Search time:       {summary['search_time_ms']} ms")
    print(f"Records:           {summary['records']}")
    print(f"Research starters: {summary['research_starters']}")
    print(f"Publication match: {summary['publication_match']}")
    if summary["did_you_mean"]:
        print(f"Did you mean:      {summary['did_you_mean']}")
    if summary["search_terms"]:
        print(f"Search terms:      {' '.join(summary['search_terms'])}")
    for facet in summary["facets"]:
        print(f"\n{facet['label']} ({facet['id']})")
        for value in facet["values"]:
            print(f"  {value['hit_count']:>8}  {value['value']}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m edsapi",
        description="Inspect saved discovery-service search responses.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    inspect_cmd = sub.add_parser("inspect", help="Summarize a JSON response file")
    inspect_cmd.add_argument("path", type=Path, help="Path to a JSON search response")
    inspect_cmd.add_argument(
        "--facet",
        default=ALL_FACETS,
        help="Only show the facet with this id (default: all)",
    )
    inspect_cmd.add_argument(
        "--json", action="store_true", help="Print the summary as JSON"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        text = args.path.read_text(encoding="utf-8")
    except OSError as e:
        print(f"error: cannot read {args.path}: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    try:
        results = ResultSet.from_json(text)
    except EdsError as e:
        print(f"error: {e}", file=sys.stderr)
        if e.hint:
            print(f"hint: {e.hint}", file=sys.stderr)
        return EXIT_BAD_INPUT

    summary = summarize(results, args.facet)
    if args.json:
        print(json.dumps(summary, indent=2))
    else:
        _print_text(summary)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
