# tagindex/cli.py
# Command line front end: index a page (URL, file or stdin) and print matches as JSON.
# CLI:
#   tagindex https://example.com --tag a --tag img
#   tagindex page.html --attr class=headline --raw

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Tuple, Union

import httpx
from bs4 import BeautifulSoup

from .errors import TagIndexError
from .indexer import build_index
from .loader import parse_file, parse_markup, parse_url
from .lookup import find, find_all
from .schemas import ErrorResponse, LookupResponse, NodeSummary, RawMatch
from .settings import get_settings

logger = logging.getLogger(__name__)


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tagindex",
        description="Index an HTML document by tag and attribute and query it.",
    )
    parser.add_argument("source", help="http(s) URL, file path, or '-' for stdin")
    parser.add_argument(
        "--tag", "-t",
        action="append",
        default=[],
        help="Tag name to look up (repeatable)",
    )
    parser.add_argument(
        "--attr", "-a",
        type=_attr_pair,
        help="Attribute pair KEY=VALUE to look up (an empty KEY matches text content)",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Search the parse tree directly instead of building the index",
    )
    parser.add_argument("--parser", help="bs4 tree builder (default: TAGINDEX_PARSER or html.parser)")
    return parser.parse_args(args)


def _attr_pair(value: str) -> Tuple[str, str]:
    key, sep, val = value.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {value!r}")
    return key, val


def load_source(source: str, parser: Optional[str] = None) -> BeautifulSoup:
    if source == "-":
        return parse_markup(sys.stdin.buffer.read(), parser)
    if source.startswith(("http://", "https://")):
        return parse_url(source, parser=parser)
    return parse_file(source, parser)


def run(ns: argparse.Namespace) -> LookupResponse:
    get_settings().require_parser(ns.parser)
    soup = load_source(ns.source, ns.parser)
    matches: List[Union[NodeSummary, RawMatch]] = []

    if ns.raw:
        found = []
        if ns.tag:
            found += find_all(*ns.tag)(soup)
        if ns.attr:
            found += find(*ns.attr)(soup)
        matches = [RawMatch.from_element(el) for el in found]
    else:
        root = build_index(soup)
        nodes = []
        if ns.tag:
            nodes += root.find_all(*ns.tag)
        if ns.attr:
            nodes += root.find(*ns.attr)
        if not ns.tag and not ns.attr:
            nodes = [root]
        matches = [NodeSummary.from_node(n) for n in nodes]

    return LookupResponse(
        source=ns.source,
        mode="raw" if ns.raw else "index",
        count=len(matches),
        matches=matches,
    )


def main(argv: Optional[List[str]] = None) -> int:
    ns = parse_args(argv)
    logging.basicConfig(level=get_settings().LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    try:
        response = run(ns)
    except (TagIndexError, OSError, httpx.HTTPError) as e:
        logger.debug("Lookup failed", exc_info=True)
        err = ErrorResponse(error=type(e).__name__, detail=str(e))
        print(err.model_dump_json(), file=sys.stderr)
        return 1

    print(response.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
