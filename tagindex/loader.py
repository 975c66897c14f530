# tagindex/loader.py
# Input acquisition: markup, readers, files and URLs -> BeautifulSoup -> indexed tree.
# Parse failures raise ParseError; I/O and HTTP errors propagate unchanged.

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Optional, Union

import httpx
from bs4 import BeautifulSoup, FeatureNotFound, ParserRejectedMarkup

from .errors import ParseError
from .indexer import build_index
from .node import IndexedNode
from .settings import get_settings
from .source import collect_duplicate

logger = logging.getLogger(__name__)

Markup = Union[str, bytes]


def parse_markup(markup: Union[Markup, IO], parser: Optional[str] = None) -> BeautifulSoup:
    """
    Parse markup (or a readable object) with the configured bs4 tree builder.
    Attribute values are kept exactly as written (no class/rel splitting). With html.parser
    a repeated attribute keeps every value; lxml and html5lib drop repeats themselves.
    """
    parser = parser or get_settings().PARSER
    options = {"multi_valued_attributes": None}
    if parser == "html.parser":
        options["on_duplicate_attribute"] = collect_duplicate
    try:
        return BeautifulSoup(markup, parser, **options)
    except FeatureNotFound as exc:
        raise ParseError(f"Parser '{parser}' is not available", parser=parser) from exc
    except ParserRejectedMarkup as exc:
        raise ParseError(f"Markup rejected by '{parser}': {exc}", parser=parser) from exc


def index_markup(markup: Markup, parser: Optional[str] = None) -> IndexedNode:
    return build_index(parse_markup(markup, parser))


def index_reader(reader: IO, parser: Optional[str] = None) -> IndexedNode:
    """Read everything from `reader` and index it. The caller keeps ownership of the reader."""
    return index_markup(reader.read(), parser)


def parse_file(path: Union[str, Path], parser: Optional[str] = None) -> BeautifulSoup:
    # bytes, so bs4 can honour a <meta charset> declaration
    with open(path, "rb") as f:
        return parse_markup(f.read(), parser)


def index_file(path: Union[str, Path], parser: Optional[str] = None) -> IndexedNode:
    return build_index(parse_file(path, parser))


def index_response(response: httpx.Response, parser: Optional[str] = None) -> IndexedNode:
    """Index the body of an already received response. The status code is not checked."""
    return index_markup(response.content, parser)


def fetch_url(url: str, client: Optional[httpx.Client] = None) -> httpx.Response:
    """
    GET `url` and return the response.
    Raises httpx.HTTPStatusError on 4xx/5xx and other httpx errors on transport failure.
    """
    if client is None:
        st = get_settings()
        with httpx.Client(
            timeout=st.HTTP_TIMEOUT,
            headers={"User-Agent": st.USER_AGENT},
            follow_redirects=st.FOLLOW_REDIRECTS,
        ) as own_client:
            return fetch_url(url, client=own_client)

    logger.info("Fetching %s", url)
    r = client.get(url)
    r.raise_for_status()
    return r


def parse_url(url: str, client: Optional[httpx.Client] = None, parser: Optional[str] = None) -> BeautifulSoup:
    return parse_markup(fetch_url(url, client).content, parser)


def index_url(url: str, client: Optional[httpx.Client] = None, parser: Optional[str] = None) -> IndexedNode:
    return build_index(parse_url(url, client, parser))
