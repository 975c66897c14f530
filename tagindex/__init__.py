# tagindex/__init__.py
# Re-export commonly used helpers for convenience.

from .errors import ParseError, TagIndexError
from .indexer import build_index
from .loader import (
    fetch_url,
    index_file,
    index_markup,
    index_reader,
    index_response,
    index_url,
    parse_file,
    parse_markup,
    parse_url,
)
from .lookup import ElemLookup, find, find_all
from .node import TEXT_KEY, IndexedNode
from .settings import __version__, get_settings

__all__ = [
    "__version__",
    "ElemLookup",
    "IndexedNode",
    "ParseError",
    "TEXT_KEY",
    "TagIndexError",
    "build_index",
    "fetch_url",
    "find",
    "find_all",
    "get_settings",
    "index_file",
    "index_markup",
    "index_reader",
    "index_response",
    "index_url",
    "parse_file",
    "parse_markup",
    "parse_url",
]
