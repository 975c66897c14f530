# tagindex/source.py
# Read-only view of a BeautifulSoup parse tree: node kinds, tag names, attributes, children.
# Everything else in the package goes through these helpers instead of touching bs4 directly.

from __future__ import annotations

import enum
from typing import Iterator, List, Tuple

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PageElement, PreformattedString

# Tag name given to the synthetic document root.
ROOT_TAG = ""


class NodeKind(enum.Enum):
    DOCUMENT = "document"
    ELEMENT = "element"
    TEXT = "text"
    OTHER = "other"  # comments, doctypes, CDATA, processing instructions


def node_kind(node: PageElement) -> NodeKind:
    if isinstance(node, BeautifulSoup):
        return NodeKind.DOCUMENT
    if isinstance(node, Tag):
        return NodeKind.ELEMENT
    # Comment, Doctype, CData etc. all derive from PreformattedString
    if isinstance(node, PreformattedString):
        return NodeKind.OTHER
    if isinstance(node, NavigableString):
        return NodeKind.TEXT
    return NodeKind.OTHER


def is_element(node: PageElement) -> bool:
    """True for elements and for the document root."""
    return node_kind(node) in (NodeKind.DOCUMENT, NodeKind.ELEMENT)


def tag_name(node: PageElement) -> str:
    """Element name as produced by the parser; ROOT_TAG for the document itself."""
    if isinstance(node, BeautifulSoup):
        return ROOT_TAG
    return node.name if isinstance(node, Tag) else ""


class RepeatedValues(list):
    """Every value of an attribute written more than once on one element, in source order."""


def collect_duplicate(attrs: dict, key: str, value) -> None:
    """on_duplicate_attribute handler for bs4: keep all values instead of the last one."""
    current = attrs[key]
    if not isinstance(current, RepeatedValues):
        current = RepeatedValues([current])
        attrs[key] = current
    current.append(value)


def attribute_value(value) -> str:
    """bs4 may split multi-valued attributes (class, rel, ...) into lists; rejoin them."""
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def attribute_pairs(node: PageElement) -> List[Tuple[str, str]]:
    """Attribute key/value pairs in source order; empty for non-elements."""
    if not isinstance(node, Tag):
        return []
    pairs = []
    for key, val in node.attrs.items():
        values = val if isinstance(val, RepeatedValues) else [val]
        pairs.extend((key, attribute_value(v)) for v in values)
    return pairs


def iter_children(node: PageElement) -> Iterator[PageElement]:
    """Direct children in document order, text and comments included."""
    if isinstance(node, Tag):
        yield from node.children

