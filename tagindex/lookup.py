# tagindex/lookup.py
# One-shot searches over a raw BeautifulSoup tree, without building an index.
# Each factory returns a reusable function: root -> matching nodes in breadth-first order.

from __future__ import annotations

from collections import deque
from typing import Callable, List

from bs4.element import PageElement

from .source import NodeKind, attribute_pairs, is_element, iter_children, node_kind, tag_name

ElemLookup = Callable[[PageElement], List[PageElement]]
Predicate = Callable[[PageElement], bool]


def find_all(*tags: str) -> ElemLookup:
    """Lookup for elements whose tag name is one of `tags`."""
    wanted = frozenset(tags)

    def matches(node: PageElement) -> bool:
        return is_element(node) and tag_name(node) in wanted

    return _generate_lookup(matches)


def find(attr_key: str, attr_val: str) -> ElemLookup:
    """
    Lookup for elements whose `attr_key` attribute equals `attr_val` exactly.
    Only markup attributes are considered; text content needs the indexed tree.
    """
    def matches(node: PageElement) -> bool:
        if node_kind(node) is not NodeKind.ELEMENT:
            return False
        for key, val in attribute_pairs(node):
            if key == attr_key:
                return val == attr_val
        return False

    return _generate_lookup(matches)


def _generate_lookup(query: Predicate) -> ElemLookup:
    def lookup(root: PageElement) -> List[PageElement]:
        results: List[PageElement] = []
        queue = deque([root])
        while queue:
            curr = queue.popleft()
            if query(curr):
                results.append(curr)
            queue.extend(iter_children(curr))
        return results

    return lookup
