# tagindex/indexer.py
# Build the indexed tree from a BeautifulSoup parse tree in two breadth-first passes:
#   down: copy structure, attributes and text, numbering elements in discovery order
#   up:   merge each finished subtree's descendant index into its parent

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Dict, Tuple

from bs4 import Tag
from bs4.element import PageElement

from .node import TEXT_KEY, IndexedNode
from .source import NodeKind, attribute_pairs, iter_children, node_kind, tag_name

logger = logging.getLogger(__name__)


def build_index(root: PageElement) -> IndexedNode:
    """
    Index the tree under `root` (normally a BeautifulSoup object) and return the
    indexed root at position 0. The parse tree is only read, never modified.
    """
    if not isinstance(root, Tag):
        raise TypeError(f"build_index expects a BeautifulSoup or Tag root, got {type(root).__name__}")

    result = IndexedNode(position=0, tag=tag_name(root))
    down: Deque[Tuple[PageElement, IndexedNode]] = deque([(root, result)])
    up: Deque[IndexedNode] = deque()
    # children of each node whose subtree has not been merged yet
    pending: Dict[IndexedNode, int] = {}
    position = 1
    text_segments = 0

    while down:
        source, node = down.popleft()

        for key, val in attribute_pairs(source):
            node.attributes.setdefault(key, []).append(val)

        for child in iter_children(source):
            kind = node_kind(child)
            if kind is NodeKind.ELEMENT:
                indexed = IndexedNode(position=position, tag=tag_name(child), parent=node)
                position += 1
                node.children.append(indexed)
                node.descendants.setdefault(indexed.tag, set()).add(indexed)
                pending[node] = pending.get(node, 0) + 1
                down.append((child, indexed))
            elif kind is NodeKind.TEXT:
                content = child.strip()
                if content:
                    node.attributes.setdefault(TEXT_KEY, []).append(content)
                    text_segments += 1

        if not node.descendants:
            up.append(node)

    while up:
        node = up.popleft()
        for child in node.children:
            for tag, nodes in child.descendants.items():
                if tag in node.descendants:
                    node.descendants[tag].update(nodes)
                else:
                    node.descendants[tag] = set(nodes)

        parent = node.parent
        if parent is None:
            continue
        pending[parent] -= 1
        if pending[parent] == 0:
            up.append(parent)

    logger.debug("Indexed %d elements (%d text segments) under <%s>", position, text_segments, result.tag)
    return result
