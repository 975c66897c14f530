# tagindex/node.py
# IndexedNode: one element of the queryable tree, plus the indexed lookups built on it.

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Set

# Attribute key under which direct child text segments are stored.
TEXT_KEY = ""


@dataclass(eq=False, repr=False)
class IndexedNode:
    """
    A node of the indexed tree.

    `descendants` maps a tag name to every node of that tag anywhere below this
    one (never this node itself). Nodes hash and compare by identity, so they can
    live in sets. `parent` is a plain back edge, never followed by repr.
    """
    position: int
    tag: str
    parent: Optional[IndexedNode] = None
    attributes: Dict[str, List[str]] = field(default_factory=dict)
    children: List[IndexedNode] = field(default_factory=list)
    descendants: Dict[str, Set[IndexedNode]] = field(default_factory=dict)

    @property
    def text(self) -> str:
        """Direct child text segments joined by a single space."""
        return " ".join(self.attributes.get(TEXT_KEY, []))

    def __repr__(self) -> str:
        return f"IndexedNode(position={self.position}, tag={self.tag!r}, children={len(self.children)})"

    def breadth_first(self) -> Iterator[IndexedNode]:
        """Traverse the subtree breadth-first, i.e. in position order."""
        queue = deque([self])
        while queue:
            node = queue.popleft()
            yield node
            queue.extend(node.children)

    def find_all(self, *tags: str) -> List[IndexedNode]:
        """
        All nodes in this subtree (this node included) whose tag is one of `tags`.
        Answered from the descendant index without walking the tree.
        """
        found: Set[IndexedNode] = set()
        if self.tag in tags:
            found.add(self)
        for tag in tags:
            found.update(self.descendants.get(tag, ()))
        return _by_position(found)

    def find(self, attr_key: str, attr_val: str) -> List[IndexedNode]:
        """
        All nodes in this subtree (this node included) with `attr_val` among the
        values of `attr_key`. Use TEXT_KEY as the key to match direct text content.
        """
        found: Set[IndexedNode] = set()
        if self.has_attribute(attr_key, attr_val):
            found.add(self)
        for nodes in self.descendants.values():
            found.update(n for n in nodes if n.has_attribute(attr_key, attr_val))
        return _by_position(found)

    def has_attribute(self, attr_key: str, attr_val: str) -> bool:
        return attr_val in self.attributes.get(attr_key, ())


def _by_position(nodes: Iterable[IndexedNode]) -> List[IndexedNode]:
    return sorted(nodes, key=lambda n: n.position)
