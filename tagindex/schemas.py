# tagindex/schemas.py
# Pydantic models for query results printed by the CLI (results only; the index itself is never serialized).

from __future__ import annotations

from typing import Dict, List, Literal, Optional, Union

from bs4.element import PageElement
from pydantic import BaseModel, Field

from .node import IndexedNode
from .source import NodeKind, attribute_pairs, iter_children, node_kind, tag_name


class NodeSummary(BaseModel):
    """One node of the indexed tree."""
    position: int
    tag: str
    attributes: Dict[str, List[str]] = Field(default_factory=dict)
    parent_position: Optional[int] = None
    child_count: int = 0

    @classmethod
    def from_node(cls, node: IndexedNode) -> "NodeSummary":
        return cls(
            position=node.position,
            tag=node.tag,
            attributes={k: list(v) for k, v in node.attributes.items()},
            parent_position=node.parent.position if node.parent is not None else None,
            child_count=len(node.children),
        )


class RawMatch(BaseModel):
    """One element found by a raw-tree lookup (no positions without an index)."""
    tag: str
    attributes: Dict[str, str] = Field(default_factory=dict)
    text: str = ""

    @classmethod
    def from_element(cls, el: PageElement) -> "RawMatch":
        texts = [
            child.strip() for child in iter_children(el)
            if node_kind(child) is NodeKind.TEXT and child.strip()
        ]
        attributes: Dict[str, str] = {}
        for key, val in attribute_pairs(el):
            attributes.setdefault(key, val)
        return cls(tag=tag_name(el), attributes=attributes, text=" ".join(texts))


class LookupResponse(BaseModel):
    source: str
    mode: Literal["index", "raw"]
    count: int
    matches: List[Union[NodeSummary, RawMatch]] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: str
    detail: Optional[str] = None
