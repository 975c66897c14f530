"""Shared fixtures and a seeded random HTML document generator."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Tuple, Union

import pytest

from tagindex import get_settings, index_markup, parse_markup

SCENARIO_HTML = "<a><b>x</b><b><c/></b></a>"

TAG_VOCABULARY = ["div", "span", "section", "em", "ul", "li"]
WORDS = ["x", "y", "alpha", "beta gamma"]


@dataclass
class GenNode:
    tag: str
    attrs: List[Tuple[str, str]] = field(default_factory=list)
    content: List[Union["GenNode", str]] = field(default_factory=list)

    def render(self) -> str:
        attrs = "".join(f' {k}="{v}"' for k, v in self.attrs)
        inner = "".join(c if isinstance(c, str) else c.render() for c in self.content)
        return f"<{self.tag}{attrs}>{inner}</{self.tag}>"


def random_tree(rng: random.Random, depth: int, max_children: int, tags=TAG_VOCABULARY) -> GenNode:
    node = GenNode(tag=rng.choice(tags))
    if rng.random() < 0.5:
        node.attrs.append(("class", rng.choice(["x", "y"])))
    if rng.random() < 0.3:
        node.attrs.append(("data-k", rng.choice(WORDS)))

    n_children = rng.randint(0, max_children) if depth > 0 else 0
    for _ in range(n_children):
        if rng.random() < 0.3:
            node.content.append(f"  {rng.choice(WORDS)}\n")
        node.content.append(random_tree(rng, depth - 1, max_children, tags))
    if rng.random() < 0.4:
        node.content.append(rng.choice(WORDS))
    return node


def random_document(seed: int, depth: int = 4, max_children: int = 3) -> str:
    rng = random.Random(seed)
    roots = [random_tree(rng, depth, max_children) for _ in range(rng.randint(1, 3))]
    return "".join(r.render() for r in roots)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Every test starts from default settings."""
    for key in ("TAGINDEX_PARSER", "TAGINDEX_HTTP_TIMEOUT", "TAGINDEX_USER_AGENT",
                "TAGINDEX_FOLLOW_REDIRECTS", "TAGINDEX_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def scenario_root():
    return index_markup(SCENARIO_HTML)


@pytest.fixture(params=range(12))
def random_pair(request):
    """(soup, indexed root) for a generated document; seeds vary the shape."""
    html = random_document(request.param, depth=2 + request.param % 3, max_children=2 + request.param % 2)
    soup = parse_markup(html)
    return soup, index_markup(html)


@pytest.fixture
def scenario_soup():
    return parse_markup(SCENARIO_HTML)
