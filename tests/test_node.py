"""Tests for the indexed lookups on IndexedNode."""

from __future__ import annotations

from tagindex import TEXT_KEY, index_markup


def subtree(node):
    return list(node.breadth_first())


def test_find_all_scenario(scenario_root):
    b_nodes = scenario_root.find_all("b")
    assert [n.tag for n in b_nodes] == ["b", "b"]

    (c,) = scenario_root.find_all("c")
    assert c.parent.parent.tag == "a"
    assert c.parent is b_nodes[1]


def test_find_text_scenario(scenario_root):
    (b,) = scenario_root.find(TEXT_KEY, "x")
    assert b is scenario_root.find_all("b")[0]


def test_find_all_includes_self():
    root = index_markup("<div><div><p></p></div></div>")
    outer = root.children[0]
    assert outer.find_all("div") == [outer, outer.children[0]]
    assert outer.children[0].find_all("div") == [outer.children[0]]


def test_find_all_multiple_tags_no_duplicates(scenario_root):
    a = scenario_root.children[0]
    found = a.find_all("a", "b", "c", "b", "a")
    assert [n.position for n in found] == [1, 2, 3, 4]


def test_find_all_matches_brute_force(random_pair):
    _, root = random_pair
    tags = {n.tag for n in subtree(root)}
    for node in subtree(root):
        for tag in tags:
            expected = [n for n in subtree(node) if n.tag == tag]
            assert sorted(node.find_all(tag), key=lambda n: n.position) == \
                sorted(expected, key=lambda n: n.position)


def test_find_all_unknown_or_no_tags(scenario_root):
    assert scenario_root.find_all("table") == []
    assert scenario_root.find_all() == []


def test_find_attribute_any_depth():
    root = index_markup(
        '<div class="x"><span class="x"></span><p><em class="x">t</em></p></div>'
        '<div class="y"><i class="x"></i></div>'
    )
    assert [n.tag for n in root.find("class", "x")] == ["div", "span", "i", "em"]
    second = root.children[1]
    assert [n.tag for n in second.find("class", "x")] == ["i"]


def test_find_siblings_with_same_attribute():
    root = index_markup('<ul><li class="x">1</li><li class="x">2</li><li>3</li></ul>')
    found = root.find("class", "x")
    assert [n.text for n in found] == ["1", "2"]


def test_find_includes_self_once():
    root = index_markup('<div id="a"><div id="a"></div></div>')
    outer = root.children[0]
    assert outer.find("id", "a") == [outer, outer.children[0]]


def test_find_is_exact():
    root = index_markup('<p class="X">Hello</p><p class=" x ">hello </p>')
    assert root.find("class", "x") == []
    assert root.find(TEXT_KEY, "hello world") == []
    assert [n.text for n in root.find(TEXT_KEY, "hello")] == ["hello"]


def test_find_any_of_several_text_segments():
    root = index_markup("<p>first<br>second</p>")
    p = root.children[0]
    assert root.find(TEXT_KEY, "second") == [p]
    assert root.find(TEXT_KEY, "first second") == []


def test_find_absent_key_or_value(scenario_root):
    assert scenario_root.find("href", "x") == []
    assert scenario_root.find(TEXT_KEY, "nope") == []


def test_find_matches_brute_force(random_pair):
    _, root = random_pair
    for node in subtree(root):
        for key, value in [("class", "x"), ("class", "y"), ("data-k", "beta gamma"), (TEXT_KEY, "alpha")]:
            expected = [n for n in subtree(node) if value in n.attributes.get(key, [])]
            assert node.find(key, value) == sorted(expected, key=lambda n: n.position)


def test_breadth_first_is_position_order(random_pair):
    _, root = random_pair
    positions = [n.position for n in root.breadth_first()]
    assert positions == sorted(positions)


def test_repr_does_not_follow_links(scenario_root):
    assert repr(scenario_root.find_all("c")[0]) == "IndexedNode(position=4, tag='c', children=0)"
    assert repr(scenario_root) == "IndexedNode(position=0, tag='', children=1)"
