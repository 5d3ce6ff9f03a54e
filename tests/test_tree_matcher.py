# tests/test_tree_matcher.py
from models.node import ElementNode, TextNode, document
from services.extraction.text_extractor import text_content
from services.extraction.tree_matcher import find_by_tag, find_by_tag_and_classes


def div(*children, cls=None):
    attrs = [("class", cls)] if cls is not None else []
    return ElementNode("div", attrs=attrs, child_nodes=list(children))


def build_tree():
    inner = div(TextNode("inner"), cls="box opened")
    outer = div(inner, TextNode("tail"), cls="opened box extra")
    plain = div(TextNode("plain"))
    span = ElementNode("span", attrs=[("class", "box")], child_nodes=[TextNode("s")])
    return document(outer, plain, span), outer, inner, plain, span


def test_matches_when_all_classes_present_in_any_order():
    root, outer, inner, _, _ = build_tree()
    found = find_by_tag_and_classes(root, "div", ["box", "opened"])
    assert [id(n) for n in found] == [id(outer), id(inner)]


def test_nested_matches_are_reported_in_document_order():
    root, outer, inner, _, _ = build_tree()
    found = find_by_tag_and_classes(root, "div", ["opened"])
    assert found[0] is outer
    assert found[1] is inner


def test_no_partial_or_prefix_token_matching():
    root, *_ = build_tree()
    assert find_by_tag_and_classes(root, "div", ["bo"]) == []
    assert find_by_tag_and_classes(root, "div", ["box opened"]) == []


def test_tag_must_match():
    root, _, _, _, span = build_tree()
    found = find_by_tag_and_classes(root, "span", ["box"])
    assert len(found) == 1 and found[0] is span


def test_missing_class_attribute_never_matches_non_empty_requirement():
    root, _, _, plain, _ = build_tree()
    found = find_by_tag_and_classes(root, "div", ["extra"])
    assert all(n is not plain for n in found)


def test_empty_requirement_is_equivalent_to_find_by_tag():
    root, *_ = build_tree()
    by_classes = find_by_tag_and_classes(root, "div", [])
    by_tag = find_by_tag(root, "div")
    assert [id(n) for n in by_classes] == [id(n) for n in by_tag]
    assert len(by_tag) == 3


def test_search_is_idempotent():
    root, *_ = build_tree()
    first = find_by_tag_and_classes(root, "div", ["box"])
    second = find_by_tag_and_classes(root, "div", ["box"])
    assert [id(n) for n in first] == [id(n) for n in second]


def test_root_itself_can_match():
    node = div(cls="opened")
    assert find_by_tag_and_classes(node, "div", ["opened"]) == [node]


def test_text_node_and_empty_element_terminate():
    assert find_by_tag(TextNode("x"), "div") == []
    assert find_by_tag(ElementNode("ul"), "li") == []


def test_parent_links_are_set():
    root, outer, inner, _, _ = build_tree()
    assert inner.parent_node is outer
    assert outer.parent_node is root
    assert root.parent_node is None


def test_text_content_concatenates_without_separators():
    root, outer, *_ = build_tree()
    assert text_content(outer) == "innertail"
    assert text_content(root) == "innertailplains"


def test_text_content_does_not_trim():
    node = ElementNode("li", child_nodes=[TextNode("  a "), ElementNode("b", child_nodes=[TextNode("b")])])
    assert text_content(node) == "  a b"
    assert text_content(TextNode(" x ")) == " x "
