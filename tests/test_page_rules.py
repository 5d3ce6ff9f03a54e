# tests/test_page_rules.py
from models.lookup_result import LookupSession
from models.node import ElementNode, TextNode, document
from services.extraction.html_tree import parse_document
from services.extraction.page_rules import extract_from_page, format_phonetics
from services.lookup.config_loader import PageRules

CONTAINER = 'class="content-wrp dict-container opened"'

SAMPLE_PAGE = f"""
<html><body>
  <div {CONTAINER}>
    <div class="trans-container">
      <div class="per-phone">英<span class="phonetic">[test]</span></div>
      <div class="per-phone">美<span class="phonetic">[tɛst]</span></div>
      <ul>
        <li>n. 测试；试验</li>
        <li>  </li>
        <li>vt. <b>测试</b>；考查</li>
      </ul>
    </div>
    <ul><li><a class="clickable" href="#">test case</a></li></ul>
  </div>
  <div class="content-wrp dict-container">
    <ul><li>closed container</li></ul>
  </div>
</body></html>
"""


def make_session(word="test"):
    return LookupSession.start(word, "https://www.youdao.com/w/")


def test_two_list_items_in_order():
    session = make_session()
    page = parse_document(f"<div {CONTAINER}><ul><li>alpha</li><li>beta</li></ul></div>")

    extract_from_page(session, page)

    assert [r.title for r in session.results] == ["alpha", "beta"]
    for row in session.results:
        assert row.subtitle == row.action_value == row.pronunciation_key == "test"


def test_sample_page_emission_order():
    session = make_session()
    extract_from_page(session, parse_document(SAMPLE_PAGE))

    titles = [r.title for r in session.results]
    assert titles[0] == "英 [test]; 美 [tɛst]"
    # <li> items of every list come before that list's clickable links;
    # the closed container contributes nothing.
    assert titles[1:] == [
        "n. 测试；试验",
        "vt. 测试；考查",
        "test case",       # the <li> wrapping the link
        "test case",       # the link itself
    ]


def test_phonetic_row_uses_prompt_and_word():
    session = make_session()
    extract_from_page(session, parse_document(SAMPLE_PAGE))

    row = session.results[0]
    assert row.subtitle == "回车可听发音"
    assert row.action_value == "test"
    assert row.pronunciation_key == "test"


def test_phonetic_without_text_label_has_empty_label():
    span = ElementNode("span", attrs=[("class", "phonetic")], child_nodes=[TextNode(" [a] ")])
    group = ElementNode("div", attrs=[("class", "trans-container")], child_nodes=[span])
    # The span is its parent's first child, so there is no text label.
    assert format_phonetics(group, PageRules()) == " [a]"


def test_phonetic_text_uses_direct_text_children_only():
    span = ElementNode(
        "span",
        attrs=[("class", "phonetic")],
        child_nodes=[TextNode("[a"), ElementNode("i", child_nodes=[TextNode("IGNORED")]), TextNode("b]")],
    )
    parent = ElementNode("div", child_nodes=[TextNode(" 英 "), span])
    group = ElementNode("div", attrs=[("class", "trans-container")], child_nodes=[parent])
    assert format_phonetics(group, PageRules()) == "英 [ab]"


def test_group_without_phonetics_adds_no_row():
    session = make_session()
    page = parse_document(f"<div {CONTAINER}><div class='trans-container'><p>nothing</p></div></div>")
    extract_from_page(session, page)
    assert session.results == []


def test_page_text_is_repaired_from_latin1():
    html = f"<div {CONTAINER}><ul><li>测试</li></ul></div>"
    mis_decoded = html.encode("utf-8").decode("latin-1")
    session = make_session()

    extract_from_page(session, parse_document(mis_decoded))

    assert session.results[0].title == "测试"


def test_nested_containers_are_both_visited():
    inner = ElementNode(
        "div",
        attrs=[("class", "content-wrp dict-container opened")],
        child_nodes=[ElementNode("ul", child_nodes=[ElementNode("li", child_nodes=[TextNode("x")])])],
    )
    outer = ElementNode("div", attrs=[("class", "opened dict-container content-wrp")], child_nodes=[inner])
    session = make_session()

    extract_from_page(session, document(outer))

    # Reported once for the outer container and once for the inner one.
    assert [r.title for r in session.results] == ["x", "x"]


def test_custom_rules():
    rules = PageRules(container_classes=["entry"], pronounce_prompt="press enter")
    session = make_session()
    page = parse_document(
        "<div class='entry'><div class='trans-container'>uk<span class='phonetic'>/t/</span></div></div>"
    )
    extract_from_page(session, page, rules)
    assert session.results[0].title == "uk /t/"
    assert session.results[0].subtitle == "press enter"


def test_trailing_nbsp_byte_survives_until_repair():
    # "你" is E4 BD A0 in UTF-8; the last byte reads as U+00A0 in Latin-1.
    html = f"<div {CONTAINER}><ul><li> 你 </li></ul></div>"
    session = make_session()

    extract_from_page(session, parse_document(html.encode("utf-8").decode("latin-1")))

    assert session.results[0].title == "你"


def test_unclosed_list_items_give_one_row_each():
    session = make_session()
    page = parse_document(f"<div {CONTAINER}><ul><li>alpha<li>beta</ul></div>")

    extract_from_page(session, page)

    assert [r.title for r in session.results] == ["alpha", "beta"]


def test_nbsp_entity_does_not_survive_repair():
    # The parser turns &nbsp; into U+00A0, a lone continuation byte once the
    # title is re-read as UTF-8.
    session = make_session()
    page = parse_document(f"<div {CONTAINER}><ul><li>a&nbsp;b</li></ul></div>")

    extract_from_page(session, page)

    assert session.results[0].title == "a�b"
