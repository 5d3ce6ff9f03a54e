# services/extraction/page_rules.py
"""
Extraction rules for the web dictionary page linked from a translation.

Given a parsed page, emits (in document order, per opened dictionary
container):

1. one row per translation group that has phonetic spans, e.g.
   ``"英 [test]; 美 [test]"``;
2. one row per ``<li>`` of every list, then one per ``<a class="clickable">``
   inside that list.

Titles are repaired from Latin-1 after the parser has already decoded
entities, so an entity that yields a single-byte character (``&nbsp;``,
``&eacute;``) comes out as U+FFFD.
"""

from typing import List

from loguru import logger

from models.node import ElementNode, Node, NodeKind
from models.lookup_result import LookupSession
from services.extraction.result_builder import add_result
from services.extraction.text_extractor import text_content
from services.extraction.tree_matcher import find_by_tag, find_by_tag_and_classes
from services.lookup.config_loader import PageRules

# ASCII whitespace as HTML defines it. str.strip() would also eat "\xa0" and
# "\x85", which are UTF-8 continuation bytes in not-yet-repaired page text.
HTML_WHITESPACE = " \t\n\r\f"


def strip_html_space(text: str) -> str:
    return text.strip(HTML_WHITESPACE)


def _phonetic_label(span: Node) -> str:
    """Stripped text of the first child of the span's parent, if that child is text."""
    parent = span.parent_node
    if parent is None or not parent.child_nodes:
        return ""
    first = parent.child_nodes[0]
    if first.kind is NodeKind.TEXT:
        return strip_html_space(first.value)
    return ""


def _own_text(node: Node) -> str:
    """Direct text children only – nested markup is ignored."""
    return strip_html_space("".join(
        child.value for child in node.child_nodes or () if child.kind is NodeKind.TEXT
    ))


def format_phonetics(group: Node, rules: PageRules) -> str:
    """``"label phonetic"`` for every phonetic span in *group*, joined with ``"; "``."""
    entries: List[str] = []
    for span in find_by_tag_and_classes(group, "span", rules.phonetic_classes):
        entries.append(f"{_phonetic_label(span)} {_own_text(span)}")
    return "; ".join(entries)


def _extract_container(session: LookupSession, container: Node, rules: PageRules) -> None:
    word = session.word

    for group in find_by_tag_and_classes(container, "div", rules.group_classes):
        phonetics = format_phonetics(group, rules)
        if phonetics:
            add_result(session, phonetics, rules.pronounce_prompt, word, word)

    for ul in find_by_tag(container, "ul"):
        for li in find_by_tag(ul, "li"):
            text = strip_html_space(text_content(li))
            if text:
                add_result(session, text, word, word, word)

        for link in find_by_tag_and_classes(ul, "a", rules.link_classes):
            text = strip_html_space(text_content(link))
            if text:
                add_result(session, text, word, word, word)


def extract_from_page(
    session: LookupSession,
    document: ElementNode,
    rules: PageRules | None = None,
) -> None:
    """Append every row found in *document* to ``session.results``."""
    rules = rules or PageRules()
    containers = find_by_tag_and_classes(document, "div", rules.container_classes)
    logger.debug(f"Found {len(containers)} dictionary container(s) for '{session.word}'")

    for container in containers:
        _extract_container(session, container, rules)
