# services/extraction/html_tree.py
"""
Turn raw HTML into the :mod:`models.node` tree the extraction rules walk.

BeautifulSoup does the parsing with the ``html5lib`` tree builder, which
follows the HTML5 tree construction rules: unclosed ``<li>``, ``<p>`` and
similar tags are closed the way a browser closes them, and the document
always gets ``html``, ``head`` and ``body`` elements. This module only
converts its tags and strings. Comments, doctypes, declarations and
processing instructions carry no visible text and are dropped.
"""

from typing import Optional

from bs4 import BeautifulSoup
from bs4.element import (
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    PageElement,
    ProcessingInstruction,
    Tag,
)

from models.node import ElementNode, Node, NodeKind, TextNode

_SKIPPED_STRINGS = (Comment, Declaration, Doctype, ProcessingInstruction)


def _attr_value(value) -> str:
    # Multi-valued attributes (class, rel, ...) come back as lists.
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return "" if value is None else str(value)


def _convert(element: PageElement) -> Optional[Node]:
    if isinstance(element, NavigableString):
        if isinstance(element, _SKIPPED_STRINGS):
            return None
        return TextNode(value=str(element))

    if not isinstance(element, Tag):
        return None

    node = ElementNode(
        tag_name=element.name,
        attrs=[(name, _attr_value(value)) for name, value in element.attrs.items()],
    )
    for child in element.children:
        converted = _convert(child)
        if converted is not None:
            node.append(converted)
    return node


def soup_to_tree(soup: BeautifulSoup) -> ElementNode:
    """Convert an already parsed soup into a document root."""
    root = ElementNode(tag_name="#document", kind=NodeKind.DOCUMENT)
    for child in soup.children:
        converted = _convert(child)
        if converted is not None:
            root.append(converted)
    return root


def parse_document(html: str) -> ElementNode:
    """Parse *html* and return the document root."""
    return soup_to_tree(BeautifulSoup(html or "", "html5lib"))
