# services/extraction/tree_matcher.py
"""
Generic element search over a :mod:`models.node` tree.

Both searches walk the tree depth-first in document order and report every
match, including matches nested inside other matches.
"""

from typing import Iterable, List

from models.node import Node, NodeKind


def _matches(node: Node, tag: str, required: frozenset) -> bool:
    if node.kind is not NodeKind.ELEMENT or node.tag_name != tag:
        return False
    return required.issubset(node.class_list)


def _collect(node: Node, tag: str, required: frozenset, found: List[Node]) -> None:
    if _matches(node, tag, required):
        found.append(node)
    for child in node.child_nodes or ():
        _collect(child, tag, required, found)


def find_by_tag_and_classes(root: Node, tag: str, required_classes: Iterable[str]) -> List[Node]:
    """
    Return every ``<tag>`` under *root* (root included) whose ``class``
    attribute contains all of *required_classes*.

    Class tokens are compared exactly; order does not matter. An element
    without a ``class`` attribute only matches an empty requirement.
    """
    found: List[Node] = []
    _collect(root, tag, frozenset(required_classes), found)
    return found


def find_by_tag(root: Node, tag: str) -> List[Node]:
    """Return every ``<tag>`` under *root* (root included), whatever its classes."""
    return find_by_tag_and_classes(root, tag, ())
