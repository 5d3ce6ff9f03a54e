# models/node.py
"""
Minimal document tree used by the extraction rules.

The HTML parser adapter (``services.extraction.html_tree``) produces these
nodes; the tree matcher and text extractor only ever look at ``kind``,
``tag_name``, ``attrs``, ``child_nodes``, ``value`` and ``parent_node``.

Nodes compare by identity – two structurally equal nodes from different
places in a page are still different nodes.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union


class NodeKind(str, Enum):
    DOCUMENT = "document"
    ELEMENT = "element"
    TEXT = "text"


@dataclass(eq=False)
class TextNode:
    value: str = ""
    parent_node: Optional["ElementNode"] = field(default=None, repr=False)
    kind: NodeKind = field(default=NodeKind.TEXT, init=False)

    @property
    def child_nodes(self) -> Tuple[()]:
        """Text nodes are always leaves."""
        return ()


@dataclass(eq=False)
class ElementNode:
    tag_name: str
    attrs: List[Tuple[str, str]] = field(default_factory=list)
    child_nodes: List["Node"] = field(default_factory=list)
    parent_node: Optional["ElementNode"] = field(default=None, repr=False)
    kind: NodeKind = NodeKind.ELEMENT

    def __post_init__(self) -> None:
        for child in self.child_nodes:
            child.parent_node = self

    def append(self, child: "Node") -> "Node":
        """Attach *child* as the last child and point it back at this node."""
        child.parent_node = self
        self.child_nodes.append(child)
        return child

    def get_attr(self, name: str) -> Optional[str]:
        for attr_name, attr_value in self.attrs:
            if attr_name == name:
                return attr_value
        return None

    @property
    def class_list(self) -> List[str]:
        """Whitespace-separated ``class`` tokens; empty when the attribute is absent."""
        value = self.get_attr("class")
        return value.split() if value else []


Node = Union[ElementNode, TextNode]


def document(*children: Node) -> ElementNode:
    """Build a document root holding *children*."""
    return ElementNode(
        tag_name="#document",
        child_nodes=list(children),
        kind=NodeKind.DOCUMENT,
    )
