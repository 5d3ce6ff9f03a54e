# services/extraction/text_extractor.py
from models.node import Node, NodeKind


def text_content(node: Node) -> str:
    """
    Concatenate every text node under *node* in document order.

    No separators are inserted and nothing is trimmed; callers strip the
    result themselves when they need to.
    """
    if node.kind is NodeKind.TEXT:
        return node.value
    return "".join(text_content(child) for child in node.child_nodes or ())
