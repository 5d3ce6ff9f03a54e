from .node import ElementNode, Node, NodeKind, TextNode, document
from .lookup_result import LookupResult, LookupSession
from .payload import TranslationPayload, payload_from_mapping
from .translation_request import TranslationRequest

__all__ = [
    'ElementNode', 'Node', 'NodeKind', 'TextNode', 'document',
    'LookupResult', 'LookupSession',
    'TranslationPayload', 'payload_from_mapping',
    'TranslationRequest',
]
