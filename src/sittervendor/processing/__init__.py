"""
sittervendor.processing – In-place source patching.
"""
from .rules import (
    CANONICAL_PARSER_RULE,
    ENGINE_NAMESPACE_RULE,
    SHARED_SCANNER_RULE,
    UNICODE_NAMESPACE_RULE,
)
from .text_patcher import TextPatcher

__all__ = [
    "CANONICAL_PARSER_RULE",
    "ENGINE_NAMESPACE_RULE",
    "SHARED_SCANNER_RULE",
    "UNICODE_NAMESPACE_RULE",
    "TextPatcher",
]
