"""Document Intermediate Representation models."""

from adf_converter.ir.schema import (
    Block,
    BulletListBlock,
    CodeBlock,
    Document,
    HeadingBlock,
    InlineNode,
    ListItem,
    Mark,
    MarkedTextNode,
    OrderedListBlock,
    ParagraphBlock,
    RuleBlock,
    TextNode,
)

__all__ = [
    "Block",
    "BulletListBlock",
    "CodeBlock",
    "Document",
    "HeadingBlock",
    "InlineNode",
    "ListItem",
    "Mark",
    "MarkedTextNode",
    "OrderedListBlock",
    "ParagraphBlock",
    "RuleBlock",
    "TextNode",
]
