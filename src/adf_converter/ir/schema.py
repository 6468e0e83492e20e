"""Pydantic models for the document Intermediate Representation (IR).

The IR is the semantic tree produced by the parsers: a flat, ordered
sequence of block nodes, each holding either inline nodes or literal text.
It is the central contract between the parser and the ADF generator, which
maps it onto the wire field names (``type``/``content``/``attrs``/``marks``).

Block and inline nodes are closed discriminated unions on ``type`` so the
generator can dispatch over every variant.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

MIN_HEADING_LEVEL = 2
MAX_HEADING_LEVEL = 6
PLAIN_LANGUAGE = "plain"


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Inline nodes
# ---------------------------------------------------------------------------


class Mark(str, Enum):
    BOLD = "bold"
    CODE = "code"


class TextNode(_Node):
    """A run of unformatted text."""

    type: Literal["text"] = "text"
    text: str


class MarkedTextNode(_Node):
    """A run of text carrying exactly one mark."""

    type: Literal["marked_text"] = "marked_text"
    mark: Mark
    text: str


InlineNode = Annotated[
    Union[TextNode, MarkedTextNode],
    Field(discriminator="type"),
]


# ---------------------------------------------------------------------------
# Block nodes
# ---------------------------------------------------------------------------


class ListItem(_Node):
    content: list[InlineNode] = Field(default_factory=list)


class ParagraphBlock(_Node):
    type: Literal["paragraph"] = "paragraph"
    content: list[InlineNode] = Field(default_factory=list)


class HeadingBlock(_Node):
    type: Literal["heading"] = "heading"
    level: int = Field(ge=MIN_HEADING_LEVEL, le=MAX_HEADING_LEVEL)
    text: str = ""  # headings are never inline-scanned


class CodeBlock(_Node):
    type: Literal["code_block"] = "code_block"
    language: str = PLAIN_LANGUAGE
    text: str = ""  # raw lines joined with "\n"


class BulletListBlock(_Node):
    type: Literal["bullet_list"] = "bullet_list"
    items: list[ListItem] = Field(min_length=1)


class OrderedListBlock(_Node):
    type: Literal["ordered_list"] = "ordered_list"
    items: list[ListItem] = Field(min_length=1)


class RuleBlock(_Node):
    type: Literal["rule"] = "rule"


Block = Annotated[
    Union[
        ParagraphBlock,
        HeadingBlock,
        CodeBlock,
        BulletListBlock,
        OrderedListBlock,
        RuleBlock,
    ],
    Field(discriminator="type"),
]


# ---------------------------------------------------------------------------
# Top-level document
# ---------------------------------------------------------------------------


class Document(_Node):
    """The complete intermediate representation of one converted text."""

    kind: Literal["doc"] = "doc"
    version: Literal[1] = 1
    blocks: list[Block] = Field(default_factory=list)

    def to_json(self, **kwargs) -> str:
        """Serialize to JSON string."""
        return self.model_dump_json(indent=2, **kwargs)

    @classmethod
    def from_json(cls, json_str: str) -> Document:
        """Deserialize from JSON string."""
        return cls.model_validate_json(json_str)


def clamp_heading_level(level: int) -> int:
    """Clamp a raw marker count into the supported heading range."""
    return max(MIN_HEADING_LEVEL, min(level, MAX_HEADING_LEVEL))
