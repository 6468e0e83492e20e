"""Plain-text parser: one literal paragraph per line.

Used for raw human messages where markdown characters carry no meaning.
"""

from __future__ import annotations

from adf_converter.ir.schema import Block, Document, ParagraphBlock, TextNode
from adf_converter.parsers.base import BaseTextParser


class PlainTextParser(BaseTextParser):
    """Maps each input line to its own paragraph, blank lines included."""

    @property
    def name(self) -> str:
        return "plain"

    def parse(self, text: str) -> Document:
        if not text:
            return Document()

        blocks: list[Block] = []
        for line in self.split_lines(text):
            if line.strip():
                blocks.append(ParagraphBlock(content=[TextNode(text=line)]))
            else:
                blocks.append(ParagraphBlock())
        return Document(blocks=blocks)
