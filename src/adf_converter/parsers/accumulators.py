"""Buffers for multi-line constructs: lists and fenced code blocks.

Both buffers flush into an output block list owned by the caller. Flushing
an empty buffer is a no-op, so a list node is never emitted without items.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from adf_converter.ir.schema import (
    PLAIN_LANGUAGE,
    Block,
    BulletListBlock,
    CodeBlock,
    InlineNode,
    ListItem,
    OrderedListBlock,
)


class ListKind(str, Enum):
    BULLET = "bullet"
    NUMBERED = "numbered"


class ListAccumulator:
    """Collects consecutive list items of a single kind."""

    def __init__(self) -> None:
        self.kind: Optional[ListKind] = None
        self._items: list[ListItem] = []

    @property
    def is_open(self) -> bool:
        return bool(self._items)

    def append(self, kind: ListKind, content: list[InlineNode], out: list[Block]) -> None:
        """Add an item, first flushing a list of the other kind."""
        if self.kind is not None and self.kind != kind:
            self.flush(out)
        self.kind = kind
        self._items.append(ListItem(content=content))

    def flush(self, out: list[Block]) -> None:
        if self._items:
            if self.kind == ListKind.NUMBERED:
                out.append(OrderedListBlock(items=self._items))
            else:
                out.append(BulletListBlock(items=self._items))
        self.kind = None
        self._items = []


class CodeBuffer:
    """Holds raw lines between an opening and a closing fence."""

    def __init__(self) -> None:
        self.is_open = False
        self.language = PLAIN_LANGUAGE
        self._lines: list[str] = []

    def open(self, language: str = "") -> None:
        self.is_open = True
        self.language = language or PLAIN_LANGUAGE
        self._lines = []

    def add(self, line: str) -> None:
        self._lines.append(line)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def flush(self, out: list[Block]) -> None:
        """Emit the buffered lines as one code block and close the buffer."""
        if not self.is_open:
            return
        out.append(CodeBlock(language=self.language, text="\n".join(self._lines)))
        self.is_open = False
        self.language = PLAIN_LANGUAGE
        self._lines = []
