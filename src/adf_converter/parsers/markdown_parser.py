"""Line-oriented parser for the restricted markdown emitted by assistants.

Each line is classified on its own (``classify_line``) and the resulting
action is applied to two buffers, one for lists and one for fenced code.
Supported constructs: ``##``/``###`` headings, ``-`` bullets, ``1.``
numbered items, fenced code blocks, ``---`` rules and paragraphs with
``**bold**`` and ``` `code` ``` spans. Anything else is a literal paragraph.

The parser is total: every string converts, malformed markup degrades to
plain text, and an unterminated fence still yields a code block.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum

from adf_converter.ir.schema import (
    Block,
    Document,
    HeadingBlock,
    ParagraphBlock,
    RuleBlock,
    clamp_heading_level,
)
from adf_converter.parsers.accumulators import CodeBuffer, ListAccumulator, ListKind
from adf_converter.parsers.base import BaseTextParser
from adf_converter.parsers.escapes import unescape_markdown
from adf_converter.parsers.inline import scan_inline

logger = logging.getLogger(__name__)

_FENCE_OPEN_RE = re.compile(r"^```(\w*)\s*$")
_FENCE_CLOSE_RE = re.compile(r"^```\s*$")
_HEADING_RE = re.compile(r"^(#{2,3}) (.*)$")
_BULLET_RE = re.compile(r"^- (.*)$")
_NUMBERED_RE = re.compile(r"^[0-9]+\. (.*)$")
_RULE_RE = re.compile(r"^-{3,}\s*$")


class LineKind(str, Enum):
    FENCE_CLOSE = "fence_close"
    CODE_LINE = "code_line"
    FENCE_OPEN = "fence_open"
    HEADING = "heading"
    BULLET = "bullet"
    NUMBERED = "numbered"
    RULE = "rule"
    BLANK = "blank"
    TEXT = "text"


@dataclass(frozen=True)
class ClassifiedLine:
    """A line tagged with the construct it belongs to.

    ``value`` holds the payload relevant to the kind: the fence language,
    the heading text, the list item remainder or the raw line.
    """

    kind: LineKind
    value: str = ""
    level: int = 0


def classify_line(line: str, in_code: bool = False) -> ClassifiedLine:
    """Decide which construct a single line starts, continues or ends.

    Args:
        line: One raw input line without its line break.
        in_code: Whether a fenced code block is currently open.

    Returns:
        The classification; the first matching rule wins.
    """
    if in_code:
        if _FENCE_CLOSE_RE.match(line):
            return ClassifiedLine(LineKind.FENCE_CLOSE)
        return ClassifiedLine(LineKind.CODE_LINE, line)

    m = _FENCE_OPEN_RE.match(line)
    if m:
        return ClassifiedLine(LineKind.FENCE_OPEN, m.group(1))

    m = _HEADING_RE.match(line)
    if m:
        return ClassifiedLine(LineKind.HEADING, m.group(2).strip(), len(m.group(1)))

    m = _BULLET_RE.match(line)
    if m:
        return ClassifiedLine(LineKind.BULLET, m.group(1))

    m = _NUMBERED_RE.match(line)
    if m:
        return ClassifiedLine(LineKind.NUMBERED, m.group(1))

    if _RULE_RE.match(line):
        return ClassifiedLine(LineKind.RULE)

    if not line.strip():
        return ClassifiedLine(LineKind.BLANK)

    return ClassifiedLine(LineKind.TEXT, line)


class MarkdownParser(BaseTextParser):
    """Converts restricted markdown into a flat IR block sequence."""

    @property
    def name(self) -> str:
        return "markdown"

    def parse(self, text: str) -> Document:
        """Parse markdown text into a Document.

        Args:
            text: Source text with ``\\n`` or ``\\r\\n`` line breaks.

        Returns:
            Document whose blocks follow the input line order.
        """
        if self.config.parser.unescape:
            text = unescape_markdown(text)

        blocks: list[Block] = []
        lists = ListAccumulator()
        code = CodeBuffer()

        for line in self.split_lines(text):
            _apply(classify_line(line, code.is_open), blocks, lists, code)

        if code.is_open:
            logger.debug(
                "Unterminated code fence, flushing %d buffered line(s)",
                code.line_count,
            )
            code.flush(blocks)
        lists.flush(blocks)

        return Document(blocks=blocks)


def _apply(
    line: ClassifiedLine,
    blocks: list[Block],
    lists: ListAccumulator,
    code: CodeBuffer,
) -> None:
    """Apply one classified line to the buffers and output blocks."""
    kind = line.kind

    if kind is LineKind.FENCE_CLOSE:
        code.flush(blocks)
    elif kind is LineKind.CODE_LINE:
        code.add(line.value)
    elif kind is LineKind.FENCE_OPEN:
        lists.flush(blocks)
        code.open(line.value)
    elif kind is LineKind.HEADING:
        lists.flush(blocks)
        blocks.append(HeadingBlock(level=clamp_heading_level(line.level), text=line.value))
    elif kind is LineKind.BULLET:
        lists.append(ListKind.BULLET, scan_inline(line.value), blocks)
    elif kind is LineKind.NUMBERED:
        lists.append(ListKind.NUMBERED, scan_inline(line.value), blocks)
    elif kind is LineKind.RULE:
        lists.flush(blocks)
        blocks.append(RuleBlock())
    elif kind is LineKind.BLANK:
        lists.flush(blocks)
    else:
        lists.flush(blocks)
        blocks.append(ParagraphBlock(content=scan_inline(line.value)))
