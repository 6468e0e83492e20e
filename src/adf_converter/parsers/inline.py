"""Inline span scanner: one line of text → text runs and marked spans."""

from __future__ import annotations

import re

from adf_converter.ir.schema import InlineNode, Mark, MarkedTextNode, TextNode

# Alternation order makes bold win when both delimiters start at the same index.
_SPAN_RE = re.compile(r"\*\*(?P<bold>[^*]+?)\*\*|`(?P<code>[^`]+?)`")


def scan_inline(line: str) -> list[InlineNode]:
    """Split a line into plain text and bold/inline-code spans.

    Spans are matched left to right, earliest start first. Delimiters
    without a partner are left in the surrounding plain text.

    Args:
        line: A single line with no block marker.

    Returns:
        Inline nodes in source order. Empty for an empty line.
    """
    nodes: list[InlineNode] = []
    last = 0

    for match in _SPAN_RE.finditer(line):
        if match.start() > last:
            nodes.append(TextNode(text=line[last:match.start()]))

        if match.group("bold") is not None:
            nodes.append(MarkedTextNode(mark=Mark.BOLD, text=match.group("bold")))
        else:
            nodes.append(MarkedTextNode(mark=Mark.CODE, text=match.group("code")))
        last = match.end()

    if last < len(line):
        nodes.append(TextNode(text=line[last:]))

    return nodes
