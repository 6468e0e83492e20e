"""Backslash-escape removal for text that was escaped upstream."""

from __future__ import annotations

import re

ESCAPABLE = "`*_[]()#|"

_ESCAPE_RE = re.compile(r"\\([" + re.escape(ESCAPABLE) + r"])")


def unescape_markdown(text: str) -> str:
    r"""Drop the backslash in front of escaped markdown punctuation.

    ``\*\*bold\*\*`` becomes ``**bold**``; backslashes before any other
    character are kept.
    """
    if not text:
        return text
    return _ESCAPE_RE.sub(r"\1", text)
