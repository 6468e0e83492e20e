"""Abstract base class for text-to-IR parsers."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

from adf_converter.config import Config
from adf_converter.ir.schema import Document

_LINE_BREAK_RE = re.compile(r"\r?\n")


class BaseTextParser(ABC):
    """Base class that all parser implementations must extend."""

    def __init__(self, config: Config | None = None):
        self.config = config or Config.default()

    @abstractmethod
    def parse(self, text: str) -> Document:
        """Convert a text into its IR representation.

        Implementations must accept every string, including the empty one,
        and never raise for malformed markup.

        Args:
            text: The source text.

        Returns:
            A Document holding the converted blocks.
        """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the parser engine name (e.g. 'markdown', 'plain')."""

    @staticmethod
    def split_lines(text: str) -> list[str]:
        """Split on ``\\r\\n`` or ``\\n`` only."""
        return _LINE_BREAK_RE.split(text or "")
