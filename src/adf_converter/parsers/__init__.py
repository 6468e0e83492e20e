"""Text-to-IR parser implementations."""

from adf_converter.parsers.base import BaseTextParser
from adf_converter.parsers.factory import create_parser

__all__ = ["BaseTextParser", "create_parser"]
