"""Parser factory — selects a parser implementation based on config."""

from __future__ import annotations

from adf_converter.config import Config
from adf_converter.exceptions import ConfigError
from adf_converter.parsers.base import BaseTextParser


def create_parser(config: Config | None = None) -> BaseTextParser:
    """Create a parser instance based on config.

    Args:
        config: Converter configuration. Uses default if None.

    Returns:
        A BaseTextParser implementation.

    Raises:
        ConfigError: If the configured engine is unknown.
    """
    config = config or Config.default()
    engine = config.parser.engine.lower()

    if engine == "markdown":
        from adf_converter.parsers.markdown_parser import MarkdownParser

        return MarkdownParser(config)
    elif engine == "plain":
        from adf_converter.parsers.plain_parser import PlainTextParser

        return PlainTextParser(config)
    else:
        raise ConfigError(
            f"Unknown parser engine: '{engine}'. Available: markdown, plain"
        )
