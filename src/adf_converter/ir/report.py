"""Conversion report — statistics from a conversion run."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from adf_converter.ir.schema import Document


@dataclass
class ConversionReport:
    """Summary of a markdown-to-ADF conversion run."""

    # Source info
    source_file: str = ""
    parser: str = ""
    line_count: int = 0

    # Timing
    parse_time_seconds: float = 0.0
    generate_time_seconds: float = 0.0
    total_time_seconds: float = 0.0

    # Block counts
    paragraph_count: int = 0
    heading_count: int = 0
    code_block_count: int = 0
    bullet_list_count: int = 0
    ordered_list_count: int = 0
    list_item_count: int = 0
    rule_count: int = 0

    # Heading level distribution: {level: count}
    headings_by_level: dict[int, int] = field(default_factory=dict)

    # Code block language distribution: {language: count}
    code_languages: dict[str, int] = field(default_factory=dict)

    @property
    def block_count(self) -> int:
        return (
            self.paragraph_count
            + self.heading_count
            + self.code_block_count
            + self.bullet_list_count
            + self.ordered_list_count
            + self.rule_count
        )

    def to_json(self, indent: int = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self._to_dict(), indent=indent)

    def _to_dict(self) -> dict:
        """Convert to a plain dict for JSON serialization."""
        return {
            "source_file": self.source_file,
            "parser": self.parser,
            "line_count": self.line_count,
            "timing": {
                "parse_seconds": round(self.parse_time_seconds, 3),
                "generate_seconds": round(self.generate_time_seconds, 3),
                "total_seconds": round(self.total_time_seconds, 3),
            },
            "block_counts": {
                "paragraphs": self.paragraph_count,
                "headings": self.heading_count,
                "code_blocks": self.code_block_count,
                "bullet_lists": self.bullet_list_count,
                "ordered_lists": self.ordered_list_count,
                "list_items": self.list_item_count,
                "rules": self.rule_count,
            },
            "headings_by_level": {
                str(k): v for k, v in sorted(self.headings_by_level.items())
            },
            "code_languages": dict(sorted(self.code_languages.items())),
        }

    @classmethod
    def from_document(
        cls, document: Document, source_file: str = "", parser: str = ""
    ) -> ConversionReport:
        """Build a report by walking an IR document."""
        report = cls(source_file=source_file, parser=parser)
        _count_blocks(document.blocks, report)
        return report


def _count_blocks(blocks: list, report: ConversionReport) -> None:
    """Walk IR blocks to populate report counters."""
    from adf_converter.ir.schema import (
        BulletListBlock,
        CodeBlock,
        HeadingBlock,
        OrderedListBlock,
        ParagraphBlock,
        RuleBlock,
    )

    for block in blocks:
        if isinstance(block, ParagraphBlock):
            report.paragraph_count += 1
        elif isinstance(block, HeadingBlock):
            report.heading_count += 1
            report.headings_by_level[block.level] = (
                report.headings_by_level.get(block.level, 0) + 1
            )
        elif isinstance(block, CodeBlock):
            report.code_block_count += 1
            report.code_languages[block.language] = (
                report.code_languages.get(block.language, 0) + 1
            )
        elif isinstance(block, BulletListBlock):
            report.bullet_list_count += 1
            report.list_item_count += len(block.items)
        elif isinstance(block, OrderedListBlock):
            report.ordered_list_count += 1
            report.list_item_count += len(block.items)
        elif isinstance(block, RuleBlock):
            report.rule_count += 1
