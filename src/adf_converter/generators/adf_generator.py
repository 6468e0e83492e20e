"""IR → Atlassian Document Format (ADF) serializer.

Walks the flat IR block list and emits the JSON-shaped node tree expected by
the Jira Cloud REST API (``type``/``content``/``attrs``/``marks``). Every IR
variant has an explicit branch; an unrecognised node raises rather than
being dropped, so schema drift shows up as a GenerationError.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from adf_converter.config import Config
from adf_converter.exceptions import GenerationError
from adf_converter.ir.schema import (
    Block,
    BulletListBlock,
    CodeBlock,
    Document,
    HeadingBlock,
    InlineNode,
    ListItem,
    Mark,
    MarkedTextNode,
    OrderedListBlock,
    ParagraphBlock,
    RuleBlock,
    TextNode,
)

logger = logging.getLogger(__name__)

ADF_VERSION = 1

_MARK_TYPES = {
    Mark.BOLD: "strong",
    Mark.CODE: "code",
}


class AdfGenerator:
    """Generates an ADF document from a Document IR."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config.default()

    def generate(self, document: Document) -> dict[str, Any]:
        """Render a Document into an ADF ``doc`` node.

        Args:
            document: The IR to render.

        Returns:
            A JSON-serializable dict.

        Raises:
            GenerationError: If the IR contains a node with no ADF mapping.
        """
        return {
            "type": "doc",
            "version": ADF_VERSION,
            "content": [self._render_block(block) for block in document.blocks],
        }

    def generate_json(self, document: Document) -> str:
        """Render a Document and serialize it to a JSON string."""
        return json.dumps(
            self.generate(document),
            indent=self.config.output.indent,
            ensure_ascii=False,
        )

    def write(self, document: Document, output_path: Path) -> Path:
        """Render a Document and save the ADF JSON to a file.

        Returns:
            The output path (for convenience).
        """
        output_path = Path(output_path)
        payload = self.generate_json(document)
        try:
            output_path.write_text(payload + "\n", encoding="utf-8")
        except OSError as exc:
            raise GenerationError(f"Failed to write {output_path}: {exc}") from exc

        logger.info("Generated %s", output_path)
        return output_path

    def _render_block(self, block: Block) -> dict[str, Any]:
        """Dispatch rendering to the appropriate method by block type."""
        if isinstance(block, ParagraphBlock):
            return self._render_paragraph(block.content)
        elif isinstance(block, HeadingBlock):
            return self._render_heading(block)
        elif isinstance(block, CodeBlock):
            return self._render_code_block(block)
        elif isinstance(block, BulletListBlock):
            return self._render_list("bulletList", block.items)
        elif isinstance(block, OrderedListBlock):
            return self._render_list("orderedList", block.items)
        elif isinstance(block, RuleBlock):
            return {"type": "rule"}
        raise GenerationError(f"Unknown block type: {type(block).__name__}")

    def _render_paragraph(self, content: list[InlineNode]) -> dict[str, Any]:
        return {
            "type": "paragraph",
            "content": self._render_inline(content),
        }

    def _render_heading(self, block: HeadingBlock) -> dict[str, Any]:
        return {
            "type": "heading",
            "attrs": {"level": block.level},
            "content": _text_content(block.text),
        }

    def _render_code_block(self, block: CodeBlock) -> dict[str, Any]:
        # Code text is literal; marks are never applied inside it.
        return {
            "type": "codeBlock",
            "attrs": {"language": block.language},
            "content": _text_content(block.text),
        }

    def _render_list(self, node_type: str, items: list[ListItem]) -> dict[str, Any]:
        """Render list items, each wrapping its inline content in a paragraph."""
        return {
            "type": node_type,
            "content": [
                {
                    "type": "listItem",
                    "content": [self._render_paragraph(item.content)],
                }
                for item in items
            ],
        }

    def _render_inline(self, nodes: list[InlineNode]) -> list[dict[str, Any]]:
        rendered: list[dict[str, Any]] = []
        for node in nodes:
            # ADF rejects empty text nodes.
            if not node.text:
                continue
            if isinstance(node, TextNode):
                rendered.append({"type": "text", "text": node.text})
            elif isinstance(node, MarkedTextNode):
                mark_type = _MARK_TYPES.get(node.mark)
                if mark_type is None:
                    raise GenerationError(f"Unknown mark: {node.mark!r}")
                rendered.append({
                    "type": "text",
                    "text": node.text,
                    "marks": [{"type": mark_type}],
                })
            else:
                raise GenerationError(f"Unknown inline type: {type(node).__name__}")
        return rendered


def _text_content(text: str) -> list[dict[str, Any]]:
    if not text:
        return []
    return [{"type": "text", "text": text}]
