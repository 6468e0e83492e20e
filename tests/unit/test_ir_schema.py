"""Tests for IR Pydantic models — validation, immutability, JSON round-trip."""

import json

import pytest
from pydantic import ValidationError

from adf_converter.ir import (
    BulletListBlock,
    CodeBlock,
    Document,
    HeadingBlock,
    ListItem,
    Mark,
    MarkedTextNode,
    OrderedListBlock,
    ParagraphBlock,
    RuleBlock,
    TextNode,
)
from adf_converter.ir.schema import clamp_heading_level


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _sample_document() -> Document:
    """Build a realistic IR document for testing."""
    return Document(
        blocks=[
            HeadingBlock(level=2, text="Root Cause Analysis"),
            ParagraphBlock(content=[
                TextNode(text="The "),
                MarkedTextNode(mark=Mark.BOLD, text="session cache"),
                TextNode(text=" expired early."),
            ]),
            OrderedListBlock(items=[
                ListItem(content=[TextNode(text="Open "), MarkedTextNode(mark=Mark.CODE, text="auth.py")]),
                ListItem(content=[TextNode(text="Fix TTL")]),
            ]),
            CodeBlock(language="python", text="TTL = 3600\n"),
            RuleBlock(),
            BulletListBlock(items=[ListItem(content=[TextNode(text="Source: Slack Bot")])]),
        ],
    )


class TestDocument:
    def test_defaults(self):
        doc = Document()
        assert doc.kind == "doc"
        assert doc.version == 1
        assert doc.blocks == []

    def test_json_roundtrip(self):
        doc = _sample_document()
        restored = Document.from_json(doc.to_json())
        assert restored == doc

    def test_json_discriminators(self):
        data = json.loads(_sample_document().to_json())
        assert [b["type"] for b in data["blocks"]] == [
            "heading",
            "paragraph",
            "ordered_list",
            "code_block",
            "rule",
            "bullet_list",
        ]
        assert data["blocks"][1]["content"][1] == {
            "type": "marked_text",
            "mark": "bold",
            "text": "session cache",
        }

    def test_from_json_rejects_unknown_block(self):
        bad = json.dumps({"kind": "doc", "version": 1, "blocks": [{"type": "table"}]})
        with pytest.raises(ValidationError):
            Document.from_json(bad)

    def test_rejects_other_version(self):
        with pytest.raises(ValidationError):
            Document(version=2)


class TestBlockValidation:
    @pytest.mark.parametrize("level", [1, 7])
    def test_heading_level_out_of_range(self, level):
        with pytest.raises(ValidationError):
            HeadingBlock(level=level, text="x")

    def test_lists_cannot_be_empty(self):
        with pytest.raises(ValidationError):
            BulletListBlock(items=[])
        with pytest.raises(ValidationError):
            OrderedListBlock(items=[])

    def test_code_block_defaults(self):
        block = CodeBlock()
        assert block.language == "plain"
        assert block.text == ""

    def test_unknown_mark_rejected(self):
        with pytest.raises(ValidationError):
            MarkedTextNode(mark="italic", text="x")

    def test_nodes_are_frozen(self):
        block = HeadingBlock(level=2, text="x")
        with pytest.raises(ValidationError):
            block.text = "y"


class TestClampHeadingLevel:
    @pytest.mark.parametrize("raw, expected", [(0, 2), (1, 2), (2, 2), (3, 3), (6, 6), (9, 6)])
    def test_clamp(self, raw, expected):
        assert clamp_heading_level(raw) == expected
