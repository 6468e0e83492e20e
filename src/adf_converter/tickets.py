"""Request bodies for the Jira Cloud issue and comment endpoints.

Only payloads are built here; sending them is left to the caller's HTTP
client.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from adf_converter.config import Config
from adf_converter.generators.adf_generator import AdfGenerator
from adf_converter.ir.schema import Document, Mark, MarkedTextNode, ParagraphBlock, TextNode
from adf_converter.parsers.plain_parser import PlainTextParser
from adf_converter.pipeline import Pipeline
from adf_converter.sources import truncate

logger = logging.getLogger(__name__)

SLACK_INTRO = "Created automatically from Slack message."
ORIGINAL_MESSAGE_LABEL = "Original message:"
SLACK_LINK_TEXT = "View in Slack"


def append_metadata(
    description: str,
    source: str = "Slack Bot",
    generated_at: Optional[datetime] = None,
) -> str:
    """Append a rule and a metadata list to a markdown description."""
    generated_at = generated_at or datetime.now(timezone.utc)
    return (
        f"{description}\n\n---\n\n*Metadata*\n"
        f"- Source: {source}\n"
        f"- Generated: {generated_at.isoformat()}"
    )


def build_issue_payload(
    summary: str,
    description: str,
    config: Config | None = None,
    pipeline: Pipeline | None = None,
) -> dict[str, Any]:
    """Build the body for ``POST /rest/api/3/issue``.

    Args:
        summary: Issue title; truncated to ``jira.summary_max_length``.
        description: Markdown description, converted to ADF.
        config: Converter configuration. Uses default if None.
        pipeline: Pipeline used for the conversion. Built from config if None.

    Returns:
        A JSON-serializable dict with a ``fields`` object.
    """
    if config is None:
        config = pipeline.config if pipeline else Config.default()
    pipeline = pipeline or Pipeline(config)
    return _issue_payload(summary, pipeline.convert(description), config)


def build_slack_issue_payload(
    title: str,
    summary: str,
    original_text: str,
    permalink: str,
    config: Config | None = None,
) -> dict[str, Any]:
    """Issue body for a ticket raised from a Slack message.

    The description is laid out by ``build_slack_description`` instead of
    being parsed as markdown.
    """
    config = config or Config.default()
    description = build_slack_description(summary, original_text, permalink, config)
    return _issue_payload(title, description, config)


def _issue_payload(summary: str, description: dict[str, Any], config: Config) -> dict[str, Any]:
    jira = config.jira
    title = truncate(summary, jira.summary_max_length)
    if title != summary:
        logger.debug("Truncated summary from %d to %d chars", len(summary), len(title))

    return {
        "fields": {
            "project": {"key": jira.project_key},
            "summary": title,
            "description": description,
            "issuetype": {"name": jira.issue_type},
            "labels": list(jira.labels),
        }
    }


def build_slack_description(
    summary: str,
    original_text: str,
    permalink: str,
    config: Config | None = None,
) -> dict[str, Any]:
    """ADF description for a ticket created from a Slack message.

    Layout: an intro line, the summary in bold, the original message one
    literal paragraph per line (blank lines kept as empty paragraphs), and
    a bold "View in Slack" link to the message.

    Args:
        summary: Generated summary of the request.
        original_text: The Slack message text, never parsed as markdown.
        permalink: URL of the Slack message.
        config: Converter configuration. Uses default if None.

    Returns:
        An ADF ``doc`` node.
    """
    config = config or Config.default()
    original = PlainTextParser(config).parse(original_text or "").blocks or [ParagraphBlock()]
    document = Document(blocks=[
        ParagraphBlock(content=[TextNode(text=SLACK_INTRO)]),
        ParagraphBlock(content=[MarkedTextNode(mark=Mark.BOLD, text=summary)]),
        ParagraphBlock(content=[TextNode(text=ORIGINAL_MESSAGE_LABEL)]),
        *original,
    ])

    adf = AdfGenerator(config).generate(document)
    # Links are outside the IR mark set, so this node is built as ADF directly.
    adf["content"].append({
        "type": "paragraph",
        "content": [{
            "type": "text",
            "text": SLACK_LINK_TEXT,
            "marks": [
                {"type": "link", "attrs": {"href": permalink}},
                {"type": "strong"},
            ],
        }],
    })
    return adf


def build_comment_payload(text: str, pipeline: Pipeline | None = None) -> dict[str, Any]:
    """Build the body for ``POST /rest/api/3/issue/{key}/comment``."""
    pipeline = pipeline or Pipeline()
    return {"body": pipeline.convert(text)}


def issue_url(base_url: str, key: str) -> str:
    """Browser URL of an issue."""
    return f"{base_url.rstrip('/')}/browse/{key}"
