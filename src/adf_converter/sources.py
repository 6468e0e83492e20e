"""Helpers for turning upstream messages into converter input."""

from __future__ import annotations

from typing import Any, Optional

TITLE_MAX_LENGTH = 100
ELLIPSIS = "..."
TRIGGER_PHRASE = "create a ticket"


def clean_slack_text(event: dict[str, Any]) -> str:
    """Extract the user-written text from a Slack message event.

    Messages with no ``blocks`` key fall back to their ``text`` field. Otherwise
    only ``text`` elements inside ``rich_text_section`` elements of
    ``rich_text`` blocks are kept, which drops mentions, emoji and links.
    """
    blocks = event.get("blocks")
    if blocks is None:
        return event.get("text") or ""

    parts: list[str] = []
    for block in blocks:
        if block.get("type") != "rich_text":
            continue
        for element in block.get("elements") or []:
            if element.get("type") != "rich_text_section":
                continue
            for item in element.get("elements") or []:
                if item.get("type") == "text":
                    parts.append(item.get("text", ""))

    return "".join(parts).strip()


def truncate(text: str, limit: int) -> str:
    """Cut text to at most ``limit`` characters, ending in an ellipsis."""
    if len(text) <= limit:
        return text
    return text[: max(limit - len(ELLIPSIS), 0)] + ELLIPSIS


def fallback_title(text: str) -> str:
    """Ticket title used when no generated title is available."""
    return truncate(text, TITLE_MAX_LENGTH)


def is_ticket_request(text: str) -> bool:
    """Whether a message asks for a ticket (case-insensitive phrase match)."""
    return TRIGGER_PHRASE in (text or "").lower()


def is_thread_reply(event: dict[str, Any]) -> bool:
    """A reply carries a ``thread_ts`` pointing at a different message."""
    thread_ts = event.get("thread_ts")
    return bool(thread_ts) and thread_ts != event.get("ts")


def reply_thread_ts(event: dict[str, Any]) -> Optional[str]:
    """Thread to answer in: the existing thread, or the message itself."""
    thread_ts = event.get("thread_ts")
    return thread_ts if thread_ts is not None else event.get("ts")


def fallback_permalink(channel: str, ts: str) -> str:
    """Archive URL used when the permalink API is unavailable."""
    return f"https://slack.com/archives/{channel}/p{ts.replace('.', '', 1)}"
