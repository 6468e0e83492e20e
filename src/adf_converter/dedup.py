"""Bounded cache of already-processed event identifiers.

Webhook providers retry deliveries, so the same event can arrive more than
once. The cache remembers the most recent keys in insertion order and
evicts the oldest once it grows past its capacity.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Any, Optional

from adf_converter.config import Config

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 1000


class SeenEventCache:
    """Insertion-ordered, capacity-bounded set of event keys."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._keys: OrderedDict[str, None] = OrderedDict()

    @classmethod
    def from_config(cls, config: Config | None = None) -> SeenEventCache:
        config = config or Config.default()
        return cls(config.dedup.capacity)

    def __contains__(self, key: object) -> bool:
        return key in self._keys

    def __len__(self) -> int:
        return len(self._keys)

    def add(self, key: str) -> None:
        self._keys[key] = None
        while len(self._keys) > self.capacity:
            evicted, _ = self._keys.popitem(last=False)
            logger.debug("Evicted event key %s", evicted)

    def check_and_add(self, key: str) -> bool:
        """Record a key and report whether it had been seen before.

        Returns:
            True if the key is a duplicate, False if it was newly added.
        """
        if key in self._keys:
            logger.debug("Duplicate event detected, skipping: %s", key)
            return True
        self.add(key)
        return False


def event_key(body: dict[str, Any], event: Optional[dict[str, Any]] = None) -> str:
    """Build the ``<channel>_<ts>_<event_ts>`` key for a webhook delivery.

    Args:
        body: The webhook envelope, or the bare event.
        event: The inner event. Defaults to ``body["event"]``, then ``body``.
    """
    if event is None:
        event = body["event"] if body.get("event") is not None else body
    ts = event.get("ts")
    event_ts = body.get("event_ts") or event.get("event_ts") or ts
    return f"{event.get('channel')}_{ts}_{event_ts}"
