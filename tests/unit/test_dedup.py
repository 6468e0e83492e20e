"""Tests for the seen-event cache and event key construction."""

import pytest

from adf_converter.config import Config, DedupConfig
from adf_converter.dedup import SeenEventCache, event_key


class TestSeenEventCache:
    def test_first_sighting_is_not_duplicate(self):
        cache = SeenEventCache()
        assert cache.check_and_add("C1_1.0_1.0") is False
        assert "C1_1.0_1.0" in cache

    def test_second_sighting_is_duplicate(self):
        cache = SeenEventCache()
        cache.check_and_add("k")
        assert cache.check_and_add("k") is True
        assert len(cache) == 1

    def test_evicts_oldest_over_capacity(self):
        cache = SeenEventCache(capacity=3)
        for key in ["a", "b", "c", "d"]:
            cache.add(key)
        assert len(cache) == 3
        assert "a" not in cache
        assert all(k in cache for k in ["b", "c", "d"])

    def test_evicted_key_is_new_again(self):
        cache = SeenEventCache(capacity=1)
        cache.check_and_add("a")
        cache.check_and_add("b")
        assert cache.check_and_add("a") is False

    def test_duplicate_does_not_refresh_position(self):
        cache = SeenEventCache(capacity=2)
        cache.check_and_add("a")
        cache.check_and_add("b")
        cache.check_and_add("a")
        cache.check_and_add("c")
        assert "a" not in cache

    def test_from_config(self):
        cache = SeenEventCache.from_config(Config(dedup=DedupConfig(capacity=5)))
        assert cache.capacity == 5

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            SeenEventCache(capacity=0)


class TestEventKey:
    def test_envelope_event_ts_preferred(self):
        body = {"event_ts": "9.9", "event": {"channel": "C1", "ts": "1.0", "event_ts": "2.0"}}
        assert event_key(body) == "C1_1.0_9.9"

    def test_falls_back_to_event_event_ts(self):
        body = {"event": {"channel": "C1", "ts": "1.0", "event_ts": "2.0"}}
        assert event_key(body) == "C1_1.0_2.0"

    def test_falls_back_to_ts(self):
        assert event_key({"channel": "C1", "ts": "1.0"}) == "C1_1.0_1.0"

    def test_explicit_event(self):
        body = {"type": "event_callback"}
        assert event_key(body, {"channel": "C2", "ts": "3.0"}) == "C2_3.0_3.0"

    def test_empty_inner_event_is_used(self):
        assert event_key({"event": {}, "channel": "C"}) == "None_None_None"
