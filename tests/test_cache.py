"""Tests for the file-based cache layer."""

from __future__ import annotations

import json
import os
import time
from unittest.mock import patch

from safemap.cache import cache_get, cache_key, cache_put, get_cache_dir


class TestCacheLayer:
    def test_miss_returns_none(self):
        assert cache_get("nonexistent.json", max_age_seconds=3600) is None

    def test_put_then_get(self):
        cache_put("test.json", {"temp": 21.5, "tags": ["a", "b"]})
        result = cache_get("test.json", max_age_seconds=3600)
        assert result == {"temp": 21.5, "tags": ["a", "b"]}

    def test_list_values(self):
        cache_put("list.json", [{"title": "x"}])
        assert cache_get("list.json", max_age_seconds=3600) == [{"title": "x"}]

    def test_expired_returns_none(self, isolated_cache):
        cache_put("old.json", {"stale": True})
        # Backdate the meta timestamp
        meta_path = isolated_cache / "old.json.meta"
        meta_path.write_text(json.dumps({"timestamp": time.time() - 7200}))
        assert cache_get("old.json", max_age_seconds=3600) is None

    def test_cache_dir_created(self, monkeypatch, tmp_path):
        cache_dir = tmp_path / "sub" / "deep"
        monkeypatch.setattr("safemap.cache._CACHE_DIR", cache_dir)
        result = get_cache_dir()
        assert result == cache_dir
        assert cache_dir.is_dir()

    def test_different_keys_dont_collide(self):
        cache_put("a.json", "alpha")
        cache_put("b.json", "bravo")
        assert cache_get("a.json", max_age_seconds=3600) == "alpha"
        assert cache_get("b.json", max_age_seconds=3600) == "bravo"

    def test_corrupted_meta_returns_none(self, isolated_cache):
        isolated_cache.mkdir(parents=True, exist_ok=True)
        (isolated_cache / "bad.json").write_text("{}")
        (isolated_cache / "bad.json.meta").write_text("not json")
        assert cache_get("bad.json", max_age_seconds=3600) is None

    def test_overwrite_leaves_no_temp_files(self, isolated_cache):
        cache_put("w.json", {"v": 1})
        cache_put("w.json", {"v": 2})
        assert cache_get("w.json", max_age_seconds=3600) == {"v": 2}
        assert sorted(p.name for p in isolated_cache.iterdir()) == ["w.json", "w.json.meta"]

    def test_meta_written_after_data(self, isolated_cache):
        written: list[str] = []
        real_replace = os.replace

        def recording_replace(src, dst):
            written.append(os.path.basename(dst))
            real_replace(src, dst)

        with patch("safemap.cache.os.replace", side_effect=recording_replace):
            cache_put("order.json", [1, 2])
        assert written == ["order.json", "order.json.meta"]

    def test_corrupted_data_returns_none(self, isolated_cache):
        cache_put("broken.json", {"ok": True})
        (isolated_cache / "broken.json").write_text("{truncated")
        assert cache_get("broken.json", max_age_seconds=3600) is None


class TestCacheKey:
    def test_stable(self):
        assert cache_key("weather", "tokyo", "JP") == cache_key("weather", "tokyo", "JP")

    def test_prefix_and_suffix(self):
        key = cache_key("news", "safety OR conflict")
        assert key.startswith("news_")
        assert key.endswith(".json")

    def test_filesystem_safe(self):
        key = cache_key("geocode", "São Paulo / Brazil")
        assert "/" not in key
        assert " " not in key

    def test_parts_are_separated(self):
        assert cache_key("x", "ab", "c") != cache_key("x", "a", "bc")
