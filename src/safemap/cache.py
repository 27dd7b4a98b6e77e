"""File-based cache with TTL expiry for provider responses."""

from __future__ import annotations

import hashlib
import json
import logging
import os
import tempfile
import time
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

_CACHE_DIR = Path.home() / ".cache" / "safemap"

# TTLs in seconds
WEATHER_TTL = 1800  # 30 minutes
NEWS_TTL = 300  # 5 minutes
COUNTRIES_TTL = 3600  # 1 hour
GEOCODE_TTL = 86400  # 24 hours


def get_cache_dir() -> Path:
    """Return the cache directory, creating it if needed."""
    _CACHE_DIR.mkdir(parents=True, exist_ok=True)
    return _CACHE_DIR


def cache_key(prefix: str, *parts: str) -> str:
    """Build a filesystem-safe key from free-text parts (city names, queries)."""
    digest = hashlib.sha1("\x1f".join(parts).encode("utf-8")).hexdigest()[:16]
    return f"{prefix}_{digest}.json"


def cache_get(key: str, max_age_seconds: int) -> Any | None:
    """Return the cached JSON value if fresh, else None."""
    cache_dir = get_cache_dir()
    data_path = cache_dir / key
    meta_path = cache_dir / f"{key}.meta"

    if not data_path.exists() or not meta_path.exists():
        return None

    try:
        meta = json.loads(meta_path.read_text())
        if time.time() - meta["timestamp"] > max_age_seconds:
            logger.debug("Cache expired for %s", key)
            return None
        value = json.loads(data_path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, KeyError, TypeError):
        return None

    logger.debug("Cache hit for %s", key)
    return value


def _write_atomic(path: Path, text: str) -> None:
    with tempfile.NamedTemporaryFile(
        "w", dir=path.parent, suffix=".tmp", delete=False, encoding="utf-8"
    ) as tmp:
        tmp.write(text)
    os.replace(tmp.name, path)


def cache_put(key: str, value: Any) -> None:
    """Store a JSON-serialisable value with the current timestamp.

    Each file is swapped in with an atomic rename, data first and meta last,
    so a reader never sees a partially written file or a fresh timestamp
    next to old data.
    """
    cache_dir = get_cache_dir()
    _write_atomic(cache_dir / key, json.dumps(value))
    _write_atomic(cache_dir / f"{key}.meta", json.dumps({"timestamp": time.time()}))
    logger.debug("Cached %s", key)
