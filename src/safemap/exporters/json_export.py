"""JSON exporter for country safety profiles."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path

from safemap.models import CountryProfile


def export_json(
    profiles: list[CountryProfile],
    output_path: Path,
    indent: int = 2,
) -> Path:
    """Export country profiles to a JSON file."""
    data = [asdict(p) for p in profiles]
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, ensure_ascii=False)
    return output_path
