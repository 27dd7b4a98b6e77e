"""CSV exporter for country safety profiles."""

from __future__ import annotations

import csv
from pathlib import Path

from safemap.models import CountryProfile

FIELDNAMES = [
    "name",
    "iso",
    "region",
    "capital",
    "population",
    "safety_score",
    "disaster_risk",
    "air_quality",
    "crime_level",
    "political_unrest",
]


def export_csv(
    profiles: list[CountryProfile],
    output_path: Path,
) -> Path:
    """Export country profiles as a flat CSV, one row per country."""
    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
        writer.writeheader()
        for p in profiles:
            writer.writerow({name: getattr(p, name) for name in FIELDNAMES})
    return output_path
