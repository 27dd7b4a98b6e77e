"""Markdown exporter for country safety profiles."""

from __future__ import annotations

from collections import defaultdict
from datetime import datetime, timezone
from pathlib import Path

from safemap.models import CountryProfile


def _tier(score: int) -> str:
    if score >= 85:
        return "Very safe"
    if score >= 60:
        return "Moderate"
    if score >= 50:
        return "Caution"
    return "Dangerous"


def export_markdown(
    profiles: list[CountryProfile],
    output_path: Path,
) -> Path:
    """Export country profiles as Markdown with a region summary and a full table."""
    timestamp = datetime.now(tz=timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
    lines: list[str] = [
        "# Country Safety Report",
        f"Generated: {timestamp}",
        "",
    ]

    by_region: dict[str, list[int]] = defaultdict(list)
    for p in profiles:
        by_region[p.region or "Other"].append(p.safety_score)

    if by_region:
        lines.extend([
            "## Region Summary",
            "",
            "| Region | Countries | Avg Score |",
            "|:-------|----------:|----------:|",
        ])
        for region in sorted(by_region):
            scores = by_region[region]
            lines.append(
                f"| {region} | {len(scores)} | {sum(scores) / len(scores):.1f} |"
            )
        lines.append("")

    lines.extend([
        "## Countries",
        "",
        "| Country | ISO | Region | Score | Tier | Disaster | Air | Crime | Political |",
        "|:--------|:----|:-------|------:|:-----|---------:|----:|------:|----------:|",
    ])
    for p in profiles:
        lines.append(
            f"| {p.name} | {p.iso} | {p.region or '-'}"
            f" | {p.safety_score} | {_tier(p.safety_score)}"
            f" | {p.disaster_risk} | {p.air_quality}"
            f" | {p.crime_level} | {p.political_unrest} |"
        )

    lines.append("")
    output_path.write_text("\n".join(lines), encoding="utf-8")
    return output_path
