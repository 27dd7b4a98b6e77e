"""Keyword classification of news articles for the alerts feed.

Keywords must end a word, optionally followed by a simple inflection
("floods", "thunderstorm", "protesters"), so "warning" does not count as "war".
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from safemap.models import Alert, AlertClassification, AlertType, NewsArticle, Severity

_INFLECTIONS = r"(?:s|es|ed|ers?|ing)?"


def _words(*keywords: str) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(kw) for kw in keywords)
    return re.compile(rf"(?:{alternatives}){_INFLECTIONS}\b")


# Evaluated top to bottom, first match wins.
SEVERITY_RULES: tuple[tuple[re.Pattern[str], Severity], ...] = (
    (_words("war", "tsunami", "magnitude 7", "nuclear"), "CRITICAL"),
    (_words("flood", "hurricane", "conflict", "outbreak", "cyclone"), "HIGH"),
    (_words("protest", "storm", "wildfire", "unrest"), "MEDIUM"),
)
DEFAULT_SEVERITY: Severity = "LOW"

TYPE_RULES: tuple[tuple[re.Pattern[str], AlertType], ...] = (
    (_words("war", "conflict", "protest"), "Political"),
    (_words("outbreak", "virus"), "Health"),
    (_words("crime", "shooting"), "Crime"),
    (_words("earthquake", "tsunami", "wildfire", "flood"), "Disaster"),
)
DEFAULT_TYPE: AlertType = "Weather"

PLACEHOLDER_ALERTS: tuple[Alert, ...] = (
    Alert(
        id="alert-1",
        title="Severe Storm Watch",
        description="A severe storm watch is in effect for the Great Lakes region.",
        severity="MEDIUM",
        type="Weather",
        source="Global Weather Network",
        url="https://safemap.example.com",
        published_at="2024-01-01T12:00:00Z",
        affected_location="Great Lakes",
    ),
    Alert(
        id="alert-2",
        title="Global Safety Index Released",
        description="Recent stability surveys show improvement in northern regions.",
        severity="LOW",
        type="Political",
        source="SafeMap Intelligence",
        url="https://safemap.example.com",
        published_at="2024-01-01T14:30:00Z",
        affected_location="Global",
    ),
)


def _first_match(
    text: str,
    rules: tuple[tuple[re.Pattern[str], str], ...],
    default: str,
) -> str:
    """Return the label of the first rule whose pattern occurs in *text*."""
    for pattern, label in rules:
        if pattern.search(text):
            return label
    return default


def classify_alert(article: NewsArticle) -> AlertClassification:
    """Assign severity and type to one article.

    The two rules are independent: a flood report is HIGH severity but a
    Political type if it also mentions a protest.
    """
    text = f"{article.title} {article.description}".lower()
    return AlertClassification(
        severity=_first_match(text, SEVERITY_RULES, DEFAULT_SEVERITY),
        type=_first_match(text, TYPE_RULES, DEFAULT_TYPE),
    )


def build_alerts(
    articles: Iterable[NewsArticle],
    affected_location: str | None = None,
) -> list[Alert]:
    """Classify each article into an alert, preserving input order."""
    location = affected_location or "Global"
    alerts: list[Alert] = []
    for index, article in enumerate(articles):
        cls = classify_alert(article)
        alerts.append(
            Alert(
                id=f"alert-{index}",
                title=article.title or "Unknown Alert",
                description=article.description,
                severity=cls.severity,
                type=cls.type,
                source=article.source or "Global News",
                url=article.url,
                published_at=article.published_at,
                affected_location=location,
                url_to_image=article.url_to_image,
            )
        )
    return alerts
