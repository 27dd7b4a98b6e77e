"""Data models for the safety scoring engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

Severity = Literal["CRITICAL", "HIGH", "MEDIUM", "LOW"]
AlertType = Literal["Disaster", "Weather", "Political", "Health", "Crime"]


@dataclass(frozen=True)
class BaseScore:
    """Static safety profile for a country or region.

    ``overall``, ``air``, ``crime`` and ``political`` are safety-direction
    (higher = safer). ``disaster`` is passed to the calculator as a
    risk-direction input and inverted there.
    """

    overall: int
    disaster: int
    air: int
    crime: int
    political: int


@dataclass(frozen=True)
class WeatherObservation:
    """Current conditions from a weather provider, already normalized."""

    temperature: float
    wind_speed: float
    condition: str
    description: str
    humidity: float = 50.0


@dataclass(frozen=True)
class NewsArticle:
    """A single news item, already normalized from the provider payload."""

    title: str
    description: str = ""
    source: str = ""
    url: str = ""
    published_at: str = ""
    url_to_image: str | None = None


@dataclass(frozen=True)
class SentimentResult:
    """Political/stability score derived from a batch of articles."""

    score: int
    has_critical: bool


@dataclass(frozen=True)
class AlertClassification:
    """Severity and category assigned to one article."""

    severity: Severity
    type: AlertType


@dataclass(frozen=True)
class Alert:
    """A classified news item for the public alerts feed."""

    id: str
    title: str
    description: str
    severity: Severity
    type: AlertType
    source: str
    url: str
    published_at: str
    affected_location: str
    url_to_image: str | None = None


@dataclass
class WeatherReport:
    """A weather observation together with its risk score."""

    observation: WeatherObservation
    weather_risk: int
    city: str = ""
    country: str = ""


@dataclass
class SafetyScoreResult:
    """Composite safety assessment for one place.

    All numeric fields are safety-direction integers in [0, 100].
    """

    overall: int
    disaster: int
    air_quality: int
    crime: int
    political: int
    weather: int
    last_updated: str
    ai_insight: str
    news_alerts: list[NewsArticle] = field(default_factory=list)
    weather_data: WeatherReport | None = None


@dataclass
class CountryProfile:
    """A country joined with its static base profile."""

    name: str
    iso: str
    flag: str
    capital: str
    region: str
    population: int
    timezone: str
    safety_score: int
    disaster_risk: int
    air_quality: int
    crime_level: int
    political_unrest: int
    news: list[NewsArticle] = field(default_factory=list)
    weather: WeatherReport | None = None


@dataclass
class CityIntelligence:
    """Base profile plus live signals for a city, resolved to its country."""

    city: str
    country: str
    iso: str
    flag: str
    region: str
    timezone: str
    safety_score: int
    disaster_risk: int
    air_quality: int
    crime_level: int
    political_unrest: int
    news: list[NewsArticle] = field(default_factory=list)
    weather: WeatherReport | None = None


@dataclass(frozen=True)
class GeocodeResult:
    """A resolved location."""

    lat: float
    lng: float
    formatted_address: str
    country: str
    country_code: str
