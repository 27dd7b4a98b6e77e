"""Static baseline safety profiles per country and per region.

Country values are curated from the Global Peace Index 2024, IQAir World AQI
rankings 2024 and the Numbeo Crime Index 2024.  Regional averages cover
countries outside the curated table; anything else gets the global default.

The mappings are read-only and built once at import time.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from safemap.models import BaseScore

COUNTRY_BASE_SCORES: Mapping[str, BaseScore] = MappingProxyType({
    # VERY SAFE (85-100) - Nordic + Oceania
    "IS": BaseScore(overall=94, disaster=90, air=95, crime=96, political=95),  # Iceland
    "IE": BaseScore(overall=92, disaster=88, air=90, crime=91, political=94),  # Ireland
    "AT": BaseScore(overall=91, disaster=85, air=88, crime=92, political=93),  # Austria
    "NZ": BaseScore(overall=90, disaster=70, air=92, crime=91, political=95),  # New Zealand
    "CA": BaseScore(overall=90, disaster=75, air=88, crime=88, political=95),  # Canada
    "DK": BaseScore(overall=90, disaster=88, air=89, crime=91, political=93),  # Denmark
    "CH": BaseScore(overall=89, disaster=85, air=87, crime=93, political=92),  # Switzerland
    "FI": BaseScore(overall=89, disaster=87, air=90, crime=92, political=91),  # Finland
    "NO": BaseScore(overall=89, disaster=82, air=91, crime=93, political=92),  # Norway
    "SE": BaseScore(overall=88, disaster=85, air=89, crime=88, political=91),  # Sweden
    "AU": BaseScore(overall=88, disaster=55, air=90, crime=85, political=92),  # Australia
    "JP": BaseScore(overall=85, disaster=40, air=82, crime=95, political=90),  # Japan
    "DE": BaseScore(overall=84, disaster=80, air=82, crime=85, political=89),  # Germany
    "GB": BaseScore(overall=82, disaster=80, air=75, crime=50, political=88),  # UK
    "NL": BaseScore(overall=82, disaster=75, air=78, crime=82, political=89),  # Netherlands
    "BE": BaseScore(overall=80, disaster=82, air=75, crime=72, political=84),  # Belgium
    "FR": BaseScore(overall=79, disaster=70, air=72, crime=58, political=82),  # France
    "ES": BaseScore(overall=79, disaster=72, air=76, crime=74, political=82),  # Spain
    "PT": BaseScore(overall=80, disaster=68, air=80, crime=82, political=84),  # Portugal
    "IT": BaseScore(overall=76, disaster=60, air=68, crime=65, political=80),  # Italy
    "GR": BaseScore(overall=74, disaster=58, air=72, crime=68, political=76),  # Greece

    # MODERATE SAFE (60-79)
    "US": BaseScore(overall=75, disaster=45, air=72, crime=55, political=85),  # USA
    "CN": BaseScore(overall=60, disaster=50, air=40, crime=75, political=55),  # China
    "IN": BaseScore(overall=61, disaster=50, air=35, crime=60, political=65),  # India
    "BR": BaseScore(overall=55, disaster=60, air=65, crime=35, political=60),  # Brazil
    "MX": BaseScore(overall=52, disaster=55, air=58, crime=30, political=62),  # Mexico
    "ZA": BaseScore(overall=45, disaster=55, air=62, crime=25, political=58),  # South Africa
    "TR": BaseScore(overall=58, disaster=50, air=60, crime=62, political=52),  # Turkey
    "TH": BaseScore(overall=65, disaster=55, air=58, crime=68, political=62),  # Thailand
    "MY": BaseScore(overall=68, disaster=60, air=62, crime=72, political=65),  # Malaysia
    "SG": BaseScore(overall=91, disaster=75, air=78, crime=96, political=88),  # Singapore
    "AE": BaseScore(overall=78, disaster=80, air=55, crime=88, political=72),  # UAE
    "SA": BaseScore(overall=55, disaster=75, air=45, crime=70, political=48),  # Saudi Arabia
    "EG": BaseScore(overall=48, disaster=65, air=35, crime=55, political=42),  # Egypt
    "NG": BaseScore(overall=35, disaster=45, air=40, crime=28, political=30),  # Nigeria
    "KE": BaseScore(overall=48, disaster=50, air=55, crime=38, political=45),  # Kenya
    "GH": BaseScore(overall=62, disaster=58, air=52, crime=62, political=65),  # Ghana
    "ET": BaseScore(overall=38, disaster=40, air=48, crime=42, political=32),  # Ethiopia
    "TZ": BaseScore(overall=52, disaster=48, air=58, crime=52, political=55),  # Tanzania
    "MA": BaseScore(overall=58, disaster=60, air=52, crime=58, political=55),  # Morocco
    "TN": BaseScore(overall=60, disaster=65, air=58, crime=60, political=56),  # Tunisia
    "PH": BaseScore(overall=52, disaster=35, air=50, crime=48, political=55),  # Philippines
    "ID": BaseScore(overall=55, disaster=30, air=42, crime=60, political=58),  # Indonesia
    "VN": BaseScore(overall=65, disaster=45, air=45, crime=72, political=62),  # Vietnam
    "KR": BaseScore(overall=78, disaster=65, air=55, crime=88, political=80),  # South Korea
    "TW": BaseScore(overall=82, disaster=50, air=65, crime=90, political=82),  # Taiwan
    "HK": BaseScore(overall=75, disaster=65, air=60, crime=88, political=65),  # Hong Kong
    "AR": BaseScore(overall=55, disaster=60, air=65, crime=40, political=58),  # Argentina
    "CL": BaseScore(overall=65, disaster=45, air=68, crime=58, political=70),  # Chile
    "CO": BaseScore(overall=50, disaster=52, air=60, crime=35, political=52),  # Colombia
    "PE": BaseScore(overall=52, disaster=45, air=58, crime=42, political=55),  # Peru

    # DANGEROUS (0-49)
    "RU": BaseScore(overall=40, disaster=55, air=60, crime=45, political=20),  # Russia
    "PK": BaseScore(overall=35, disaster=40, air=35, crime=40, political=25),  # Pakistan
    "AF": BaseScore(overall=8, disaster=25, air=30, crime=10, political=5),  # Afghanistan
    "UA": BaseScore(overall=20, disaster=15, air=40, crime=30, political=5),  # Ukraine
    "SY": BaseScore(overall=12, disaster=20, air=30, crime=10, political=5),  # Syria
    "YE": BaseScore(overall=10, disaster=20, air=35, crime=12, political=5),  # Yemen
    "SO": BaseScore(overall=8, disaster=25, air=40, crime=8, political=5),  # Somalia
    "SD": BaseScore(overall=18, disaster=28, air=32, crime=15, political=10),  # Sudan
    "IQ": BaseScore(overall=25, disaster=35, air=28, crime=20, political=15),  # Iraq
    "LY": BaseScore(overall=22, disaster=40, air=38, crime=18, political=12),  # Libya
    "MM": BaseScore(overall=28, disaster=35, air=38, crime=25, political=15),  # Myanmar
    "VE": BaseScore(overall=25, disaster=50, air=55, crime=12, political=18),  # Venezuela
    "HT": BaseScore(overall=18, disaster=25, air=45, crime=10, political=15),  # Haiti
    "CD": BaseScore(overall=15, disaster=30, air=38, crime=12, political=8),  # DR Congo
    "CF": BaseScore(overall=12, disaster=25, air=42, crime=10, political=8),  # Central African Rep
    "ML": BaseScore(overall=22, disaster=35, air=30, crime=20, political=12),  # Mali
    "NE": BaseScore(overall=25, disaster=30, air=28, crime=22, political=15),  # Niger
    "SS": BaseScore(overall=10, disaster=22, air=35, crime=8, political=5),  # South Sudan
})

REGIONAL_AVERAGES: Mapping[str, BaseScore] = MappingProxyType({
    "Africa": BaseScore(overall=35, disaster=42, air=45, crime=32, political=32),
    "Americas": BaseScore(overall=55, disaster=55, air=63, crime=40, political=62),
    "Asia": BaseScore(overall=52, disaster=48, air=48, crime=58, political=48),
    "Europe": BaseScore(overall=78, disaster=74, air=79, crime=76, political=80),
    "Oceania": BaseScore(overall=85, disaster=62, air=90, crime=86, political=92),
})

GLOBAL_DEFAULT = BaseScore(overall=60, disaster=50, air=60, crime=60, political=60)


def get_country_score(code: str | None, region: str | None = None) -> BaseScore:
    """Resolve the base profile: country table, then region, then global default."""
    if code:
        score = COUNTRY_BASE_SCORES.get(code.strip().upper())
        if score is not None:
            return score
    if region:
        score = REGIONAL_AVERAGES.get(region)
        if score is not None:
            return score
    return GLOBAL_DEFAULT
