"""Tests for provider payload normalization."""

from __future__ import annotations

import pytest

from safemap.normalize import (
    article_from_newsapi,
    article_from_newsdata,
    to_iso2,
    weather_from_openweather,
)


class TestToIso2:
    @pytest.mark.parametrize(
        ("code", "expected"),
        [("jp", "JP"), ("GB", "GB"), ("JPN", "JP"), ("usa", "US"), (" gbr ", "GB")],
    )
    def test_known_codes(self, code, expected):
        assert to_iso2(code) == expected

    def test_alpha3_not_sliced(self):
        assert to_iso2("ARE") == "AE"

    def test_unknown_alpha3_falls_back_to_us(self):
        assert to_iso2("XYZ") == "US"

    def test_empty_falls_back_to_us(self):
        assert to_iso2("") == "US"

    def test_unknown_code_logs_warning(self, caplog):
        with caplog.at_level("WARNING", logger="safemap.normalize"):
            to_iso2("QQQQ")
        assert "Unknown ISO code" in caplog.text


class TestWeatherFromOpenweather:
    def test_sample_payload(self, sample_openweather_response):
        obs = weather_from_openweather(sample_openweather_response)
        assert obs.temperature == pytest.approx(3.2)
        assert obs.wind_speed == pytest.approx(9.3)
        assert obs.condition == "Rain"
        assert obs.humidity == pytest.approx(87)

    def test_empty_payload_uses_defaults(self):
        obs = weather_from_openweather({})
        assert obs.temperature == 25.0
        assert obs.wind_speed == 0.0
        assert obs.condition == "Clear"
        assert obs.description == "clear sky"
        assert obs.humidity == 50.0

    def test_non_numeric_fields_use_defaults(self):
        obs = weather_from_openweather(
            {"main": {"temp": "hot", "humidity": None}, "wind": {"speed": "NaN"}}
        )
        assert obs.temperature == 25.0
        assert obs.wind_speed == 0.0
        assert obs.humidity == 50.0

    def test_numeric_strings_accepted(self):
        obs = weather_from_openweather({"main": {"temp": "12.5"}})
        assert obs.temperature == 12.5

    def test_negative_wind_clamped(self):
        obs = weather_from_openweather({"wind": {"speed": -4}})
        assert obs.wind_speed == 0.0

    def test_empty_condition_list(self):
        obs = weather_from_openweather({"weather": []})
        assert obs.condition == "Clear"


class TestArticleFromNewsapi:
    def test_sample_article(self, sample_newsapi_response):
        article = article_from_newsapi(sample_newsapi_response["articles"][0])
        assert article.title.startswith("Earthquake")
        assert article.source == "Reuters"
        assert "tsunami" in article.description.lower()

    def test_null_description_becomes_empty(self, sample_newsapi_response):
        article = article_from_newsapi(sample_newsapi_response["articles"][3])
        assert article.description == ""

    def test_missing_fields(self):
        article = article_from_newsapi({})
        assert article.title == ""
        assert article.source == ""
        assert article.url_to_image is None

    def test_string_source(self):
        assert article_from_newsapi({"source": "Wire"}).source == "Wire"


class TestArticleFromNewsdata:
    def test_sample_result(self, sample_newsdata_response):
        article = article_from_newsdata(sample_newsdata_response["results"][0])
        assert article.title == "Ceasefire agreement holds as tourism recovers"
        assert article.source == "globalwire"
        assert article.url == "https://example.com/ceasefire"
