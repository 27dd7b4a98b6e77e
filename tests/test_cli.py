"""Tests for the Typer CLI."""

from __future__ import annotations

import json

import pytest
import responses
from typer.testing import CliRunner

from safemap import __version__
from safemap.cli import app
from safemap.fetchers.countries import REST_COUNTRIES_ALL

runner = CliRunner()


@pytest.fixture(autouse=True)
def keyless_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "SAFEMAP_OPENWEATHER_KEY",
        "SAFEMAP_NEWS_API_KEY",
        "SAFEMAP_NEWS_DATA_KEY",
        "SAFEMAP_GOOGLE_MAPS_KEY",
    ):
        monkeypatch.delenv(name, raising=False)


class TestVersion:
    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestScoreCommand:
    def test_keyless_score(self):
        result = runner.invoke(app, ["score", "JP", "--city", "Tokyo", "--no-cache"])
        assert result.exit_code == 0
        assert "Overall" in result.output
        assert "77" in result.output
        assert "Favorable environment" in result.output

    def test_failure_exits_1(self, monkeypatch):
        def boom(*args, **kwargs):
            raise RuntimeError("upstream down")

        monkeypatch.setattr("safemap.cli.assess_location", boom)
        result = runner.invoke(app, ["score", "US"])
        assert result.exit_code == 1
        assert "upstream down" in result.output


class TestCountriesCommand:
    @responses.activate
    def test_exports_json(self, sample_countries, tmp_path):
        responses.add(responses.GET, REST_COUNTRIES_ALL, json=sample_countries, status=200)
        output = tmp_path / "countries.json"
        result = runner.invoke(app, ["countries", "--output", str(output), "--no-cache"])
        assert result.exit_code == 0
        data = json.loads(output.read_text())
        assert [c["iso"] for c in data] == ["IS", "JP", "EE", "IN", "AQ"]
        assert "Total countries: 5" in result.output

    @responses.activate
    def test_exports_csv_for_region(self, sample_countries, tmp_path):
        responses.add(responses.GET, REST_COUNTRIES_ALL, json=sample_countries, status=200)
        output = tmp_path / "europe.csv"
        result = runner.invoke(
            app,
            ["countries", "-r", "Europe", "-f", "csv", "-o", str(output), "--no-cache"],
        )
        assert result.exit_code == 0
        lines = output.read_text().splitlines()
        assert len(lines) == 3

    @responses.activate
    def test_no_match(self, sample_countries, tmp_path):
        responses.add(responses.GET, REST_COUNTRIES_ALL, json=sample_countries, status=200)
        output = tmp_path / "none.json"
        result = runner.invoke(
            app, ["countries", "-r", "Atlantis", "-o", str(output), "--no-cache"]
        )
        assert result.exit_code == 0
        assert "No countries matched" in result.output
        assert not output.exists()

    @responses.activate
    def test_fetch_failure_exits_1(self, tmp_path):
        responses.add(responses.GET, REST_COUNTRIES_ALL, status=404)
        result = runner.invoke(
            app, ["countries", "-o", str(tmp_path / "x.json"), "--no-cache"]
        )
        assert result.exit_code == 1


class TestAlertsCommand:
    def test_placeholder_feed(self):
        result = runner.invoke(app, ["alerts"])
        assert result.exit_code == 0
        assert "MEDIUM" in result.output
        assert "Political" in result.output


class TestWeatherRiskCommand:
    def test_clear_default(self):
        result = runner.invoke(app, ["weather-risk", "20", "2"])
        assert result.exit_code == 0
        assert "Weather risk: 20 / 100" in result.output

    def test_capped(self):
        result = runner.invoke(app, ["weather-risk", "45", "20", "Snow"])
        assert "Weather risk: 100 / 100" in result.output

    def test_severe(self):
        result = runner.invoke(app, ["weather-risk", "20", "0", "Tornado"])
        assert "Weather risk: 95 / 100" in result.output
