"""CLI interface using Typer."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from safemap import __version__
from safemap.config import OutputFormat, SafeMapConfig
from safemap.exporters import export_csv, export_json, export_markdown
from safemap.models import CountryProfile
from safemap.pipeline import assess_location, build_alert_feed, build_country_profiles
from safemap.scoring import calculate_weather_risk

Exporter = Callable[[list[CountryProfile], Path], Path]

EXPORTERS: dict[str, Exporter] = {
    "json": export_json,
    "csv": export_csv,
    "markdown": export_markdown,
}

SEVERITY_STYLES: dict[str, str] = {
    "CRITICAL": "[bold red]CRITICAL[/bold red]",
    "HIGH": "[dark_orange]HIGH[/dark_orange]",
    "MEDIUM": "[yellow]MEDIUM[/yellow]",
    "LOW": "[green]LOW[/green]",
}

app = typer.Typer(
    name="safemap",
    help="Travel safety scores from country baselines, live weather and news.",
    add_completion=False,
)
console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"safemap {__version__}")
        raise typer.Exit()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[logging.StreamHandler()],
    )


def _score_style(score: int) -> str:
    if score >= 70:
        return f"[green]{score}[/green]"
    if score >= 45:
        return f"[yellow]{score}[/yellow]"
    return f"[red]{score}[/red]"


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """SafeMap: rule-based travel safety scoring."""


@app.command()
def score(
    country: Annotated[
        str, typer.Argument(help="ISO alpha-2 or alpha-3 country code.")
    ],
    city: Annotated[
        str | None,
        typer.Option("--city", "-c", help="City for live weather."),
    ] = None,
    no_cache: Annotated[
        bool,
        typer.Option("--no-cache", help="Disable disk caching of provider responses."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging."),
    ] = False,
) -> None:
    """Compute the composite safety score for a place."""
    _setup_logging(verbose)
    config = SafeMapConfig(cache_enabled=not no_cache)

    try:
        result = assess_location(config, country=country, city=city)
    except Exception as exc:
        console.print(f"[red]Scoring failed:[/red] {exc}")
        raise typer.Exit(code=1) from None

    table = Table(title=f"Safety Score: {city or config.default_city}, {country.upper()}")
    table.add_column("Component", style="bold")
    table.add_column("Score", justify="right")
    for label, value in (
        ("Overall", result.overall),
        ("Disaster", result.disaster),
        ("Air quality", result.air_quality),
        ("Crime", result.crime),
        ("Political", result.political),
        ("Weather", result.weather),
    ):
        table.add_row(label, _score_style(value))

    console.print()
    console.print(table)
    console.print(f"\n{result.ai_insight}")
    if result.weather_data is not None:
        obs = result.weather_data.observation
        console.print(
            f"Weather: {obs.condition} ({obs.description}), {obs.temperature:.1f}°C,"
            f" wind {obs.wind_speed:.1f} m/s"
        )
    for article in result.news_alerts:
        console.print(f"  - {article.title} [dim]({article.source or 'unknown'})[/dim]")
    console.print(f"[dim]Updated {result.last_updated}[/dim]")


@app.command()
def countries(
    region: Annotated[
        str | None,
        typer.Option("--region", "-r", help="Only countries in this region."),
    ] = None,
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Output file path."),
    ] = Path("safemap_countries.json"),
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format: json, csv, markdown."),
    ] = "json",
    top: Annotated[
        int,
        typer.Option("--top", help="Rows to show in the console table."),
    ] = 15,
    no_cache: Annotated[
        bool,
        typer.Option("--no-cache", help="Disable disk caching of provider responses."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging."),
    ] = False,
) -> None:
    """Export base safety profiles for every country."""
    _setup_logging(verbose)
    config = SafeMapConfig(
        output_file=output,
        output_format=output_format,
        cache_enabled=not no_cache,
    )

    try:
        profiles = build_country_profiles(config, region=region)
    except Exception as exc:
        console.print(f"[red]Country fetch failed:[/red] {exc}")
        raise typer.Exit(code=1) from None

    if not profiles:
        console.print("[yellow]No countries matched.[/yellow]")
        raise typer.Exit()

    EXPORTERS[config.output_format](profiles, config.output_file)

    table = Table(title="Country Safety Profiles")
    table.add_column("Country", style="bold")
    table.add_column("ISO", style="dim")
    table.add_column("Region")
    table.add_column("Score", justify="right")
    table.add_column("Disaster", justify="right")
    table.add_column("Air", justify="right")
    table.add_column("Crime", justify="right")
    table.add_column("Political", justify="right")
    for p in profiles[:top]:
        table.add_row(
            p.name,
            p.iso,
            p.region,
            _score_style(p.safety_score),
            str(p.disaster_risk),
            str(p.air_quality),
            str(p.crime_level),
            str(p.political_unrest),
        )

    console.print()
    console.print(table)
    console.print(
        f"\n{config.output_format.upper()} written to [bold]{config.output_file}[/bold]"
    )
    console.print(f"Total countries: {len(profiles)}")


@app.command()
def alerts(
    country: Annotated[
        str | None,
        typer.Option("--country", "-c", help="Restrict the feed to a country."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging."),
    ] = False,
) -> None:
    """Show the classified disaster/conflict news feed."""
    _setup_logging(verbose)
    config = SafeMapConfig()

    feed = build_alert_feed(config, country=country)
    if not feed:
        console.print("[yellow]No alerts.[/yellow]")
        raise typer.Exit()

    table = Table(title="Safety Alerts")
    table.add_column("Severity")
    table.add_column("Type")
    table.add_column("Title", style="bold")
    table.add_column("Source", style="dim")
    for a in feed:
        table.add_row(SEVERITY_STYLES.get(a.severity, a.severity), a.type, a.title, a.source)

    console.print()
    console.print(table)


@app.command("weather-risk")
def weather_risk(
    temperature: Annotated[float, typer.Argument(help="Temperature in °C.")],
    wind_speed: Annotated[float, typer.Argument(help="Wind speed in m/s.")],
    condition: Annotated[str, typer.Argument(help="Condition label, e.g. Rain.")] = "Clear",
) -> None:
    """Score weather risk for given conditions without any network call."""
    risk = calculate_weather_risk(temperature, wind_speed, condition)
    console.print(f"Weather risk: [bold]{risk}[/bold] / 100")
