"""Command-line interface for Zoning Lookup using Typer."""

import asyncio
import json
from typing import Optional

import httpx
import typer
import uvicorn
from loguru import logger
from rich.console import Console
from rich.table import Table

from zoning_lookup.boundaries import BoundarySourceRegistry
from zoning_lookup.config import Settings, get_settings
from zoning_lookup.geocoding import GeocoderRegistry
from zoning_lookup.logging import setup_logging
from zoning_lookup.models import LookupResult, LookupStatus
from zoning_lookup.pipeline import build_lookup

app = typer.Typer(
    name="zoning-lookup",
    help="Zoning Lookup: Resolve Vancouver street addresses to zoning districts",
    add_completion=True,
)

# Global state for verbose flag
_verbose = False


def _settings() -> Settings:
    settings = get_settings()
    if _verbose:
        settings.log_level = "DEBUG"
    return settings


async def _lookup(settings: Settings, address: str) -> LookupResult:
    async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
        pipeline = build_lookup(settings, client)
        return await pipeline.lookup(address)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging (DEBUG level)",
    ),
) -> None:
    """
    Zoning Lookup CLI - Resolve Vancouver street addresses to zoning districts.
    """
    global _verbose
    _verbose = verbose

    setup_logging(_settings())
    logger.debug("Verbose mode enabled")


@app.command()
def lookup(
    address: str = typer.Argument(..., help="Street address, e.g. '453 W 12th Ave'"),
    source: Optional[str] = typer.Option(
        None,
        "--source",
        "-s",
        help="Boundary source (opendata, arcgis, static)",
    ),
    geocoder: Optional[str] = typer.Option(
        None,
        "--geocoder",
        "-g",
        help="Geocoder (nominatim, static)",
    ),
    explain: bool = typer.Option(
        False,
        "--explain",
        help="Include the internal failure reason in the output",
    ),
) -> None:
    """Look up the zoning district for an address and print the JSON result."""
    logger.info("lookup command called with address: {}", address)

    settings = _settings()
    if source:
        settings.boundary_source = source
    if geocoder:
        settings.geocoder = geocoder

    try:
        result = asyncio.run(_lookup(settings, address))
    except ValueError as e:
        logger.error("Invalid configuration: {}", str(e))
        typer.secho(f"✗ {str(e)}", fg=typer.colors.RED, bold=True)
        raise typer.Exit(code=2)

    Console().print_json(json.dumps(result.to_dict(include_reason=explain or settings.verbose_errors)))

    if result.status is not LookupStatus.SUCCESS:
        raise typer.Exit(code=1)


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind"),
    port: int = typer.Option(8000, "--port", "-p", help="Port to listen on"),
) -> None:
    """Run the HTTP API with uvicorn."""
    from zoning_lookup.api import create_app

    settings = _settings()
    logger.info("Starting API on {}:{} (source: {})", host, port, settings.boundary_source)

    uvicorn.run(
        create_app(settings),
        host=host,
        port=port,
        log_level=settings.log_level.lower(),
        log_config=None,  # keep the loguru bridge installed by setup_logging
        access_log=True,
    )


@app.command()
def services() -> None:
    """List the available geocoders and boundary sources."""
    settings = _settings()

    table = Table(title="Available services")
    table.add_column("Kind", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Default", style="yellow")

    for name in GeocoderRegistry.list_geocoders():
        table.add_row("geocoder", name, "✓" if name == settings.geocoder else "")
    for name in BoundarySourceRegistry.list_sources():
        table.add_row("boundary source", name, "✓" if name == settings.boundary_source else "")

    Console().print(table)


if __name__ == "__main__":
    app()
