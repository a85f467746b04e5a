#!/usr/bin/env python3
"""
Command Line Entry Point - Main Layer

Prints the upcoming ISS passes for the machine's current location:

    iss-pass
    python -m isspass --geo-url https://geo.internal

Like app.py, it loads settings, builds the container and hands the work to
the application use case.
"""

import asyncio
from datetime import datetime
from typing import Iterable, List, Optional

import typer

from isspass.domain.entities.errors import PassLookupError
from isspass.domain.entities.passes import PassList, PassWindow
from isspass.main.config import AppSettings, get_settings
from isspass.main.container import init_container
from isspass.shared import configure_logging, get_logger, update_logging_from_settings

logger = get_logger(__name__)

# Same layout as a JavaScript Date string: "Mon Oct 19 2026 10:00:00 GMT+0200 (CEST)"
TIMESTAMP_FORMAT = "%a %b %d %Y %H:%M:%S GMT%z (%Z)"

app = typer.Typer(
    add_completion=False,
    help="Show upcoming International Space Station passes for your location.",
)


async def next_passes_for_current_location(
    settings: Optional[AppSettings] = None,
) -> PassList:
    """Resolve IP, coordinates and passes in one run, raising the first failure."""
    container = init_container(settings or get_settings())
    use_case = container.next_passes_use_case()
    return await use_case.execute()


def format_pass_lines(
    passes: Iterable[PassWindow], now: Optional[datetime] = None
) -> List[str]:
    """
    Render one line per pass window.

    The timestamp is the moment of printing, shared by every line; the pass
    data only contributes its duration. Entries that are not objects have
    no duration and print as None.
    """
    stamp = (now or datetime.now().astimezone()).strftime(TIMESTAMP_FORMAT).strip()
    return [
        f"Next pass at {stamp} for {_duration(window)} seconds."
        for window in passes
    ]


def _duration(window: object) -> object:
    if isinstance(window, dict):
        return window.get("duration")
    return None


def _apply_overrides(
    settings: AppSettings,
    ip_echo_url: Optional[str],
    geo_url: Optional[str],
    pass_url: Optional[str],
) -> AppSettings:
    overrides = {
        key: value
        for key, value in (
            ("ip_echo_url", ip_echo_url),
            ("geo_url", geo_url),
            ("pass_url", pass_url),
        )
        if value
    }
    if overrides:
        settings.upstream = settings.upstream.model_copy(update=overrides)
    return settings


@app.command()
def passes(
    ip_echo_url: Optional[str] = typer.Option(
        None, "--ip-echo-url", help="Base URL of the IP echo service."
    ),
    geo_url: Optional[str] = typer.Option(
        None, "--geo-url", help="Base URL of the geolocation service."
    ),
    pass_url: Optional[str] = typer.Option(
        None, "--pass-url", help="Base URL of the pass prediction service."
    ),
) -> None:
    """Look up and print the next ISS passes."""
    settings = _apply_overrides(get_settings(), ip_echo_url, geo_url, pass_url)
    update_logging_from_settings(settings)

    try:
        result = asyncio.run(next_passes_for_current_location(settings))
    except PassLookupError as e:
        typer.echo(f"It didn't work! {e.message}")
        raise typer.Exit(code=1)

    for line in format_pass_lines(result):
        typer.echo(line)


def main() -> None:
    """Console script entry point."""
    configure_logging()
    app()


if __name__ == "__main__":
    main()
