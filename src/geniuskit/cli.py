"""CLI entry point for geniuskit."""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated

import requests.exceptions
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from geniuskit.config import settings
from geniuskit.exceptions import AccessDeniedError, GeniusKitError, NoResultError
from geniuskit.genius import GeniusClient
from geniuskit.logging import setup_logging

app = typer.Typer(
    name="geniuskit",
    help="Genius song metadata and lyrics from the command line.",
    add_completion=False,
)

console = Console()
error_console = Console(stderr=True)

VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Enable verbose debug output to stderr",
    ),
]

RemoveMarkersOption = Annotated[
    bool,
    typer.Option(
        "--remove-section-markers",
        "-r",
        help="Drop [Chorus]-style section markers",
    ),
]


def validate_url(value: str) -> str:
    """Validate the argument looks like an absolute http(s) URL."""
    stripped = value.strip()
    if not stripped.startswith(("http://", "https://")):
        raise typer.BadParameter("URL must start with http:// or https://")
    return stripped


def require_token() -> GeniusClient:
    """Build a client, exiting when no access token is configured."""
    if not settings.is_configured():
        error_console.print(
            "[red]Error:[/red] Genius API token not configured.\n"
            "Set GENIUSKIT_GENIUS_ACCESS_TOKEN environment variable or add to .env file."
        )
        raise typer.Exit(1)
    return GeniusClient()


def print_lyrics(fetch: Callable[[], str]) -> None:
    """Run a lyrics fetch and print the result or a readable error."""
    try:
        console.print(fetch(), markup=False, highlight=False)
    except AccessDeniedError:
        error_console.print("[red]Error:[/red] Access denied by Genius (403).")
        raise typer.Exit(1) from None
    except NoResultError:
        error_console.print("[yellow]Warning:[/yellow] No lyrics found on this page")
        raise typer.Exit(1) from None
    except requests.exceptions.RequestException as e:
        error_console.print(f"[red]Error:[/red] Request failed: {escape(str(e))}")
        raise typer.Exit(1) from None


@app.command()
def lyrics(
    url: Annotated[
        str,
        typer.Argument(
            ...,
            help="Genius song page URL",
            callback=lambda v: validate_url(v),
        ),
    ],
    remove_section_markers: RemoveMarkersOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Print the lyrics of a Genius song page."""
    setup_logging(verbose=verbose)
    client = GeniusClient()
    print_lyrics(lambda: client.lyrics_fetcher.fetch_lyrics(url, remove_section_markers))


@app.command()
def search(
    query: Annotated[str, typer.Argument(..., help="Search terms")],
    limit: Annotated[
        int,
        typer.Option(
            "--limit",
            "-n",
            help="Maximum number of results",
            min=1,
            max=50,
        ),
    ] = 10,
    verbose: VerboseOption = False,
) -> None:
    """Search Genius for songs."""
    setup_logging(verbose=verbose)
    client = require_token()

    try:
        songs = client.search_songs(query, per_page=limit)
    except GeniusKitError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None

    if not songs:
        error_console.print(f"[yellow]Warning:[/yellow] No songs found for {escape(query)}")
        raise typer.Exit(0)

    table = Table(title=f"Results for: {escape(query)}")
    table.add_column("ID", justify="right", style="dim")
    table.add_column("Title", style="cyan")
    table.add_column("Artist")
    table.add_column("URL", style="dim")

    for song in songs:
        table.add_row(
            str(song.id),
            escape(song.featured_title),
            escape(song.artist.name),
            escape(str(song.url)),
        )

    console.print(table)


@app.command()
def song(
    song_id: Annotated[int, typer.Argument(..., help="Genius song ID", min=1)],
    show_lyrics: Annotated[
        bool,
        typer.Option("--lyrics", help="Also print the lyrics"),
    ] = False,
    remove_section_markers: RemoveMarkersOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Show details of a song."""
    setup_logging(verbose=verbose)
    client = require_token()

    try:
        result = client.get_song(song_id)
    except GeniusKitError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None

    table = Table(title=escape(result.full_title), show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Title", escape(result.featured_title))
    table.add_row("Artist", escape(result.artist.name))
    table.add_row("Album", escape(result.album.name) if result.album else "-")
    table.add_row("Released", result.released_at.isoformat() if result.released_at else "-")
    table.add_row("Instrumental", "yes" if result.instrumental else "no")
    table.add_row("URL", escape(str(result.url)))
    console.print(table)

    if show_lyrics:
        console.print()
        print_lyrics(lambda: result.lyrics(remove_section_markers))


@app.command()
def config() -> None:
    """Show current configuration."""
    table = Table(title="geniuskit Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    # API Token (masked)
    token = settings.get_access_token()
    if token:
        masked = token[:4] + "*" * (len(token) - 8) + token[-4:] if len(token) > 8 else "****"
        token_display = f"[green]{masked}[/green]"
    else:
        token_display = "[red]Not set[/red]"
    table.add_row("GENIUSKIT_GENIUS_ACCESS_TOKEN", token_display)

    table.add_row("GENIUSKIT_REQUEST_TIMEOUT_MS", str(settings.request_timeout_ms))
    table.add_row("GENIUSKIT_TIMEOUT_JITTER_MS", str(settings.timeout_jitter_ms))
    table.add_row(
        "GENIUSKIT_LYRICS_CONTAINER_SELECTOR", escape(settings.lyrics_container_selector)
    )
    table.add_row("GENIUSKIT_API_TIMEOUT", str(settings.api_timeout))

    console.print(table)


if __name__ == "__main__":
    app()
