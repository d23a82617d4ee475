"""
CLI interface for Steam Roulette.

Commands:
    steam-roulette          - Launch a random installed game
    steam-roulette list     - List the games that can be picked
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from steam_roulette import __version__
from steam_roulette.config.settings import settings
from steam_roulette.steam.install import detect_steam
from steam_roulette.steam.launcher import (
    LaunchError,
    NoGamesFoundError,
    build_launch_command,
    launch_game,
    pick_game,
)
from steam_roulette.steam.library_folders import LibraryFoldersError
from steam_roulette.steam.library_scanner import ManifestReadError, SteamLibraryScanner
from steam_roulette.steam.models import CatalogEntry, SteamInstall

app = typer.Typer(
    name="steam-roulette",
    help="Randomly picks an installed game from your Steam library and launches it.",
    add_completion=False,
    rich_markup_mode="rich",
)
console = Console()
err_console = Console(stderr=True)

STEAM_NOT_FOUND_MESSAGE = "Couldn't find Steam. Please make sure it is installed."


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]Steam Roulette[/bold blue] v{__version__}")
        raise typer.Exit()


def _warn(message: str) -> None:
    err_console.print(f"[yellow]{escape(message)}[/yellow]")


def _status(message: str) -> None:
    console.print(f"[dim]{escape(message)}[/dim]")


def _quiet(message: str) -> None:
    pass


def _load_catalog(
    steam_path: Optional[Path],
    show_status: bool,
) -> tuple[SteamInstall, list[CatalogEntry]]:
    """
    Detect Steam and scan all of its libraries.

    Exits with code 1 if Steam is missing or a library can't be read.
    """
    # --steam-path > env var > config file > detected
    override = steam_path or settings.steam_path

    install = detect_steam(on_status=_warn, root_override=override)
    if not install.found:
        err_console.print(f"[red]{STEAM_NOT_FOUND_MESSAGE}[/red]")
        raise typer.Exit(1)

    on_status = _status if show_status else _quiet
    on_status(f"Steam ({install.kind.value}) at {install.root}")

    scanner = SteamLibraryScanner(
        install,
        extra_blacklist=settings.extra_blacklist,
        on_status=on_status,
    )

    try:
        games = scanner.scan()
    except (LibraryFoldersError, ManifestReadError) as e:
        err_console.print(f"[red]Error scanning Steam library: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    return install, games


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Show which game is being launched (-vv for discovery details)",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "-d",
        help="Pick a game but don't launch it",
    ),
    steam_path: Optional[Path] = typer.Option(
        None,
        "--steam-path",
        "-s",
        help="Path to Steam installation (auto-detected if not specified)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """
    Randomly picks an installed game from your Steam library and launches it.
    """
    if ctx.invoked_subcommand is not None:
        return

    install, games = _load_catalog(steam_path, show_status=verbose > 1)

    try:
        game = pick_game(games)
    except NoGamesFoundError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    if verbose > 0:
        console.print(f'Randomly launching "{escape(game.name)}"! Have fun!')

    if dry_run:
        if verbose > 1:
            _status(f"Dry run, not running: {' '.join(build_launch_command(install, game.app_id))}")
        return

    try:
        process = launch_game(install, game.app_id)
    except LaunchError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    if verbose > 1:
        _status(f"Started {' '.join(process.args)} (pid {process.pid})")


@app.command("list")
def list_games(
    steam_path: Optional[Path] = typer.Option(
        None,
        "--steam-path",
        "-s",
        help="Path to Steam installation (auto-detected if not specified)",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Show discovery details",
    ),
) -> None:
    """
    List installed Steam games.

    Shows every game that can be picked, across all library folders.
    """
    _, games = _load_catalog(steam_path, show_status=verbose > 0)

    if not games:
        console.print("[yellow]No games found.[/yellow]")
        raise typer.Exit(0)

    table = Table(title="Installed Games")
    table.add_column("App ID", style="cyan", justify="right")
    table.add_column("Name", style="white")
    table.add_column("Library", style="green")

    for game in sorted(games, key=lambda g: g.name.lower()):
        table.add_row(
            game.app_id or "?",
            escape(game.name),
            escape(str(game.library or "")),
        )

    console.print(table)
    console.print(f"\nTotal: {len(games)} games")


if __name__ == "__main__":
    app()
