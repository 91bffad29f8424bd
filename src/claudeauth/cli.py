"""
claudeauth CLI: command-line interface.

Usage:
    claudeauth setup --access-token ... --refresh-token ... --expires-at 1760000000
    CLAUDE_ACCESS_TOKEN=... CLAUDE_REFRESH_TOKEN=... CLAUDE_EXPIRES_AT=... claudeauth setup
    claudeauth status
    claudeauth clear
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from claudeauth import __version__
from claudeauth.errors import CredentialError

app = typer.Typer(
    name="claudeauth",
    help="Set up and refresh Claude CLI OAuth credentials",
    no_args_is_help=True,
    rich_markup_mode="rich",
)
console = Console()
err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold]claudeauth[/bold] v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version",
        callback=_version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Enable debug logging",
    ),
) -> None:
    """Manage the OAuth credentials file used by the Claude CLI."""
    _configure_logging(verbose)


@app.command()
def setup(
    access_token: str = typer.Option(
        ...,
        "--access-token",
        envvar="CLAUDE_ACCESS_TOKEN",
        help="OAuth access token",
    ),
    refresh_token: str = typer.Option(
        ...,
        "--refresh-token",
        envvar="CLAUDE_REFRESH_TOKEN",
        help="OAuth refresh token",
    ),
    expires_at: str = typer.Option(
        ...,
        "--expires-at",
        envvar="CLAUDE_EXPIRES_AT",
        help="Access token expiry (Unix seconds)",
    ),
    path: str = typer.Option(
        None,
        "--path",
        "-p",
        help="Credentials file (default ~/.claude/.credentials.json)",
    ),
    config: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to YAML config file",
    ),
) -> None:
    """Refresh the token if it is about to expire and write the credentials file."""
    from claudeauth.auth.refresh import TokenRefresher
    from claudeauth.auth.setup_oauth import setup_oauth_credentials
    from claudeauth.config import ClaudeAuthConfig
    from claudeauth.models.credentials import OAuthCredentials

    settings = ClaudeAuthConfig.load(config, credentials_path=path)
    credentials = OAuthCredentials(
        access_token=access_token,
        refresh_token=refresh_token,
        expires_at=expires_at,
    )

    async def _run() -> None:
        refresher = TokenRefresher(settings.token_url, timeout=settings.timeout)
        try:
            await setup_oauth_credentials(
                credentials,
                credentials_path=settings.credentials_path,
                refresher=refresher,
            )
        finally:
            await refresher.close()

    try:
        asyncio.run(_run())
    except CredentialError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Credentials saved to [bold]{settings.credentials_path}[/bold]")


@app.command()
def status(
    path: str = typer.Option(
        None,
        "--path",
        "-p",
        help="Credentials file (default ~/.claude/.credentials.json)",
    ),
    config: str = typer.Option(None, "--config", "-c", help="Path to YAML config file"),
) -> None:
    """Show the state of the stored credentials."""
    from claudeauth.auth.expiry import is_token_expired, now_seconds
    from claudeauth.auth.store import CredentialStore
    from claudeauth.config import ClaudeAuthConfig

    settings = ClaudeAuthConfig.load(config, credentials_path=path)
    store = CredentialStore(settings.credentials_path)

    try:
        credentials = store.load()
    except CredentialError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if credentials is None:
        console.print(f"[yellow]No credentials stored at {store.path}[/yellow]")
        raise typer.Exit(1)

    expires_at = credentials.expires_at_seconds
    remaining = expires_at - now_seconds()
    expired = is_token_expired(expires_at)

    table = Table(title="Claude OAuth Credentials")
    table.add_column("Field", style="bold cyan")
    table.add_column("Value")
    table.add_row("File", str(store.path))
    table.add_row("Access token", _mask(credentials.access_token))
    table.add_row("Expires at", _format_expiry(expires_at))
    table.add_row("Seconds remaining", str(remaining))
    table.add_row("Refresh due", "[red]yes[/red]" if expired else "[green]no[/green]")
    console.print(table)


@app.command()
def clear(
    path: str = typer.Option(
        None,
        "--path",
        "-p",
        help="Credentials file (default ~/.claude/.credentials.json)",
    ),
    config: str = typer.Option(None, "--config", "-c", help="Path to YAML config file"),
) -> None:
    """Delete the stored credentials file."""
    from claudeauth.auth.store import CredentialStore
    from claudeauth.config import ClaudeAuthConfig

    settings = ClaudeAuthConfig.load(config, credentials_path=path)
    store = CredentialStore(settings.credentials_path)

    try:
        deleted = store.delete()
    except CredentialError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if deleted:
        console.print(f"[green]✓[/green] Removed [bold]{store.path}[/bold]")
    else:
        console.print(f"[dim]Nothing to remove at {store.path}[/dim]")


def _format_expiry(expires_at: int) -> str:
    try:
        return datetime.fromtimestamp(expires_at, tz=timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")
    except (OverflowError, OSError, ValueError):
        return f"{expires_at} (out of range)"


def _mask(token: str) -> str:
    if len(token) <= 8:
        return "****"
    return f"{token[:4]}…{token[-4:]}"


if __name__ == "__main__":
    app()
