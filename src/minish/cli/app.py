"""CLI entry point for minish."""

from __future__ import annotations

from typing import Optional

import typer

from minish import __version__
from minish.cli.interactive import EXIT_FAILURE, InteractiveShell
from minish.cli.render import Renderer
from minish.config import load_settings
from minish.errors import ConfigurationError
from minish.logging_utils import configure_logging

app = typer.Typer(
    name="minish",
    help="A small interactive command shell.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"minish {__version__}")
        raise typer.Exit()


@app.command()
def shell(
    prompt: Optional[str] = typer.Option(None, "--prompt", help="Prompt marker written before each read."),
    exit_directive: Optional[str] = typer.Option(None, "--exit-directive", help="Line prefix that ends the shell."),
    max_tokens: Optional[int] = typer.Option(None, "--max-tokens", help="Maximum number of tokens per line."),
    banner: Optional[bool] = typer.Option(None, "--banner/--no-banner", help="Print the version banner."),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level."),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."
    ),
) -> None:
    """Start the interactive shell."""
    try:
        settings = load_settings(
            prompt=prompt,
            exit_directive=exit_directive,
            max_tokens=max_tokens,
            show_banner=banner,
            log_level=log_level,
        )
    except ConfigurationError as exc:
        typer.echo(f"Invalid configuration: {exc}", err=True)
        raise typer.Exit(EXIT_FAILURE) from exc

    configure_logging(level=settings.log_level, log_format=settings.log_format)
    renderer = Renderer(max_line_length=settings.max_line_length)
    raise typer.Exit(InteractiveShell(settings, renderer).run())


def main() -> None:
    app()
