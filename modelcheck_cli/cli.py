"""Typer-based CLI for ModelCheck."""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Optional

import click
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from . import __version__
from .config import load_config
from .errors import ModelCheckError
from .orchestrator import ModelChecker

err_console = Console(stderr=True)

app = typer.Typer(
    help="🔗 ModelCheck — find dangling and duplicate references in UML model projects.",
    add_completion=False,
    rich_markup_mode="rich",
)


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        typer.echo(f"ModelCheck v{__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
        force=True,
    )


@app.command(context_settings={"allow_extra_args": True})
def check(
    manifest: Path = typer.Argument(..., help="Path to the model project manifest (.modelproj)."),
    wait: bool = typer.Option(False, "--wait", help="Wait for a key press before exiting."),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Explicit modelcheck.toml file."),
    verbose: bool = typer.Option(False, "--verbose", help="Log loading and resolution details."),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
):
    """Check every element definition and moniker reference in a model project.

    Prints one line per reference that resolves to zero or several definitions.

    Example:
      modelcheck MyDesign.modelproj
      modelcheck MyDesign.modelproj --wait
    """
    _configure_logging(verbose)

    try:
        settings = load_config(config_path, search_dir=manifest.resolve().parent)
        if wait:
            settings = dataclasses.replace(settings, wait=True)
        ModelChecker(settings).run(manifest)
    except ModelCheckError as exc:
        err_console.print(f"[red]✗[/red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(code=1)

    if settings.wait:
        click.pause(info="Press any key to continue ...")


if __name__ == "__main__":
    app()
