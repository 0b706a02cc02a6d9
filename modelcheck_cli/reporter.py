"""Emit one diagnostic line per failed resolution."""

from __future__ import annotations

from typing import IO, Optional

import typer

from .models import Diagnostic


class Reporter:
    """Write diagnostics to *stream*, or to stderr when none is given."""

    def __init__(self, stream: Optional[IO[str]] = None) -> None:
        self.stream = stream

    def report(self, diagnostic: Diagnostic) -> None:
        if self.stream is None:
            typer.echo(diagnostic.format(), err=True)
        else:
            typer.echo(diagnostic.format(), file=self.stream)
