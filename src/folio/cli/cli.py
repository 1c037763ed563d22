"""CLI entrypoint: Typer app definition and command registration"""

import logging
from typing import Annotated

import typer

from folio.cli.commands import build_cmd, options_cmd, render_cmd


app = typer.Typer(name="folio", no_args_is_help=True, help="Static-site content pipeline for markdown entries")


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log per-file debug output")] = False,
    ):
    """Configure logging for every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


app.command(name="build")(build_cmd)
app.command(name="render")(render_cmd)
app.command(name="options")(options_cmd)
