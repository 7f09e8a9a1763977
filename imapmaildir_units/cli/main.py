"""Main CLI entry point for imapmaildir-units."""

import logging

import typer
from typing_extensions import Annotated

from imapmaildir_units import __version__
from imapmaildir_units.cli import commands

app = typer.Typer(
    name="imapmaildir-units",
    help="Generate systemd user units and account configs for imapmaildir",
    no_args_is_help=True,
)

# Register command groups
app.add_typer(commands.generate.app, name="generate")
app.add_typer(commands.list.app, name="list")
app.add_typer(commands.config.app, name="config")


@app.callback()
def callback(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug logging")
    ] = False,
):
    """Generate systemd user units and account configs for imapmaildir."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def version():
    """Show version information."""
    typer.echo(f"imapmaildir-units version {__version__}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
