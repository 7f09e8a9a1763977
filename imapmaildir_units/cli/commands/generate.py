"""Generate command implementation.

Compiles the registry and writes units and account configs.
"""

from pathlib import Path

import typer
from typing_extensions import Annotated

from imapmaildir_units.accounts import ImapmaildirUnitsError
from imapmaildir_units.compiler import compile_registry
from imapmaildir_units.config import load_registry
from imapmaildir_units.config.paths import CONFIG_HOME
from imapmaildir_units.render import render_artifacts
from imapmaildir_units.storage import ArtifactWriter

app = typer.Typer(help="Generate sync services, timers and account configs")


@app.callback(invoke_without_command=True)
def generate(
    ctx: typer.Context,
    registry: Annotated[
        Path | None, typer.Option("--registry", "-r", help="Account registry file")
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Configuration root to write below"),
    ] = None,
    binary: Annotated[
        str | None, typer.Option("--binary", help="Path to the imapmaildir executable")
    ] = None,
    dry_run: Annotated[
        bool, typer.Option("--dry-run", help="Print artifacts instead of writing them")
    ] = False,
):
    """Generate sync services, timers and account configs.

    Files generated by an earlier run that are no longer produced (disabled,
    removed or renamed accounts) are deleted.
    """
    try:
        config = load_registry(registry)

        if not config:
            typer.echo("No account registry found.", err=True)
            typer.echo()
            typer.echo("Run 'imapmaildir-units config init' and add an account")
            raise typer.Exit(1)

        artifacts = compile_registry(config, binary=binary)
        rendered = render_artifacts(artifacts)

        if dry_run:
            if not rendered:
                typer.echo("No enabled accounts, nothing to generate.")
            for path, content in rendered.items():
                typer.echo(f"# {path}")
                typer.echo(content)
            return

        writer = ArtifactWriter(output or CONFIG_HOME)
        result = writer.write(rendered)
    except ImapmaildirUnitsError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if not rendered:
        typer.echo("No enabled accounts, nothing to generate.")
    else:
        typer.echo(
            f"Generated {len(artifacts)} account(s): "
            f"{len(result.written)} written, {len(result.unchanged)} unchanged"
        )
    for path in result.written:
        typer.echo(f"  {path}")

    if result.removed:
        typer.echo(f"Removed {len(result.removed)} stale file(s):")
        for path in result.removed:
            typer.echo(f"  {path}")

    if result.written or result.removed:
        typer.echo()
        typer.echo("Reload systemd to pick up the changes:")
        typer.echo("  systemctl --user daemon-reload")
        for key in artifacts.timers:
            typer.echo(f"  systemctl --user enable --now {key}.timer")
