"""List command implementation."""

from pathlib import Path

import typer
from typing_extensions import Annotated

from imapmaildir_units.accounts import (
    ImapmaildirUnitsError,
    is_enabled,
    normalize_account,
)
from imapmaildir_units.config import load_registry

app = typer.Typer(help="List registered accounts and their sync units")


@app.callback(invoke_without_command=True)
def list_cmd(
    ctx: typer.Context,
    registry: Annotated[
        Path | None, typer.Option("--registry", "-r", help="Account registry file")
    ] = None,
):
    """List registered accounts and their sync units."""
    try:
        config = load_registry(registry)
        accounts = config.get("accounts", {})

        if not accounts:
            typer.echo("No accounts configured.")
            return

        for name, raw in accounts.items():
            if not is_enabled(name, raw):
                typer.echo(f"{name}: disabled")
                continue

            account = normalize_account(name, raw)
            mailboxes = ", ".join(account.mailboxes) or "(none)"
            typer.echo(
                f"{name}: {account.service_name} every {account.interval_sec}s "
                f"[{mailboxes}]"
            )
    except ImapmaildirUnitsError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
