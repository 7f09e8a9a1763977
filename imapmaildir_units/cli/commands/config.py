"""Config command implementation.

Manages the imapmaildir-units account registry.
"""

from pathlib import Path

import typer
from typing_extensions import Annotated

from imapmaildir_units.accounts import ImapmaildirUnitsError
from imapmaildir_units.config import (
    REGISTRY_FILE,
    get_account,
    init_registry,
    load_registry,
)
from imapmaildir_units.config.schema import AccountConfig

app = typer.Typer(help="Manage the account registry")


@app.command()
def init(
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Overwrite existing registry")
    ] = False,
    registry: Annotated[
        Path | None, typer.Option("--registry", "-r", help="Registry file to create")
    ] = None,
):
    """Create a template account registry."""
    path = registry or REGISTRY_FILE
    created = init_registry(registry, overwrite=force)

    if created:
        typer.echo(f"Created registry: {path}")
        typer.echo()
        typer.echo("Edit the registry to add your accounts, then run:")
        typer.echo("  imapmaildir-units generate")
    else:
        typer.echo(f"Registry already exists at {path}")
        typer.echo("Use --force to overwrite.")


@app.command()
def path():
    """Print the default registry location."""
    typer.echo(str(REGISTRY_FILE))


@app.command()
def show(
    account: Annotated[
        str | None, typer.Option("--account", "-a", help="Show specific account")
    ] = None,
    registry: Annotated[
        Path | None, typer.Option("--registry", "-r", help="Account registry file")
    ] = None,
):
    """Display the account registry."""
    try:
        config = load_registry(registry)
    except ImapmaildirUnitsError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if not config:
        typer.echo("No registry found.")
        typer.echo(f"Run 'imapmaildir-units config init' to create {registry or REGISTRY_FILE}")
        return

    if "binary" in config:
        typer.echo(f"binary = {config['binary']}")
        typer.echo()

    accounts = config.get("accounts", {})

    if not accounts:
        typer.echo("No accounts configured.")
        return

    if account:
        account_config = get_account(config, account)
        if account_config is not None:
            _display_account(account, account_config)
        else:
            typer.echo(f"Account '{account}' not found.", err=True)
            raise typer.Exit(1)
    else:
        for name, acct in accounts.items():
            _display_account(name, acct)


def _display_account(name: str, account: AccountConfig, prefix: str = "") -> None:
    """Display a single account, flattening nested tables to dotted keys."""
    if not prefix:
        typer.echo(f"[accounts.{name}]")
    for key, value in account.items():
        if isinstance(value, dict):
            _display_account(name, value, f"{prefix}{key}.")
        else:
            typer.echo(f"  {prefix}{key} = {value}")
    if not prefix:
        typer.echo()
