"""
Keyreader CLI - print metadata for keys in an Azure Key Vault.

Usage:
    keyreader -subscription <id> -resource-group <rg> -vault <name> [-key <keyname>]

If -key is omitted, all keys in the vault are listed with their properties.
Authentication uses DefaultAzureCredential (environment, managed identity, az CLI, ...).
"""

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..client import KeyVaultKeysClient
from ..config import load_config
from ..exceptions import ConfigurationError, KeyReaderError
from ..inspector import KeyInspector
from ..log import configure_logging

# Create the main Typer app
app = typer.Typer(
    name="keyreader",
    help="Read key properties from an Azure Key Vault",
    add_completion=False,
)

# Errors and usage go to stderr, the report goes to stdout
err_console = Console(stderr=True, soft_wrap=True)


@app.command()
def read_keys_command(
    ctx: typer.Context,
    subscription: Optional[str] = typer.Option(
        None, "-subscription", "--subscription", help="Azure subscription ID (required)"
    ),
    resource_group: Optional[str] = typer.Option(
        None, "-resource-group", "--resource-group", help="Resource group name (required)"
    ),
    vault: Optional[str] = typer.Option(None, "-vault", "--vault", help="Key vault name (required)"),
    key: Optional[str] = typer.Option(
        None, "-key", "--key", help="Key name (optional; omit to list all keys)"
    ),
    debug: bool = typer.Option(False, "-debug", "--debug", help="Enable debug logging"),
) -> None:
    """Print the properties of one key, or of every key in the vault."""
    try:
        config = load_config(
            subscription_id=subscription,
            resource_group=resource_group,
            vault_name=vault,
            key_name=key,
            debug=True if debug else None,
        )
    except ConfigurationError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        err_console.print(ctx.get_usage(), markup=False, highlight=False)
        err_console.print(f"Try '{ctx.command_path} --help' for help.", markup=False, highlight=False)
        raise typer.Exit(1)

    configure_logging(config.debug)

    try:
        with KeyVaultKeysClient.create(config) as client:
            KeyInspector(client, config).run(config.key_name)
    except KeyReaderError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
