"""List registered capability variants."""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from orderflow.cli.ui import add_registry_rows, create_components_table
from orderflow.services.registry import invoice_registry, notifier_registry, order_registry
from orderflow.system import reload_system_config

console = Console()
error_console = Console(stderr=True)


@click.command("components")
@click.option(
    "--config",
    "-c",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to system configuration file (YAML); configured variants are marked with '*'",
)
def components_command(config_file: Optional[Path]) -> None:
    """
    List the order, invoice and notifier variants that can be selected.
    """
    try:
        components = reload_system_config(config_file).components
    except ValueError as e:
        error_console.print(f"[bold red]✗ Invalid configuration:[/bold red] {escape(str(e))}", highlight=False)
        sys.exit(1)

    table = create_components_table()
    add_registry_rows(table, order_registry, default=components.order.name)
    add_registry_rows(table, invoice_registry, default=components.invoice.name)
    add_registry_rows(table, notifier_registry, default=components.notifier.name)

    console.print(table)
