"""Order processing command."""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from orderflow.cli.commands.logging_options import configure_logging
from orderflow.services.manager import OrderManager
from orderflow.services.registry import RegistryError
from orderflow.system import ComponentsConfig, ComponentSpec, reload_system_config

error_console = Console(stderr=True)


def _override(spec: ComponentSpec, name: Optional[str]) -> ComponentSpec:
    """Select a different variant by name; params only carry over for the same variant."""
    if name is None or name == spec.name:
        return spec
    return ComponentSpec(name=name)


def _apply_overrides(
    components: ComponentsConfig,
    order: Optional[str],
    invoice: Optional[str],
    notifier: Optional[str],
    strict: bool,
) -> ComponentsConfig:
    return components.model_copy(
        update={
            "order": _override(components.order, order),
            "invoice": _override(components.invoice, invoice),
            "notifier": _override(components.notifier, notifier),
            "validation": "strict" if strict else components.validation,
        }
    )


@click.command("process")
@click.argument("price", type=float)
@click.argument("quantity", type=int)
@click.argument("customer_name")
@click.argument("address")
@click.argument("invoice_target")
@click.argument("destination")
@click.option(
    "--config",
    "-c",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to system configuration file (YAML)",
)
@click.option("--order", "order_name", help="Order variant (overrides config)")
@click.option("--invoice", "invoice_name", help="Invoice variant (overrides config)")
@click.option("--notifier", "notifier_name", help="Notifier variant (overrides config)")
@click.option(
    "--strict",
    is_flag=True,
    help="Reject negative price/quantity and empty address/invoice target",
)
@click.option(
    "--log-level",
    "-l",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Set logging level (DEBUG shows every capability step)",
)
def process_command(
    price: float,
    quantity: int,
    customer_name: str,
    address: str,
    invoice_target: str,
    destination: str,
    config_file: Optional[Path],
    order_name: Optional[str],
    invoice_name: Optional[str],
    notifier_name: Optional[str],
    strict: bool,
    log_level: Optional[str],
) -> None:
    """
    Process one order: price it, place it, invoice it, notify the customer.

    Components come from system.yaml (or the defaults) unless overridden.

    \b
    Examples:
        # Baseline components
        orderflow process 10.0 2 "John Doe" "123 Main St" order_123.pdf johndoe@example.com

        # Surcharge pricing, HTML invoice, SMS notification
        orderflow process 10.0 2 "John Doe" "123 Main St" order_123.pdf +15551234567 \\
            --order surcharge --invoice format --notifier sms

        # Strict validation (use -- before negative numbers)
        orderflow process --strict -- -5 2 "John Doe" "123 Main St" order.pdf jd@example.com
    """
    try:
        system_config = reload_system_config(config_file)
        configure_logging(system_config, log_level)

        components = _apply_overrides(system_config.components, order_name, invoice_name, notifier_name, strict)
        manager = OrderManager.from_config(components)
        manager.process_order(price, quantity, customer_name, address, invoice_target, destination)

    except (ValueError, RegistryError) as e:
        error_console.print(f"[bold red]✗ Order failed:[/bold red] {escape(str(e))}", highlight=False)
        sys.exit(1)
