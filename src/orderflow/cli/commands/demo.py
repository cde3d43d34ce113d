"""Demonstration command with a fixed order."""

from typing import Optional

import click

from orderflow.cli.commands.logging_options import configure_logging
from orderflow.services.invoice import InvoiceService
from orderflow.services.manager import OrderManager
from orderflow.services.notification import EmailService
from orderflow.services.order import OrderProcessor
from orderflow.system import SystemConfig

DEMO_ORDER = (10.0, 2, "John Doe", "123 Main St", "order_123.pdf", "johndoe@example.com")


@click.command("demo")
@click.option(
    "--log-level",
    "-l",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Set logging level",
)
def demo_command(log_level: Optional[str]) -> None:
    """
    Process a fixed sample order with the baseline components.

    \b
    Output:
        Order total: $20.0
        Order placed for: John Doe at 123 Main St
        Invoice generated: order_123.pdf
        Email notification sent to: johndoe@example.com
    """
    configure_logging(SystemConfig(), log_level)

    manager = OrderManager(OrderProcessor(), InvoiceService(), EmailService())
    manager.process_order(*DEMO_ORDER)
