"""
OrderManager Protocol Interface.

Defines the contract for the orchestrator that runs an order through the
three capabilities. Following the ports & adapters pattern used by the
capabilities themselves, so callers can depend on the abstraction and tests
can substitute a fake.
"""

from typing import Protocol

from orderflow.services.invoice import IInvoiceGenerator
from orderflow.services.notification import IEmailNotifier
from orderflow.services.order import IOrder


class IOrderManager(Protocol):
    """
    Protocol interface for the order manager.

    The manager holds one instance of each capability, injected at
    construction and never replaced, and runs a fixed four-step sequence
    per order.
    """

    @property
    def order(self) -> IOrder: ...

    @property
    def invoice_generator(self) -> IInvoiceGenerator: ...

    @property
    def email_notifier(self) -> IEmailNotifier: ...

    def process_order(
        self,
        price: float,
        quantity: int,
        customer_name: str,
        address: str,
        invoice_target: str,
        destination: str,
    ) -> None:
        """
        Process one order.

        Runs, unconditionally and in this order:
        1. order.calculate_total(price, quantity)
        2. order.place_order(customer_name, address)
        3. invoice_generator.generate_invoice(invoice_target)
        4. email_notifier.send_notification(destination)

        No step's result gates a later one. Calling twice repeats every
        side effect.

        Example:
            >>> manager.process_order(10.0, 2, "John Doe", "123 Main St", "order_123.pdf", "johndoe@example.com")
            Order total: $20.0
            Order placed for: John Doe at 123 Main St
            Invoice generated: order_123.pdf
            Email notification sent to: johndoe@example.com
        """
        ...
