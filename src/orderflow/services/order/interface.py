"""Order capability interface (Protocol).

Defines the contract every order variant must satisfy so the order manager
can depend on the abstraction instead of a concrete pricing strategy.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class IOrder(Protocol):
    """Order capability: price an order and record its placement.

    Core responsibilities:
    - Compute the order total from unit price and quantity
    - Report placement for a customer/address pair

    NOT responsible for:
    - Invoicing (IInvoiceGenerator does this)
    - Customer notification (IEmailNotifier does this)
    - Input validation (accepts any numeric input as-is)

    Example:
        >>> order: IOrder = OrderProcessor()
        >>> order.calculate_total(10.0, 2)
        Order total: $20.0
        20.0
        >>> order.place_order("John Doe", "123 Main St")
        Order placed for: John Doe at 123 Main St
    """

    def calculate_total(self, price: float, quantity: int) -> float:
        """Compute and report the order total.

        Args:
            price: Unit price (not validated)
            quantity: Number of units (not validated)

        Returns:
            The computed total
        """
        ...

    def place_order(self, customer_name: str, address: str) -> None:
        """Report that an order was placed.

        Args:
            customer_name: Free-text customer identifier
            address: Free-text delivery address
        """
        ...
