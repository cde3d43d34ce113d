"""Order capability implementations.

OrderProcessor is the baseline. SurchargeOrderProcessor is an alternative
pricing strategy behind the same interface.
"""

from orderflow.services.reporting import report
from orderflow.system import LoggerFactory

logger = LoggerFactory.get_logger()


class OrderProcessor:
    """Baseline order: total is price * quantity, no surcharge."""

    def _price(self, price: float, quantity: int) -> float:
        return float(price) * quantity

    def calculate_total(self, price: float, quantity: int) -> float:
        total = self._price(price, quantity)
        logger.debug("order.total_calculated", price=price, quantity=quantity, total=total)
        report(f"Order total: ${total}")
        return total

    def place_order(self, customer_name: str, address: str) -> None:
        logger.debug("order.placed", customer_name=customer_name, address=address)
        report(f"Order placed for: {customer_name} at {address}")


class SurchargeOrderProcessor(OrderProcessor):
    """Order variant that adds a proportional surcharge to the total.

    Attributes:
        surcharge_rate: Fraction added on top of price * quantity (0.1 = 10%)

    Example:
        >>> order = SurchargeOrderProcessor(surcharge_rate=0.5)
        >>> order.calculate_total(10.0, 2)
        Order total: $30.0
        30.0
    """

    def __init__(self, surcharge_rate: float = 0.1) -> None:
        self.surcharge_rate = surcharge_rate

    def _price(self, price: float, quantity: int) -> float:
        return super()._price(price, quantity) * (1 + self.surcharge_rate)
