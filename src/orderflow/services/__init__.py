"""orderflow services package.

Each capability (order, invoice, notification) lives in its own package
with a Protocol interface and interchangeable implementations. The order
manager depends only on those interfaces and receives concrete instances
by dependency injection.
"""

from orderflow.services.manager import IOrderManager, OrderManager

__all__: list[str] = [
    "IOrderManager",
    "OrderManager",
]
