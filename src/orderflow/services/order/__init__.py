"""Order capability.

Public API:
    - IOrder: Protocol defining the order capability
    - OrderProcessor: Baseline implementation (price * quantity)
    - SurchargeOrderProcessor: Pricing variant with a proportional surcharge
"""

from orderflow.services.order.interface import IOrder
from orderflow.services.order.service import OrderProcessor, SurchargeOrderProcessor

__all__ = [
    "IOrder",
    "OrderProcessor",
    "SurchargeOrderProcessor",
]
