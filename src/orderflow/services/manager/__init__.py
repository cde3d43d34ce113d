"""
Manager Service Package.

Orchestrates order processing: price, place, invoice, notify.

Public API:
- OrderManager: Main orchestrator implementation
- IOrderManager: Protocol interface for dependency injection
- OrderValidator: Validation policy applied before processing
- ValidationError: Raised by the strict validation policy
"""

from orderflow.services.manager.interface import IOrderManager
from orderflow.services.manager.service import OrderManager
from orderflow.services.manager.validation import OrderValidator, ValidationError

__all__ = [
    "IOrderManager",
    "OrderManager",
    "OrderValidator",
    "ValidationError",
]
