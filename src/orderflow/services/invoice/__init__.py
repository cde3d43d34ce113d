"""Invoice generator capability.

Public API:
    - IInvoiceGenerator: Protocol defining the invoice capability
    - InvoiceService: Default implementation (reports target unchanged)
    - FormatInvoiceService: Variant that substitutes the file extension
"""

from orderflow.services.invoice.interface import IInvoiceGenerator
from orderflow.services.invoice.service import FormatInvoiceService, InvoiceService

__all__ = [
    "FormatInvoiceService",
    "IInvoiceGenerator",
    "InvoiceService",
]
