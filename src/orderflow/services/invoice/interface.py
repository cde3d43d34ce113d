"""Invoice generator interface (Protocol)."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class IInvoiceGenerator(Protocol):
    """Invoice capability: produce an invoice artifact for an order.

    Implementations report the artifact they produced. None of the built-in
    variants touch the filesystem; the target name is only a label.
    """

    def generate_invoice(self, target_name: str) -> None:
        """Produce the invoice identified by target_name.

        Args:
            target_name: File-name-shaped artifact identifier (not checked for existence or extension)
        """
        ...
