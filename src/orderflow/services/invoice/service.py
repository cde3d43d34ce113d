"""Invoice generator implementations."""

from pathlib import PurePath

from orderflow.services.reporting import report
from orderflow.system import LoggerFactory

logger = LoggerFactory.get_logger()


class InvoiceService:
    """Reports the invoice under the target name it was given."""

    def resolve_target(self, target_name: str) -> str:
        """Return the artifact name this generator reports for target_name."""
        return target_name

    def generate_invoice(self, target_name: str) -> None:
        artifact = self.resolve_target(target_name)
        logger.debug("invoice.generated", target_name=target_name, artifact=artifact)
        report(f"Invoice generated: {artifact}")


class FormatInvoiceService(InvoiceService):
    """Invoice variant that selects an output format by file extension.

    The extension of the target name is replaced (or appended when the target
    has none). Purely a naming convention: nothing is written. Targets without
    a file name component ("", ".", "dir/..") are reported unchanged.

    Example:
        >>> invoices = FormatInvoiceService(extension="html")
        >>> invoices.generate_invoice("order_123.pdf")
        Invoice generated: order_123.html
    """

    def __init__(self, extension: str = "html") -> None:
        extension = extension.lstrip(".")
        if not extension:
            raise ValueError("Invoice extension cannot be empty")
        self.extension = extension

    def resolve_target(self, target_name: str) -> str:
        path = PurePath(target_name)
        if not path.name or path.name == "..":
            return target_name
        return str(path.with_suffix(f".{self.extension}"))
