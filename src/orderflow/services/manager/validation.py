"""Input validation policy for order processing.

The reference behaviour accepts every input as-is ("permissive"). The
"strict" policy rejects obviously broken orders before any capability runs,
so an order is either processed in full or not at all.
"""

from orderflow.system.config import ValidationPolicy


class ValidationError(ValueError):
    """Order input rejected by the strict validation policy.

    Attributes:
        field: Name of the offending argument
        value: The rejected value
    """

    def __init__(self, field: str, value: object, reason: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field} {value!r}: {reason}")


class OrderValidator:
    """Checks order arguments according to a validation policy.

    Strict rules:
    - price must be >= 0
    - quantity must be >= 0
    - address must not be empty or blank
    - invoice_target must not be empty or blank

    Customer name and destination are never checked.

    Example:
        >>> OrderValidator("strict").validate(-1.0, 2, "123 Main St", "order.pdf")
        Traceback (most recent call last):
        ...
        ValidationError: Invalid price -1.0: must not be negative
    """

    def __init__(self, policy: ValidationPolicy = "permissive") -> None:
        if policy not in ("permissive", "strict"):
            raise ValueError(f"Unknown validation policy: {policy}. Must be 'permissive' or 'strict'")
        self.policy = policy

    @property
    def is_strict(self) -> bool:
        return self.policy == "strict"

    def validate(self, price: float, quantity: int, address: str, invoice_target: str) -> None:
        """Raise ValidationError on the first rule violation (strict policy only)."""
        if not self.is_strict:
            return

        if price < 0:
            raise ValidationError("price", price, "must not be negative")
        if quantity < 0:
            raise ValidationError("quantity", quantity, "must not be negative")
        if not address or not address.strip():
            raise ValidationError("address", address, "must not be empty")
        if not invoice_target or not invoice_target.strip():
            raise ValidationError("invoice_target", invoice_target, "must not be empty")
